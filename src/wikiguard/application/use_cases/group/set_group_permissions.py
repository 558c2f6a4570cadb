"""Set group permissions use case."""

import logging
from collections.abc import Sequence
from uuid import UUID

from wikiguard.application.dto.group_dto import ChangeCount
from wikiguard.application.ports import AuthorizationResolver
from wikiguard.domain.exceptions import Forbidden, InvalidPermissionIdentifier, NotFound
from wikiguard.domain.permission_registry import PermissionRegistry
from wikiguard.domain.value_objects import Subject

logger = logging.getLogger(__name__)


class SetGroupPermissionsUseCase:
    """Replace the permission set of a group."""

    def __init__(
        self,
        unit_of_work_factory: type,
        resolver: AuthorizationResolver,
        registry: PermissionRegistry,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._resolver = resolver
        self._registry = registry

    async def execute(
        self,
        actor: Subject,
        group_id: UUID,
        permissions: Sequence[str],
    ) -> ChangeCount:
        """Make the group hold exactly ``permissions``. Returns rows added/removed."""
        for name in permissions:
            if not self._registry.is_valid_identifier(name):
                raise InvalidPermissionIdentifier(name)
        if not await self._resolver.has_permission(actor, "system:permissions:update"):
            raise Forbidden("Actor cannot update group permissions")

        wanted = set(permissions)
        async with self._uow_factory() as uow:
            group = await uow.groups.get_by_id(group_id)
            if not group:
                raise NotFound("Group", str(group_id))
            if not group.is_editable:
                raise Forbidden(f"Permissions of group {group.name} are not editable")

            stored = {p.name: p for p in await uow.permissions.list_all()}
            for name in wanted:
                if name not in stored:
                    # registry knows it, store does not: reconcile first
                    raise NotFound("Permission", name)

            current = set(await uow.groups.list_permission_names([group_id]))
            to_add = sorted(wanted - current)
            to_remove = sorted(current - wanted)
            if to_remove:
                await uow.groups.remove_permissions(
                    group_id, [stored[n].id for n in to_remove if n in stored]
                )
            if to_add:
                await uow.groups.add_permissions(group_id, [stored[n].id for n in to_add])

        logger.info(
            "Group %s permissions updated: +%d -%d", group.name, len(to_add), len(to_remove)
        )
        return ChangeCount(added=len(to_add), removed=len(to_remove))
