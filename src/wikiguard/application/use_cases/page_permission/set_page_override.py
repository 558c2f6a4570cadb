"""Set and clear page permission override use cases."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from wikiguard.application.ports import AuthorizationResolver
from wikiguard.domain.entities import PagePermission
from wikiguard.domain.exceptions import Forbidden, InvalidPermissionIdentifier, NotFound
from wikiguard.domain.permission_registry import PermissionRegistry
from wikiguard.domain.value_objects import PagePermissionType, Subject


class SetPageOverrideUseCase:
    """Allow or deny one permission on one page, for a group or for everyone."""

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
        page_id: int,
        permission: str,
        permission_type: PagePermissionType,
        group_id: UUID | None = None,
    ) -> PagePermission:
        """Create or overwrite the override. ``group_id=None`` targets every subject."""
        if not self._registry.is_valid_identifier(permission):
            raise InvalidPermissionIdentifier(permission)
        if not await self._resolver.has_permission(actor, "system:permissions:update"):
            raise Forbidden("Actor cannot manage page permissions")

        async with self._uow_factory() as uow:
            if await uow.page_locks.get(page_id) is None:
                raise NotFound("WikiPage", str(page_id))
            if group_id is not None and not await uow.groups.get_by_id(group_id):
                raise NotFound("Group", str(group_id))
            if not await uow.permissions.get_by_name(permission):
                raise NotFound("Permission", permission)

            existing = await uow.page_permissions.get(page_id, permission, group_id)
            if existing:
                existing.permission_type = PagePermissionType(permission_type)
                await uow.page_permissions.update(existing)
                return existing

            override = PagePermission(
                id=uuid4(),
                page_id=page_id,
                permission_name=permission,
                permission_type=PagePermissionType(permission_type),
                created_at=datetime.now(UTC),
                group_id=group_id,
            )
            return await uow.page_permissions.create(override)


class ClearPageOverrideUseCase:
    """Remove an override so the page falls back to group permissions."""

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
        page_id: int,
        permission: str,
        group_id: UUID | None = None,
    ) -> None:
        if not self._registry.is_valid_identifier(permission):
            raise InvalidPermissionIdentifier(permission)
        if not await self._resolver.has_permission(actor, "system:permissions:update"):
            raise Forbidden("Actor cannot manage page permissions")

        async with self._uow_factory() as uow:
            existing = await uow.page_permissions.get(page_id, permission, group_id)
            if not existing:
                raise NotFound("PagePermission", f"{page_id}/{permission}/{group_id}")
            await uow.page_permissions.delete(existing.id)
