"""Authorization resolver - checks subjects against group permissions."""

import logging
from collections.abc import Sequence
from uuid import UUID

from wikiguard.application.ports import UnitOfWork
from wikiguard.domain.entities import Group
from wikiguard.domain.exceptions import InvalidPermissionIdentifier
from wikiguard.domain.permission_registry import PermissionRegistry
from wikiguard.domain.value_objects import Guest, PagePermissionType, Subject, UserId

logger = logging.getLogger(__name__)


class GroupAuthorizationResolver:
    """Grants a permission iff one of the subject's groups carries it.

    Users resolve through their memberships, guests through the reserved guest
    group only. There is no admin shortcut: administrators are simply members
    of a group holding every permission.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        registry: PermissionRegistry,
        guest_group_name: str = "Guests",
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._registry = registry
        self._guest_group_name = guest_group_name

    async def has_permission(self, subject: Subject, permission: str) -> bool:
        """Check if subject has permission."""
        self._require_valid(permission)
        async with self._uow_factory() as uow:
            granted = await self._granted(uow, subject)
        return permission in granted

    async def has_any_permission(self, subject: Subject, permissions: Sequence[str]) -> bool:
        """Check if subject has at least one of permissions. Empty list is False."""
        if isinstance(permissions, str):
            raise TypeError("permissions must be a sequence of identifiers, not a string")
        permissions = list(permissions)
        for p in permissions:
            self._require_valid(p)
        if not permissions:
            return False
        async with self._uow_factory() as uow:
            granted = await self._granted(uow, subject)
        return any(p in granted for p in permissions)

    async def has_page_permission(self, subject: Subject, page_id: int, permission: str) -> bool:
        """Check permission on one page.

        Page overrides for the subject's groups, or for everyone, come first:
        any deny wins, otherwise any allow grants. Without overrides the
        group-based answer applies.
        """
        self._require_valid(permission)
        async with self._uow_factory() as uow:
            group_ids = await self._group_ids(uow, subject)
            overrides = await uow.page_permissions.list_applicable(page_id, permission, group_ids)
            kinds = {o.permission_type for o in overrides}
            if PagePermissionType.DENY in kinds:
                return False
            if PagePermissionType.ALLOW in kinds:
                return True
            granted = await self._permissions_of(uow, group_ids)
        return permission in granted

    async def get_subject_groups(self, subject: Subject) -> list[Group]:
        """Groups the subject belongs to (the guest group for guests)."""
        async with self._uow_factory() as uow:
            return await self._groups(uow, subject)

    async def get_subject_permissions(self, subject: Subject) -> list[str]:
        """Sorted identifiers granted to the subject through its groups."""
        async with self._uow_factory() as uow:
            granted = await self._granted(uow, subject)
        return sorted(granted)

    def _require_valid(self, permission: object) -> None:
        if not self._registry.is_valid_identifier(permission):
            logger.error("Invalid permission identifier: %r", permission)
            raise InvalidPermissionIdentifier(permission)

    async def _groups(self, uow: UnitOfWork, subject: Subject) -> list[Group]:
        if isinstance(subject, UserId):
            return await uow.groups.list_for_user(subject.value)
        if isinstance(subject, Guest):
            guest_group = await uow.groups.get_by_name(self._guest_group_name)
            if guest_group is None:
                logger.warning("Guest group %r does not exist", self._guest_group_name)
                return []
            return [guest_group]
        raise TypeError(f"Unsupported subject: {subject!r}")

    async def _group_ids(self, uow: UnitOfWork, subject: Subject) -> list[UUID]:
        return [g.id for g in await self._groups(uow, subject)]

    async def _permissions_of(self, uow: UnitOfWork, group_ids: list[UUID]) -> frozenset[str]:
        if not group_ids:
            return frozenset()
        return frozenset(await uow.groups.list_permission_names(group_ids))

    async def _granted(self, uow: UnitOfWork, subject: Subject) -> frozenset[str]:
        return await self._permissions_of(uow, await self._group_ids(uow, subject))
