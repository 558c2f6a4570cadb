"""Seed built-in groups use case."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4

from wikiguard.application.dto.registry_dto import SeedResult
from wikiguard.domain.entities import Group
from wikiguard.domain.permission_registry import PermissionRegistry

logger = logging.getLogger(__name__)

_READ_ONLY = ("wiki:page:read", "assets:asset:read")


@dataclass(frozen=True)
class _GroupSeed:
    name: str
    description: str
    is_system: bool
    is_editable: bool
    allow_user_assignment: bool
    permissions: tuple[str, ...] | None  # None = every registry permission


def default_group_seeds(admin_group_name: str, guest_group_name: str) -> list[_GroupSeed]:
    return [
        _GroupSeed(
            admin_group_name,
            "Full access to all wiki features",
            is_system=True,
            is_editable=False,
            allow_user_assignment=True,
            permissions=None,
        ),
        _GroupSeed(
            "Editors",
            "Can edit, create, and manage wiki content",
            is_system=False,
            is_editable=True,
            allow_user_assignment=True,
            permissions=(
                "wiki:page:create",
                "wiki:page:read",
                "wiki:page:update",
                "assets:asset:read",
            ),
        ),
        _GroupSeed(
            "Viewers",
            "Can only view wiki content",
            is_system=True,
            is_editable=True,
            allow_user_assignment=True,
            permissions=_READ_ONLY,
        ),
        _GroupSeed(
            guest_group_name,
            "Default group for non-authenticated users",
            is_system=True,
            is_editable=True,
            allow_user_assignment=False,
            permissions=_READ_ONLY,
        ),
    ]


class SeedDefaultGroupsUseCase:
    """Create the built-in groups and grant their default permissions.

    Safe to run repeatedly: existing groups are reused and only missing default
    grants are added. Grants are never removed.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        registry: PermissionRegistry,
        admin_group_name: str = "Administrators",
        guest_group_name: str = "Guests",
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._registry = registry
        self._seeds = default_group_seeds(admin_group_name, guest_group_name)

    async def execute(self) -> SeedResult:
        result = SeedResult()
        async with self._uow_factory() as uow:
            stored = {
                s.name: s
                for s in await uow.permissions.list_all()
                if self._registry.is_valid_identifier(s.name)
            }
            if not stored:
                logger.warning("Permission store is empty; reconcile the registry before seeding")

            for seed in self._seeds:
                group = await uow.groups.get_by_name(seed.name)
                if group is None:
                    group = await uow.groups.create(
                        Group(
                            id=uuid4(),
                            name=seed.name,
                            description=seed.description,
                            created_at=datetime.now(UTC),
                            is_system=seed.is_system,
                            is_editable=seed.is_editable,
                            allow_user_assignment=seed.allow_user_assignment,
                        )
                    )
                    result.groups_created += 1

                wanted = stored.keys() if seed.permissions is None else seed.permissions
                current = set(await uow.groups.list_permission_names([group.id]))
                to_add = [stored[n].id for n in wanted if n in stored and n not in current]
                if to_add:
                    await uow.groups.add_permissions(group.id, to_add)
                    result.permissions_granted += len(to_add)
                    logger.info("Granted %d permission(s) to %s", len(to_add), seed.name)

        return result
