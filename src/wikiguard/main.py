"""Composition root and startup entry point."""

import asyncio
import logging
from dataclasses import dataclass
from datetime import timedelta

from psycopg_pool import AsyncConnectionPool

from wikiguard import __version__
from wikiguard.application.ports import Clock
from wikiguard.application.use_cases.group.create_group import CreateGroupUseCase
from wikiguard.application.use_cases.group.delete_group import DeleteGroupUseCase
from wikiguard.application.use_cases.group.manage_members import (
    AddGroupMembersUseCase,
    RemoveGroupMembersUseCase,
)
from wikiguard.application.use_cases.group.set_group_permissions import (
    SetGroupPermissionsUseCase,
)
from wikiguard.application.use_cases.lock.acquire_lock import AcquireEditLockUseCase
from wikiguard.application.use_cases.lock.get_lock_status import GetLockStatusUseCase
from wikiguard.application.use_cases.lock.list_active_locks import ListActiveLocksUseCase
from wikiguard.application.use_cases.lock.release_lock import ReleaseEditLockUseCase
from wikiguard.application.use_cases.page_permission.set_page_override import (
    ClearPageOverrideUseCase,
    SetPageOverrideUseCase,
)
from wikiguard.application.use_cases.registry.diff_registry import DiffRegistryUseCase
from wikiguard.application.use_cases.registry.reconcile_registry import (
    ReconcileRegistryUseCase,
)
from wikiguard.application.use_cases.registry.seed_default_groups import (
    SeedDefaultGroupsUseCase,
)
from wikiguard.config import Settings, get_settings
from wikiguard.domain.permission_registry import PermissionRegistry
from wikiguard.infrastructure.catalog.catalog_loader import build_registry
from wikiguard.infrastructure.clock import SystemClock
from wikiguard.infrastructure.permission.authorization_resolver import (
    GroupAuthorizationResolver,
)
from wikiguard.infrastructure.persistence.postgres.connection import create_pool, pool_opened
from wikiguard.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from wikiguard.logging_config import configure_logging

logger = logging.getLogger(__name__)


@dataclass
class WikiGuard:
    """Wired components handed to request handlers."""

    registry: PermissionRegistry
    resolver: GroupAuthorizationResolver
    acquire_lock: AcquireEditLockUseCase
    release_lock: ReleaseEditLockUseCase
    lock_status: GetLockStatusUseCase
    list_active_locks: ListActiveLocksUseCase
    diff_registry: DiffRegistryUseCase
    reconcile_registry: ReconcileRegistryUseCase
    seed_default_groups: SeedDefaultGroupsUseCase
    create_group: CreateGroupUseCase
    delete_group: DeleteGroupUseCase
    set_group_permissions: SetGroupPermissionsUseCase
    add_group_members: AddGroupMembersUseCase
    remove_group_members: RemoveGroupMembersUseCase
    set_page_override: SetPageOverrideUseCase
    clear_page_override: ClearPageOverrideUseCase


def build_wikiguard(
    settings: Settings,
    unit_of_work_factory: type,
    registry: PermissionRegistry | None = None,
    clock: Clock | None = None,
) -> WikiGuard:
    """Wire use cases around a unit-of-work factory."""
    registry = registry or build_registry(settings.permission_catalog_path)
    clock = clock or SystemClock()
    uow_factory = unit_of_work_factory

    resolver = GroupAuthorizationResolver(
        uow_factory,
        registry,
        guest_group_name=settings.guest_group_name,
    )
    return WikiGuard(
        registry=registry,
        resolver=resolver,
        acquire_lock=AcquireEditLockUseCase(
            uow_factory,
            clock,
            default_lease=timedelta(minutes=settings.lock_lease_minutes),
        ),
        release_lock=ReleaseEditLockUseCase(uow_factory, clock),
        lock_status=GetLockStatusUseCase(uow_factory, clock),
        list_active_locks=ListActiveLocksUseCase(uow_factory, resolver, clock),
        diff_registry=DiffRegistryUseCase(uow_factory, registry),
        reconcile_registry=ReconcileRegistryUseCase(uow_factory, registry),
        seed_default_groups=SeedDefaultGroupsUseCase(
            uow_factory,
            registry,
            admin_group_name=settings.admin_group_name,
            guest_group_name=settings.guest_group_name,
        ),
        create_group=CreateGroupUseCase(uow_factory, resolver),
        delete_group=DeleteGroupUseCase(uow_factory, resolver),
        set_group_permissions=SetGroupPermissionsUseCase(uow_factory, resolver, registry),
        add_group_members=AddGroupMembersUseCase(uow_factory, resolver),
        remove_group_members=RemoveGroupMembersUseCase(uow_factory, resolver),
        set_page_override=SetPageOverrideUseCase(uow_factory, resolver, registry),
        clear_page_override=ClearPageOverrideUseCase(uow_factory, resolver, registry),
    )


def create_wikiguard(settings: Settings | None = None) -> tuple[WikiGuard, AsyncConnectionPool]:
    """Composition root - build components on a PostgreSQL pool.

    The pool is returned unopened; the caller owns its lifecycle.
    """
    settings = settings or get_settings()
    pool = create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    return build_wikiguard(settings, create_uow_factory(pool)), pool


async def startup(wikiguard: WikiGuard, settings: Settings) -> None:
    """Reconcile the permission store and seed built-in groups."""
    if not settings.reconcile_on_startup:
        logger.info("Startup reconciliation disabled")
        return
    result = await wikiguard.reconcile_registry.execute(
        remove_extra=settings.remove_extra_permissions
    )
    seeded = await wikiguard.seed_default_groups.execute()
    logger.info(
        "Startup complete: %d permission(s) added, %d updated, %d removed; "
        "%d group(s) created, %d grant(s) added",
        result.added,
        result.updated,
        result.removed,
        seeded.groups_created,
        seeded.permissions_granted,
    )


async def bootstrap(settings: Settings | None = None) -> None:
    """Open the pool, run startup reconciliation, close the pool."""
    settings = settings or get_settings()
    wikiguard, pool = create_wikiguard(settings)
    async with pool_opened(pool):
        await startup(wikiguard, settings)


def main() -> None:
    """CLI entry point: reconcile permissions against the configured database."""
    settings = get_settings()
    configure_logging(settings)
    logger.info("wikiguard v%s", __version__)
    asyncio.run(bootstrap(settings))
