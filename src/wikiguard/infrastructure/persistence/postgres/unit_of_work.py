"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool

from wikiguard.infrastructure.persistence.postgres.group_repository import (
    PostgresGroupRepository,
)
from wikiguard.infrastructure.persistence.postgres.page_lock_repository import (
    PostgresPageLockRepository,
)
from wikiguard.infrastructure.persistence.postgres.page_permission_repository import (
    PostgresPagePermissionRepository,
)
from wikiguard.infrastructure.persistence.postgres.permission_repository import (
    PostgresPermissionRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._permissions = PostgresPermissionRepository(self._conn)
        self._groups = PostgresGroupRepository(self._conn)
        self._page_locks = PostgresPageLockRepository(self._conn)
        self._page_permissions = PostgresPagePermissionRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def permissions(self) -> PostgresPermissionRepository:
        return self._permissions

    @property
    def groups(self) -> PostgresGroupRepository:
        return self._groups

    @property
    def page_locks(self) -> PostgresPageLockRepository:
        return self._page_locks

    @property
    def page_permissions(self) -> PostgresPagePermissionRepository:
        return self._page_permissions

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
