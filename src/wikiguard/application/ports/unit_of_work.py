"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from wikiguard.application.ports.repositories.group_repository import GroupRepository
from wikiguard.application.ports.repositories.page_lock_repository import (
    PageLockRepository,
)
from wikiguard.application.ports.repositories.page_permission_repository import (
    PagePermissionRepository,
)
from wikiguard.application.ports.repositories.permission_repository import (
    PermissionRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def permissions(self) -> PermissionRepository: ...

    @property
    def groups(self) -> GroupRepository: ...

    @property
    def page_locks(self) -> PageLockRepository: ...

    @property
    def page_permissions(self) -> PagePermissionRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
