"""Permission store port."""

from typing import Protocol
from uuid import UUID

from wikiguard.domain.entities import StoredPermission


class PermissionRepository(Protocol):
    """Port for persisted permission rows."""

    async def list_all(self) -> list[StoredPermission]: ...

    async def get_by_name(self, name: str) -> StoredPermission | None: ...

    async def create(self, permission: StoredPermission) -> StoredPermission: ...

    async def update_description(self, permission_id: UUID, description: str | None) -> None: ...

    async def delete(self, permission_id: UUID) -> None: ...
