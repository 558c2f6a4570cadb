"""Group repository port."""

from collections.abc import Sequence
from typing import Protocol
from uuid import UUID

from wikiguard.domain.entities import Group


class GroupRepository(Protocol):
    """Port for groups, their permissions and their members."""

    async def get_by_id(self, group_id: UUID) -> Group | None: ...

    async def get_by_name(self, name: str) -> Group | None: ...

    async def list_for_user(self, user_id: int) -> list[Group]: ...

    async def create(self, group: Group) -> Group: ...

    async def delete(self, group_id: UUID) -> None: ...

    async def list_permission_names(self, group_ids: Sequence[UUID]) -> list[str]: ...

    async def add_permissions(self, group_id: UUID, permission_ids: Sequence[UUID]) -> None: ...

    async def remove_permissions(self, group_id: UUID, permission_ids: Sequence[UUID]) -> None: ...

    async def list_member_ids(self, group_id: UUID) -> list[int]: ...

    async def add_members(self, group_id: UUID, user_ids: Sequence[int]) -> None: ...

    async def remove_members(self, group_id: UUID, user_ids: Sequence[int]) -> None: ...
