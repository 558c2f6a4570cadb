"""Page permission override repository port."""

from collections.abc import Sequence
from typing import Protocol
from uuid import UUID

from wikiguard.domain.entities import PagePermission


class PagePermissionRepository(Protocol):
    """Port for page-level allow/deny overrides."""

    async def list_applicable(
        self,
        page_id: int,
        permission_name: str,
        group_ids: Sequence[UUID],
    ) -> list[PagePermission]:
        """Overrides for the given groups plus global (group-less) overrides."""
        ...

    async def get(
        self,
        page_id: int,
        permission_name: str,
        group_id: UUID | None,
    ) -> PagePermission | None: ...

    async def create(self, override: PagePermission) -> PagePermission: ...

    async def update(self, override: PagePermission) -> None: ...

    async def delete(self, override_id: UUID) -> None: ...
