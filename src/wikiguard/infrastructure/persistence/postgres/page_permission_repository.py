"""PostgreSQL page permission override repository implementation."""

from collections.abc import Sequence
from uuid import UUID

from psycopg import AsyncConnection

from wikiguard.domain.entities import PagePermission
from wikiguard.domain.value_objects import PagePermissionType

_SELECT = (
    "SELECT pp.id, pp.page_id, p.name, pp.permission_type, pp.created_at, pp.group_id "
    "FROM page_permissions pp JOIN permissions p ON p.id = pp.permission_id "
)


def _row_to_override(r: tuple) -> PagePermission:
    return PagePermission(
        id=r[0],
        page_id=r[1],
        permission_name=r[2],
        permission_type=PagePermissionType(r[3]),
        created_at=r[4],
        group_id=r[5],
    )


class PostgresPagePermissionRepository:
    """Page overrides in page_permissions, addressed by permission identifier."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_applicable(
        self,
        page_id: int,
        permission_name: str,
        group_ids: Sequence[UUID],
    ) -> list[PagePermission]:
        """Overrides on page for permission, for the groups or for everyone."""
        cur = await self._conn.execute(
            _SELECT
            + "WHERE pp.page_id = %s AND p.name = %s "
            "AND (pp.group_id IS NULL OR pp.group_id = ANY(%s::uuid[]))",
            (page_id, permission_name, list(group_ids)),
        )
        rows = await cur.fetchall()
        return [_row_to_override(r) for r in rows]

    async def get(
        self,
        page_id: int,
        permission_name: str,
        group_id: UUID | None,
    ) -> PagePermission | None:
        """Get override for exact (page, permission, group) target."""
        cur = await self._conn.execute(
            _SELECT
            + "WHERE pp.page_id = %s AND p.name = %s "
            "AND pp.group_id IS NOT DISTINCT FROM %s::uuid",
            (page_id, permission_name, group_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_override(r)

    async def create(self, override: PagePermission) -> PagePermission:
        """Create override."""
        await self._conn.execute(
            "INSERT INTO page_permissions "
            "(id, page_id, group_id, permission_id, permission_type, created_at) "
            "SELECT %s, %s, %s, id, %s, %s FROM permissions WHERE name = %s",
            (
                override.id,
                override.page_id,
                override.group_id,
                override.permission_type.value,
                override.created_at,
                override.permission_name,
            ),
        )
        return override

    async def update(self, override: PagePermission) -> None:
        """Update override kind."""
        await self._conn.execute(
            "UPDATE page_permissions SET permission_type = %s WHERE id = %s",
            (override.permission_type.value, override.id),
        )

    async def delete(self, override_id: UUID) -> None:
        """Delete override."""
        await self._conn.execute(
            "DELETE FROM page_permissions WHERE id = %s",
            (override_id,),
        )
