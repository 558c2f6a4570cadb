"""PostgreSQL permission repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from wikiguard.domain.entities import StoredPermission

_COLUMNS = "id, name, module, resource, action, description, created_at"


def _row_to_permission(r: tuple) -> StoredPermission:
    return StoredPermission(
        id=r[0],
        name=r[1],
        module=r[2],
        resource=r[3],
        action=r[4],
        description=r[5],
        created_at=r[6],
    )


class PostgresPermissionRepository:
    """Permission store backed by the permissions table."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_all(self) -> list[StoredPermission]:
        """List every stored permission."""
        cur = await self._conn.execute(f"SELECT {_COLUMNS} FROM permissions ORDER BY name")
        rows = await cur.fetchall()
        return [_row_to_permission(r) for r in rows]

    async def get_by_name(self, name: str) -> StoredPermission | None:
        """Get permission by identifier."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permissions WHERE name = %s",
            (name,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_permission(r)

    async def create(self, permission: StoredPermission) -> StoredPermission:
        """Create permission."""
        await self._conn.execute(
            f"INSERT INTO permissions ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s)",
            (
                permission.id,
                permission.name,
                permission.module,
                permission.resource,
                permission.action,
                permission.description,
                permission.created_at,
            ),
        )
        return permission

    async def update_description(self, permission_id: UUID, description: str | None) -> None:
        """Overwrite permission description."""
        await self._conn.execute(
            "UPDATE permissions SET description = %s WHERE id = %s",
            (description, permission_id),
        )

    async def delete(self, permission_id: UUID) -> None:
        """Delete permission. Group and page grants cascade."""
        await self._conn.execute(
            "DELETE FROM permissions WHERE id = %s",
            (permission_id,),
        )
