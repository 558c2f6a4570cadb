"""PostgreSQL group repository implementation."""

from collections.abc import Sequence
from uuid import UUID

from psycopg import AsyncConnection

from wikiguard.domain.entities import Group

_COLUMNS = "id, name, description, created_at, is_system, is_editable, allow_user_assignment"


def _row_to_group(r: tuple) -> Group:
    return Group(
        id=r[0],
        name=r[1],
        description=r[2],
        created_at=r[3],
        is_system=r[4],
        is_editable=r[5],
        allow_user_assignment=r[6],
    )


class PostgresGroupRepository:
    """Groups with their permission grants and user memberships."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, group_id: UUID) -> Group | None:
        """Get group by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM groups WHERE id = %s",
            (group_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_group(r)

    async def get_by_name(self, name: str) -> Group | None:
        """Get group by name."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM groups WHERE name = %s",
            (name,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_group(r)

    async def list_for_user(self, user_id: int) -> list[Group]:
        """List groups user is a member of."""
        cur = await self._conn.execute(
            "SELECT g.id, g.name, g.description, g.created_at, g.is_system, "
            "g.is_editable, g.allow_user_assignment "
            "FROM groups g JOIN user_groups ug ON ug.group_id = g.id "
            "WHERE ug.user_id = %s ORDER BY g.name",
            (user_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_group(r) for r in rows]

    async def create(self, group: Group) -> Group:
        """Create group."""
        await self._conn.execute(
            f"INSERT INTO groups ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s)",
            (
                group.id,
                group.name,
                group.description,
                group.created_at,
                group.is_system,
                group.is_editable,
                group.allow_user_assignment,
            ),
        )
        return group

    async def delete(self, group_id: UUID) -> None:
        """Delete group. Memberships, grants and page overrides cascade."""
        await self._conn.execute(
            "DELETE FROM groups WHERE id = %s",
            (group_id,),
        )

    async def list_permission_names(self, group_ids: Sequence[UUID]) -> list[str]:
        """Union of permission identifiers granted to any of the groups."""
        if not group_ids:
            return []
        cur = await self._conn.execute(
            "SELECT DISTINCT p.name FROM group_permissions gp "
            "JOIN permissions p ON p.id = gp.permission_id "
            "WHERE gp.group_id = ANY(%s::uuid[])",
            (list(group_ids),),
        )
        rows = await cur.fetchall()
        return [r[0] for r in rows]

    async def add_permissions(self, group_id: UUID, permission_ids: Sequence[UUID]) -> None:
        """Grant permissions to group. Existing grants are kept."""
        if not permission_ids:
            return
        await self._conn.execute(
            "INSERT INTO group_permissions (group_id, permission_id) "
            "SELECT %s, unnest(%s::uuid[]) ON CONFLICT DO NOTHING",
            (group_id, list(permission_ids)),
        )

    async def remove_permissions(self, group_id: UUID, permission_ids: Sequence[UUID]) -> None:
        """Revoke permissions from group."""
        if not permission_ids:
            return
        await self._conn.execute(
            "DELETE FROM group_permissions WHERE group_id = %s AND permission_id = ANY(%s::uuid[])",
            (group_id, list(permission_ids)),
        )

    async def list_member_ids(self, group_id: UUID) -> list[int]:
        """List ids of users in group."""
        cur = await self._conn.execute(
            "SELECT user_id FROM user_groups WHERE group_id = %s ORDER BY user_id",
            (group_id,),
        )
        rows = await cur.fetchall()
        return [r[0] for r in rows]

    async def add_members(self, group_id: UUID, user_ids: Sequence[int]) -> None:
        """Add users to group."""
        if not user_ids:
            return
        await self._conn.execute(
            "INSERT INTO user_groups (user_id, group_id) "
            "SELECT unnest(%s::int[]), %s ON CONFLICT DO NOTHING",
            (list(user_ids), group_id),
        )

    async def remove_members(self, group_id: UUID, user_ids: Sequence[int]) -> None:
        """Remove users from group."""
        if not user_ids:
            return
        await self._conn.execute(
            "DELETE FROM user_groups WHERE group_id = %s AND user_id = ANY(%s::int[])",
            (group_id, list(user_ids)),
        )
