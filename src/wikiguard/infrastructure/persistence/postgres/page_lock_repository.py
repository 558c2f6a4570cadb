"""PostgreSQL page lock repository implementation."""

from datetime import datetime

from psycopg import AsyncConnection

from wikiguard.domain.entities import EditLock

_COLUMNS = "id, locked_by, locked_at, lock_expires_at"

SELECT_LOCK_SQL = f"SELECT {_COLUMNS} FROM wiki_pages WHERE id = %(page_id)s"

# Row lock held until the unit of work ends, so the holder read here is the
# one the update below is decided against.
SELECT_LOCK_FOR_UPDATE_SQL = SELECT_LOCK_SQL + " FOR UPDATE"

ACQUIRE_LOCK_SQL = (
    "UPDATE wiki_pages SET "
    "locked_by = %(user_id)s, "
    "locked_at = CASE "
    "WHEN locked_by = %(user_id)s AND lock_expires_at > %(now)s THEN locked_at "
    "ELSE %(now)s END, "
    "lock_expires_at = %(expires_at)s "
    "WHERE id = %(page_id)s AND ("
    "locked_by IS NULL "
    "OR locked_by = %(user_id)s "
    "OR lock_expires_at IS NULL "
    "OR lock_expires_at <= %(now)s) "
    f"RETURNING {_COLUMNS}"
)

CLEAR_LOCK_SQL = (
    "UPDATE wiki_pages SET locked_by = NULL, locked_at = NULL, lock_expires_at = NULL "
    "WHERE id = %(page_id)s AND locked_by = %(holder)s"
)

LIST_ACTIVE_LOCKS_SQL = (
    f"SELECT {_COLUMNS} FROM wiki_pages "
    "WHERE locked_by IS NOT NULL AND lock_expires_at > %(now)s "
    "ORDER BY locked_at DESC, id LIMIT %(limit)s"
)


def _row_to_lock(r: tuple) -> EditLock:
    return EditLock(
        page_id=r[0],
        holder_user_id=r[1],
        acquired_at=r[2],
        expires_at=r[3],
    )


class PostgresPageLockRepository:
    """Edit lock stored in the three lock columns of wiki_pages."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self, page_id: int) -> EditLock | None:
        """Get lock columns of page, None if page does not exist."""
        cur = await self._conn.execute(SELECT_LOCK_SQL, {"page_id": page_id})
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_lock(r)

    async def try_acquire(
        self,
        page_id: int,
        user_id: int,
        now: datetime,
        expires_at: datetime,
    ) -> EditLock | None:
        """Take or refresh the lock under a row lock.

        Returns the other user's lock unchanged when it is still live.
        """
        cur = await self._conn.execute(SELECT_LOCK_FOR_UPDATE_SQL, {"page_id": page_id})
        r = await cur.fetchone()
        if not r:
            return None
        current = _row_to_lock(r)
        if current.is_held(now) and current.holder_user_id != user_id:
            return current

        cur = await self._conn.execute(
            ACQUIRE_LOCK_SQL,
            {
                "page_id": page_id,
                "user_id": user_id,
                "now": now,
                "expires_at": expires_at,
            },
        )
        r = await cur.fetchone()
        if not r:
            return current
        return _row_to_lock(r)

    async def clear(self, page_id: int, holder_user_id: int) -> bool:
        """Clear lock if still held by holder_user_id."""
        cur = await self._conn.execute(
            CLEAR_LOCK_SQL,
            {"page_id": page_id, "holder": holder_user_id},
        )
        return cur.rowcount > 0

    async def list_active(self, now: datetime, limit: int) -> list[EditLock]:
        """List live locks, newest first."""
        cur = await self._conn.execute(LIST_ACTIVE_LOCKS_SQL, {"now": now, "limit": limit})
        rows = await cur.fetchall()
        return [_row_to_lock(r) for r in rows]
