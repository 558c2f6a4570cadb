"""Page lock repository port."""

from datetime import datetime
from typing import Protocol

from wikiguard.domain.entities import EditLock


class PageLockRepository(Protocol):
    """Port for the lock columns of wiki pages."""

    async def get(self, page_id: int) -> EditLock | None:
        """Current lock columns, or None if the page does not exist."""
        ...

    async def try_acquire(
        self,
        page_id: int,
        user_id: int,
        now: datetime,
        expires_at: datetime,
    ) -> EditLock | None:
        """Atomically take or refresh the lock.

        Succeeds iff the page is unlocked, expired at ``now``, or already held
        by ``user_id``. Returns the lock as it stands afterwards: the new lock
        on success, otherwise the other user's live lock read in the same
        atomic step. None when the page does not exist.
        """
        ...

    async def clear(self, page_id: int, holder_user_id: int) -> bool:
        """Clear the lock iff it is still held by ``holder_user_id``."""
        ...

    async def list_active(self, now: datetime, limit: int) -> list[EditLock]:
        """Locks whose lease runs past ``now``, most recently acquired first."""
        ...
