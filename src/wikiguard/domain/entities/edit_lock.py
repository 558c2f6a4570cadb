"""Edit lock embedded in a wiki page."""

from dataclasses import dataclass
from datetime import datetime

from wikiguard.domain.value_objects import LockStatus


@dataclass
class EditLock:
    """Lock columns of one wiki page.

    A lock whose ``expires_at`` is not in the future is not held, whatever the
    other columns say. Nothing clears stale rows; every reader applies this
    rule instead.
    """

    page_id: int
    holder_user_id: int | None = None
    acquired_at: datetime | None = None
    expires_at: datetime | None = None

    def is_held(self, now: datetime) -> bool:
        return (
            self.holder_user_id is not None
            and self.expires_at is not None
            and self.expires_at > now
        )

    def is_held_by(self, user_id: int, now: datetime) -> bool:
        return self.is_held(now) and self.holder_user_id == user_id

    def status(self, now: datetime) -> LockStatus:
        if not self.is_held(now):
            return LockStatus(locked=False)
        return LockStatus(
            locked=True,
            holder_user_id=self.holder_user_id,
            expires_at=self.expires_at,
        )
