"""Read-only view of a page's edit lock."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class LockStatus:
    """Lock state as observed at one instant. Expired leases report unlocked."""

    locked: bool
    holder_user_id: int | None = None
    expires_at: datetime | None = None
