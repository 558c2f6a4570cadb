"""Page permission override entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from wikiguard.domain.value_objects import PagePermissionType


@dataclass
class PagePermission:
    """Allow/deny override of one permission on one page.

    ``group_id`` of None applies the override to every subject.
    """

    id: UUID
    page_id: int
    permission_name: str
    permission_type: PagePermissionType
    created_at: datetime
    group_id: UUID | None = None
