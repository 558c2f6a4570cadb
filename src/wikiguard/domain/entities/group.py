"""Group entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Group:
    """Named collection of permissions that users (or guests) belong to."""

    id: UUID
    name: str
    description: str | None
    created_at: datetime
    is_system: bool = False
    is_editable: bool = True
    allow_user_assignment: bool = True
