"""Group administration DTOs."""

from dataclasses import dataclass


@dataclass
class GroupCreateInput:
    """Input for creating a group."""

    name: str
    description: str | None = None
    allow_user_assignment: bool = True


@dataclass
class ChangeCount:
    """Rows added and removed by a set-style update."""

    added: int = 0
    removed: int = 0
