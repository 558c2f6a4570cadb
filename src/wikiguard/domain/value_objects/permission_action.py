"""Permission actions."""

from enum import StrEnum


class PermissionAction(StrEnum):
    """Actions a permission can grant on a resource."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    MOVE = "move"
