"""Domain entities."""

from wikiguard.domain.entities.edit_lock import EditLock
from wikiguard.domain.entities.group import Group
from wikiguard.domain.entities.page_permission import PagePermission
from wikiguard.domain.entities.permission import Permission, StoredPermission, identifier_of

__all__ = [
    "EditLock",
    "Group",
    "PagePermission",
    "Permission",
    "StoredPermission",
    "identifier_of",
]
