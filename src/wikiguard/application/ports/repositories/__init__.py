"""Repository ports."""

from wikiguard.application.ports.repositories.group_repository import GroupRepository
from wikiguard.application.ports.repositories.page_lock_repository import (
    PageLockRepository,
)
from wikiguard.application.ports.repositories.page_permission_repository import (
    PagePermissionRepository,
)
from wikiguard.application.ports.repositories.permission_repository import (
    PermissionRepository,
)

__all__ = [
    "GroupRepository",
    "PageLockRepository",
    "PagePermissionRepository",
    "PermissionRepository",
]
