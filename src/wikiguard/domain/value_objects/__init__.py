"""Domain value objects."""

from wikiguard.domain.value_objects.lock_status import LockStatus
from wikiguard.domain.value_objects.page_permission_type import PagePermissionType
from wikiguard.domain.value_objects.permission_action import PermissionAction
from wikiguard.domain.value_objects.subject import GUEST, Guest, Subject, UserId, subject_for

__all__ = [
    "GUEST",
    "Guest",
    "LockStatus",
    "PagePermissionType",
    "PermissionAction",
    "Subject",
    "UserId",
    "subject_for",
]
