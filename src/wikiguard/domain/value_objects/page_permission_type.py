"""Page-level override kinds."""

from enum import StrEnum


class PagePermissionType(StrEnum):
    """Explicit allow or deny on a single page."""

    ALLOW = "allow"
    DENY = "deny"
