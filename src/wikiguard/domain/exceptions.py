"""Domain exceptions."""

from datetime import datetime


class WikiGuardError(Exception):
    """Base exception for wikiguard."""

    pass


class InvalidPermissionIdentifier(WikiGuardError):
    """Identifier is malformed or not part of the permission registry."""

    def __init__(self, identifier: object) -> None:
        self.identifier = identifier
        super().__init__(f"Invalid permission identifier: {identifier!r}")


class Unauthorized(WikiGuardError):
    """No authenticated subject where one is required."""

    pass


class Forbidden(WikiGuardError):
    """Subject is not allowed to perform the requested operation."""

    pass


class LockConflict(WikiGuardError):
    """Page is held by another user with a lease that has not expired."""

    def __init__(
        self,
        page_id: int,
        holder_user_id: int | None,
        expires_at: datetime | None,
    ) -> None:
        self.page_id = page_id
        self.holder_user_id = holder_user_id
        self.expires_at = expires_at
        super().__init__(
            f"Page {page_id} is locked by user {holder_user_id} until {expires_at}"
        )

    def remaining(self, now: datetime) -> float:
        """Seconds left on the holder's lease (never negative)."""
        if self.expires_at is None:
            return 0.0
        return max((self.expires_at - now).total_seconds(), 0.0)


class NotFound(WikiGuardError):
    """Requested resource was not found."""

    def __init__(self, entity: str, key: str) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found: {key}")


class ValidationError(WikiGuardError):
    """Validation failed for input data."""

    pass
