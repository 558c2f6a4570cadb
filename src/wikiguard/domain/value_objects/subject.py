"""Subject being authorized: a concrete user or the guest pseudo-user."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    """Authenticated user, identified by the integer id of the session."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("UserId value must be an int")
        if self.value <= 0:
            raise ValueError("UserId must be positive")


@dataclass(frozen=True)
class Guest:
    """Unauthenticated visitor. Resolved through the reserved guest group."""


GUEST = Guest()

Subject = UserId | Guest


def subject_for(user_id: int | None) -> Subject:
    """Map an optional session user id to a subject."""
    if user_id is None:
        return GUEST
    return UserId(user_id)
