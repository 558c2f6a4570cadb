"""Authorization resolver port."""

from collections.abc import Sequence
from typing import Protocol

from wikiguard.domain.value_objects import Subject


class AuthorizationResolver(Protocol):
    """Port for answering whether a subject holds a permission."""

    async def has_permission(self, subject: Subject, permission: str) -> bool: ...

    async def has_any_permission(self, subject: Subject, permissions: Sequence[str]) -> bool: ...
