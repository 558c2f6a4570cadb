"""Permission registry: the closed catalog of permissions known to this build.

The registry is pure and immutable after construction, so a single instance can
be shared by every request. It is the only place that decides whether a
``module:resource:action`` string names a real permission.
"""

from collections.abc import Iterable

from wikiguard.domain.entities import Permission, identifier_of
from wikiguard.domain.exceptions import ValidationError
from wikiguard.domain.value_objects import PermissionAction

_A = PermissionAction

DEFAULT_PERMISSIONS: tuple[Permission, ...] = (
    # wiki
    Permission("wiki", "page", _A.CREATE, "Create new wiki pages"),
    Permission("wiki", "page", _A.READ, "Read wiki pages"),
    Permission("wiki", "page", _A.UPDATE, "Update wiki pages"),
    Permission("wiki", "page", _A.DELETE, "Delete wiki pages"),
    Permission("wiki", "page", _A.MOVE, "Move or rename wiki pages"),
    # system
    Permission("system", "settings", _A.READ, "View system settings"),
    Permission("system", "settings", _A.UPDATE, "Update system settings"),
    Permission("system", "permissions", _A.READ, "View system permissions"),
    Permission("system", "permissions", _A.UPDATE, "Update system permissions"),
    Permission("system", "users", _A.READ, "View user list"),
    Permission("system", "users", _A.CREATE, "Create new users"),
    Permission("system", "users", _A.UPDATE, "Update existing users"),
    Permission("system", "users", _A.DELETE, "Delete users"),
    Permission("system", "groups", _A.READ, "View group list"),
    Permission("system", "groups", _A.CREATE, "Create new groups"),
    Permission("system", "groups", _A.UPDATE, "Update existing groups"),
    Permission("system", "groups", _A.DELETE, "Delete groups"),
    # assets
    Permission("assets", "asset", _A.CREATE, "Upload assets (images, files, etc.)"),
    Permission("assets", "asset", _A.READ, "View assets"),
    Permission("assets", "asset", _A.UPDATE, "Update assets"),
    Permission("assets", "asset", _A.DELETE, "Delete assets"),
)


def parse_identifier(identifier: object) -> tuple[str, str, str] | None:
    """Split an identifier into (module, resource, action), or None if malformed.

    Only the shape is checked here; use ``PermissionRegistry.is_valid_identifier``
    to know whether the permission exists.
    """
    if not isinstance(identifier, str):
        return None
    parts = identifier.split(":")
    if len(parts) != 3 or not all(parts):
        return None
    return parts[0], parts[1], parts[2]


class PermissionRegistry:
    """Immutable lookup table over a permission catalog."""

    def __init__(self, permissions: Iterable[Permission] = DEFAULT_PERMISSIONS) -> None:
        ordered: list[Permission] = []
        by_id: dict[str, Permission] = {}
        for p in permissions:
            ident = p.identifier
            if ident in by_id:
                raise ValidationError(f"Duplicate permission identifier: {ident}")
            by_id[ident] = p
            ordered.append(p)
        self._permissions = tuple(ordered)
        self._by_id = by_id

    def __len__(self) -> int:
        return len(self._permissions)

    def __contains__(self, identifier: object) -> bool:
        return self.is_valid_identifier(identifier)

    def list_permissions(self) -> list[Permission]:
        """All permissions, in catalog-declaration order."""
        return list(self._permissions)

    def list_identifiers(self) -> list[str]:
        return [p.identifier for p in self._permissions]

    @staticmethod
    def identifier_of(permission: Permission) -> str:
        return identifier_of(permission.module, permission.resource, permission.action.value)

    def is_valid_identifier(self, identifier: object) -> bool:
        """True iff identifier names a permission in this catalog. Never raises."""
        return isinstance(identifier, str) and identifier in self._by_id

    def get(self, identifier: str) -> Permission | None:
        if not self.is_valid_identifier(identifier):
            return None
        return self._by_id[identifier]

    def available_modules(self) -> list[str]:
        return list(dict.fromkeys(p.module for p in self._permissions))

    def available_resources(self) -> list[str]:
        return list(dict.fromkeys(p.resource for p in self._permissions))

    def available_actions(self) -> list[PermissionAction]:
        return list(dict.fromkeys(p.action for p in self._permissions))
