"""Permission entities - catalog entry and its persisted mirror."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from wikiguard.domain.value_objects import PermissionAction


def identifier_of(module: str, resource: str, action: str) -> str:
    """Build the ``module:resource:action`` identifier."""
    return f"{module}:{resource}:{action}"


@dataclass(frozen=True)
class Permission:
    """Permission declared in the registry catalog."""

    module: str
    resource: str
    action: PermissionAction
    description: str

    @property
    def identifier(self) -> str:
        return identifier_of(self.module, self.resource, self.action.value)


@dataclass
class StoredPermission:
    """Permission row in the permission store, keyed by its identifier."""

    id: UUID
    name: str
    module: str
    resource: str
    action: str
    description: str | None
    created_at: datetime | None = None
