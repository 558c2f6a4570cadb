"""Registry reconciliation DTOs."""

from dataclasses import dataclass, field

from wikiguard.domain.entities import Permission, StoredPermission


@dataclass
class RegistryDiff:
    """Drift between the permission registry and the permission store."""

    missing: list[Permission] = field(default_factory=list)  # in registry, not stored
    extra: list[StoredPermission] = field(default_factory=list)  # stored, not in registry
    mismatched: list[StoredPermission] = field(default_factory=list)  # description differs

    @property
    def is_clean(self) -> bool:
        return not (self.missing or self.extra or self.mismatched)


@dataclass
class ReconcileResult:
    """Number of permission rows changed by a reconciliation run."""

    added: int = 0
    updated: int = 0
    removed: int = 0


@dataclass
class SeedResult:
    """Outcome of seeding the built-in groups."""

    groups_created: int = 0
    permissions_granted: int = 0
