"""Diff registry against permission store use case."""

from wikiguard.application.dto.registry_dto import RegistryDiff
from wikiguard.application.ports import UnitOfWork
from wikiguard.domain.permission_registry import PermissionRegistry


async def compute_diff(registry: PermissionRegistry, uow: UnitOfWork) -> RegistryDiff:
    """Compare registry with stored rows inside an open unit of work."""
    stored = await uow.permissions.list_all()
    stored_names = {s.name for s in stored}

    diff = RegistryDiff()
    diff.missing = [
        p for p in registry.list_permissions() if p.identifier not in stored_names
    ]
    for s in stored:
        expected = registry.get(s.name)
        if expected is None:
            diff.extra.append(s)
        elif (s.description or None) != (expected.description or None):
            diff.mismatched.append(s)
    return diff


class DiffRegistryUseCase:
    """Report drift between the compiled-in registry and the permission store."""

    def __init__(self, unit_of_work_factory: type, registry: PermissionRegistry) -> None:
        self._uow_factory = unit_of_work_factory
        self._registry = registry

    async def execute(self) -> RegistryDiff:
        async with self._uow_factory() as uow:
            return await compute_diff(self._registry, uow)
