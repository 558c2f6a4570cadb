"""Reconcile permission store with registry use case."""

import logging
from datetime import UTC, datetime
from uuid import uuid4

from wikiguard.application.dto.registry_dto import ReconcileResult
from wikiguard.application.use_cases.registry.diff_registry import compute_diff
from wikiguard.domain.entities import StoredPermission
from wikiguard.domain.permission_registry import PermissionRegistry

logger = logging.getLogger(__name__)


class ReconcileRegistryUseCase:
    """Bring the permission store in line with the registry.

    Missing rows are inserted and stale descriptions overwritten. Rows unknown
    to the registry are deleted only when ``remove_extra`` is set, since that
    also drops every group grant referring to them.
    """

    def __init__(self, unit_of_work_factory: type, registry: PermissionRegistry) -> None:
        self._uow_factory = unit_of_work_factory
        self._registry = registry

    async def execute(self, remove_extra: bool = False) -> ReconcileResult:
        result = ReconcileResult()
        async with self._uow_factory() as uow:
            diff = await compute_diff(self._registry, uow)
            now = datetime.now(UTC)

            for p in diff.missing:
                await uow.permissions.create(
                    StoredPermission(
                        id=uuid4(),
                        name=p.identifier,
                        module=p.module,
                        resource=p.resource,
                        action=p.action.value,
                        description=p.description,
                        created_at=now,
                    )
                )
                result.added += 1

            for stored in diff.mismatched:
                expected = self._registry.get(stored.name)
                await uow.permissions.update_description(stored.id, expected.description)
                result.updated += 1

            if remove_extra:
                for stored in diff.extra:
                    await uow.permissions.delete(stored.id)
                    result.removed += 1
            elif diff.extra:
                logger.warning(
                    "%d stored permission(s) not in registry were kept: %s",
                    len(diff.extra),
                    ", ".join(s.name for s in diff.extra),
                )

        logger.info(
            "Permission registry reconciled: added=%d updated=%d removed=%d",
            result.added,
            result.updated,
            result.removed,
        )
        return result
