"""List active edit locks use case."""

from wikiguard.application.ports import AuthorizationResolver, Clock
from wikiguard.domain.entities import EditLock
from wikiguard.domain.exceptions import Forbidden, ValidationError
from wikiguard.domain.value_objects import Subject

MAX_LIMIT = 20


class ListActiveLocksUseCase:
    """Pages currently locked, for administrators looking for abandoned edits."""

    def __init__(
        self,
        unit_of_work_factory: type,
        resolver: AuthorizationResolver,
        clock: Clock,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._resolver = resolver
        self._clock = clock

    async def execute(self, actor: Subject, limit: int = 5) -> list[EditLock]:
        """Live locks, most recently acquired first. Expired leases are left out."""
        if not 1 <= limit <= MAX_LIMIT:
            raise ValidationError(f"limit must be between 1 and {MAX_LIMIT}")
        if not await self._resolver.has_permission(actor, "system:settings:read"):
            raise Forbidden("Actor cannot list edit locks")

        async with self._uow_factory() as uow:
            return await uow.page_locks.list_active(self._clock.now(), limit)
