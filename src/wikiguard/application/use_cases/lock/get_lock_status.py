"""Get edit lock status use case."""

from wikiguard.application.ports import Clock
from wikiguard.domain.exceptions import NotFound
from wikiguard.domain.value_objects import LockStatus


class GetLockStatusUseCase:
    """Report whether a page is currently locked, and by whom."""

    def __init__(self, unit_of_work_factory: type, clock: Clock) -> None:
        self._uow_factory = unit_of_work_factory
        self._clock = clock

    async def execute(self, page_id: int) -> LockStatus:
        async with self._uow_factory() as uow:
            lock = await uow.page_locks.get(page_id)
        if lock is None:
            raise NotFound("WikiPage", str(page_id))
        return lock.status(self._clock.now())
