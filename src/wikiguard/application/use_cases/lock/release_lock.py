"""Release edit lock use case."""

import logging

from wikiguard.application.ports import Clock
from wikiguard.domain.exceptions import Forbidden, NotFound

logger = logging.getLogger(__name__)


class ReleaseEditLockUseCase:
    """Give up the edit lease on a page, or force it free as an administrator."""

    def __init__(self, unit_of_work_factory: type, clock: Clock) -> None:
        self._uow_factory = unit_of_work_factory
        self._clock = clock

    async def execute(self, page_id: int, user_id: int, is_admin: bool = False) -> None:
        """Release lock. Releasing an unlocked or expired page is a no-op."""
        now = self._clock.now()
        async with self._uow_factory() as uow:
            lock = await uow.page_locks.get(page_id)
            if lock is None:
                raise NotFound("WikiPage", str(page_id))
            if not lock.is_held(now):
                return

            holder = lock.holder_user_id
            if holder != user_id and not is_admin:
                raise Forbidden(f"User {user_id} does not hold the lock on page {page_id}")

            # Conditional on the holder we just read: if the lease lapsed and
            # someone else took it meanwhile, their lock is left alone.
            cleared = await uow.page_locks.clear(page_id, holder)

        if cleared and holder != user_id:
            logger.warning(
                "Administrator %s released lock of user %s on page %s",
                user_id,
                holder,
                page_id,
            )
        elif cleared:
            logger.debug("User %s released page %s", user_id, page_id)
