"""Acquire edit lock use case."""

import logging
from datetime import timedelta

from wikiguard.application.ports import Clock
from wikiguard.domain.entities import EditLock
from wikiguard.domain.exceptions import LockConflict, NotFound, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_LEASE = timedelta(minutes=15)


class AcquireEditLockUseCase:
    """Take, or renew, the exclusive edit lease on a wiki page."""

    def __init__(
        self,
        unit_of_work_factory: type,
        clock: Clock,
        default_lease: timedelta = DEFAULT_LEASE,
    ) -> None:
        if default_lease <= timedelta(0):
            raise ValidationError("Lease duration must be positive")
        self._uow_factory = unit_of_work_factory
        self._clock = clock
        self._default_lease = default_lease

    async def execute(
        self,
        page_id: int,
        user_id: int,
        lease_duration: timedelta | None = None,
    ) -> EditLock:
        """Lock page for user until now + lease.

        Calling again while holding the lock moves ``expires_at`` forward; this
        is how a client renews its lease. Raises LockConflict when another user
        holds a lease that has not expired yet.
        """
        lease = lease_duration if lease_duration is not None else self._default_lease
        if lease <= timedelta(0):
            raise ValidationError("Lease duration must be positive")

        now = self._clock.now()
        async with self._uow_factory() as uow:
            lock = await uow.page_locks.try_acquire(page_id, user_id, now, now + lease)
        if lock is None:
            raise NotFound("WikiPage", str(page_id))

        if lock.is_held_by(user_id, now):
            logger.debug("User %s holds page %s until %s", user_id, page_id, lock.expires_at)
            return lock

        logger.info(
            "Lock conflict on page %s: user %s blocked by user %s until %s",
            page_id,
            user_id,
            lock.holder_user_id,
            lock.expires_at,
        )
        raise LockConflict(page_id, lock.holder_user_id, lock.expires_at)
