"""Unit tests for the edit lock entity and lock status."""

from datetime import UTC, datetime, timedelta

from wikiguard.domain.entities import EditLock
from wikiguard.domain.value_objects import LockStatus

NOW = datetime(2024, 1, 1, tzinfo=UTC)


def test_unlocked_page_is_not_held() -> None:
    lock = EditLock(page_id=1)
    assert not lock.is_held(NOW)
    assert lock.status(NOW) == LockStatus(locked=False)


def test_lock_held_until_expiry() -> None:
    lock = EditLock(1, holder_user_id=3, acquired_at=NOW, expires_at=NOW + timedelta(minutes=5))
    assert lock.is_held(NOW)
    assert lock.is_held_by(3, NOW)
    assert not lock.is_held_by(4, NOW)
    assert lock.status(NOW) == LockStatus(True, 3, NOW + timedelta(minutes=5))


def test_expired_lock_reports_unlocked() -> None:
    expires = NOW + timedelta(minutes=5)
    lock = EditLock(1, holder_user_id=3, acquired_at=NOW, expires_at=expires)
    # expiry instant itself is already unlocked
    assert not lock.is_held(expires)
    assert lock.status(expires + timedelta(seconds=1)) == LockStatus(locked=False)


def test_holder_without_expiry_is_not_held() -> None:
    # holder account deleted: locked_by set to NULL, expiry kept
    lock = EditLock(1, holder_user_id=None, acquired_at=NOW, expires_at=NOW + timedelta(minutes=5))
    assert not lock.is_held(NOW)
    assert not EditLock(1, holder_user_id=3, acquired_at=NOW).is_held(NOW)
