"""Unit tests for subjects."""

import pytest

from wikiguard.domain.value_objects import GUEST, Guest, UserId, subject_for


def test_user_id_requires_positive_int() -> None:
    assert UserId(7).value == 7
    with pytest.raises(ValueError):
        UserId(0)
    with pytest.raises(ValueError):
        UserId(-3)


@pytest.mark.parametrize("value", ["7", 7.0, True, None])
def test_user_id_rejects_non_int(value: object) -> None:
    with pytest.raises(TypeError):
        UserId(value)  # type: ignore[arg-type]


def test_subjects_are_distinct_values() -> None:
    assert UserId(1) == UserId(1)
    assert UserId(1) != UserId(2)
    assert Guest() == GUEST
    assert GUEST != UserId(1)


def test_subject_for() -> None:
    assert subject_for(None) is GUEST
    assert subject_for(5) == UserId(5)
