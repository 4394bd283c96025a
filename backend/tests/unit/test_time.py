"""Unit tests for the shared expiry predicate."""

from datetime import datetime, timedelta, timezone

from blog.domain.time import ensure_utc, is_expired

NOW = datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)


def test_expiry_boundary_is_inclusive():
    assert is_expired(NOW, NOW) is True
    assert is_expired(NOW - timedelta(seconds=1), NOW) is True
    assert is_expired(NOW + timedelta(seconds=1), NOW) is False


def test_naive_datetimes_are_treated_as_utc():
    naive = datetime(2025, 3, 1, 10, 0)
    assert is_expired(naive, NOW) is False
    assert ensure_utc(naive).tzinfo is timezone.utc


def test_ensure_utc_converts_other_zones():
    plus_two = timezone(timedelta(hours=2))
    assert ensure_utc(datetime(2025, 3, 1, 11, 0, tzinfo=plus_two)) == NOW
    assert ensure_utc(None) is None
