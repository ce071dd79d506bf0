from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from booking_service.app.services.expiry_service import find_expired, parse_time, should_expire


def make_booking(status="confirmada", end="2023-01-01T10:00:00Z", booking_id="1"):
    return SimpleNamespace(id=booking_id, status=status, end_date=end)


NOW = datetime(2023, 1, 2, tzinfo=timezone.utc)


def test_confirmed_booking_past_its_end_expires():
    assert should_expire(make_booking(), NOW) is True


@pytest.mark.parametrize("status", ["pendente", "confirmada", "visita"])
def test_every_non_terminal_status_expires(status):
    assert should_expire(make_booking(status=status), NOW)


@pytest.mark.parametrize("status", ["cancelada", "vencida"])
def test_terminal_statuses_never_expire(status):
    assert not should_expire(make_booking(status=status), NOW)


def test_end_equal_to_now_is_not_expired():
    booking = make_booking(end="2023-01-02T00:00:00Z")
    assert not should_expire(booking, NOW)


def test_naive_timestamps_are_read_as_utc():
    assert parse_time("2023-01-01T10:00:00") == datetime(2023, 1, 1, 10, tzinfo=timezone.utc)
    assert should_expire(make_booking(end="2023-01-01T23:59"), NOW)


def test_now_accepts_iso_string():
    assert should_expire(make_booking(), "2023-01-02T00:00:00Z")


def test_find_expired_skips_unparseable_end():
    bookings = [
        make_booking(booking_id="1"),
        make_booking(booking_id="2", end="not a date"),
        make_booking(booking_id="3", end="2099-01-01T00:00:00Z"),
    ]
    assert [b.id for b in find_expired(bookings, NOW)] == ["1"]
