import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from dateutil.parser import isoparse

from ..enum.booking_enum import TERMINAL_STATUSES

logger = logging.getLogger(__name__)


def parse_time(value) -> datetime:
    """
    Parse an ISO 8601 timestamp into an aware datetime.

    Timestamps without an offset are read as UTC. Raises ValueError for
    anything that is not ISO 8601.
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = isoparse(str(value))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def status_of(booking) -> str:
    return getattr(booking.status, "value", booking.status)


def should_expire(booking, now: Optional[datetime] = None) -> bool:
    """True when the booking is not terminal and its end has already passed."""
    if status_of(booking) in TERMINAL_STATUSES:
        return False
    now = parse_time(now) if now is not None else utc_now()
    return parse_time(booking.end_date) < now


def find_expired(bookings: Iterable, now: Optional[datetime] = None) -> List:
    """Bookings a sweep at ``now`` would rewrite."""
    now = parse_time(now) if now is not None else utc_now()
    due = []
    for booking in bookings:
        try:
            if should_expire(booking, now):
                due.append(booking)
        except (ValueError, OverflowError):
            logger.warning("Skipping booking %s: unparseable end_date %r",
                           booking.id, booking.end_date)
    return due
