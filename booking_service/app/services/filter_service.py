from datetime import datetime, time, timezone
from typing import Callable, Dict, Iterable, List, Optional

from ..enum.booking_enum import BookingStatus, RecordCategory
from ..schemas.bookings_schemas import BookingRequest
from .expiry_service import parse_time, status_of

ANY = "all"
END_OF_DAY = time(23, 59, 59, 999000)


def _is_set(value) -> bool:
    return bool(value) and str(value).lower() != ANY


def clear_filters() -> BookingRequest:
    """Every dimension back to match-all."""
    return BookingRequest()


def search_text(booking, customer_names: Dict[str, str]) -> str:
    customer_name = customer_names.get(booking.customer_id, "")
    return f"{booking.event_name} {customer_name} {booking.responsible or ''}".lower()


def matches_search(booking, term: Optional[str], customer_names: Dict[str, str]) -> bool:
    if not term:
        return True
    return term.lower() in search_text(booking, customer_names)


def matches_category(booking, category: Optional[str]) -> bool:
    if not _is_set(category):
        return True
    is_visit = status_of(booking) == BookingStatus.visit.value
    if category == RecordCategory.visit.value:
        return is_visit
    return not is_visit


def matches_status(booking, status: Optional[str]) -> bool:
    return not _is_set(status) or status_of(booking) == status


def matches_space(booking, space_id: Optional[str]) -> bool:
    return not _is_set(space_id) or booking.space_id == space_id


def matches_date_range(booking, start_from=None, start_to=None) -> bool:
    if not start_from and not start_to:
        return True
    start = parse_time(booking.start_date)
    if start_from and start < datetime.combine(start_from, time.min, tzinfo=timezone.utc):
        return False
    # inclusive of the whole end day
    if start_to and start > datetime.combine(start_to, END_OF_DAY, tzinfo=timezone.utc):
        return False
    return True


def build_predicates(params: BookingRequest, customer_names: Dict[str, str]) -> List[Callable]:
    return [
        lambda b: matches_search(b, params.search, customer_names),
        lambda b: matches_category(b, params.category),
        lambda b: matches_status(b, params.status),
        lambda b: matches_space(b, params.space_id),
        lambda b: matches_date_range(b, params.start_from, params.start_to),
    ]


def filter_bookings(
    bookings: Iterable,
    params: BookingRequest,
    customer_names: Optional[Dict[str, str]] = None,
) -> List:
    """Keep bookings that satisfy every filter dimension in ``params``."""
    predicates = build_predicates(params, customer_names or {})
    return [b for b in bookings if all(p(b) for p in predicates)]
