import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shared.core.database import commit_or_rollback
from shared.helpers.json_response_helper import error_response, not_found
from shared.utils.app_status_code import AppStatusCode
from ..enum.booking_enum import APPROVAL_LABELS, STATUS_LABELS, BookingStatus, BookingType
from ..models.bookings import Booking
from ..models.customers import Customer
from ..models.spaces import Space
from ..schemas.bookings_schemas import (
    BookingBase, BookingCreate, BookingListResponse, BookingOut, BookingRequest,
    BookingUpdate, BookingView)
from ..services import expiry_service
from ..services.filter_service import filter_bookings

logger = logging.getLogger(__name__)

UNKNOWN = "(unknown)"


# ----------------- Helpers -----------------

def next_booking_id(db: Session) -> str:
    max_id = 0
    for (raw_id,) in db.query(Booking.id).all():
        try:
            max_id = max(max_id, int(raw_id))
        except (TypeError, ValueError):
            continue
    return str(max_id + 1)


def apply_pricing_rule(data: dict) -> dict:
    if data.get("type") == BookingType.free.value:
        data["price"] = 0
    return data


def name_maps(db: Session) -> Tuple[Dict[str, str], Dict[str, str]]:
    customers = {c.id: c.name for c in db.query(Customer.id, Customer.name).all()}
    spaces = {s.id: s.name for s in db.query(Space.id, Space.name).all()}
    return customers, spaces


def to_view(booking, customer_names: Dict[str, str], space_names: Dict[str, str]) -> BookingView:
    out = BookingOut.model_validate(booking)
    return BookingView(
        **out.model_dump(),
        customer_name=customer_names.get(out.customer_id, UNKNOWN),
        space_name=space_names.get(out.space_id, UNKNOWN),
        status_label=STATUS_LABELS.get(out.status, out.status),
        approval_label=APPROVAL_LABELS.get(out.approval_status or "", ""),
    )


def to_views(db: Session, bookings) -> List[BookingView]:
    customer_names, space_names = name_maps(db)
    return [to_view(b, customer_names, space_names) for b in bookings]


def _created_key(booking):
    try:
        return expiry_service.parse_time(booking.created_at).timestamp()
    except (TypeError, ValueError, OverflowError):
        return 0


# ----------------- Expiry sweep -----------------

def sweep_expirations(db: Session, now: Optional[datetime] = None) -> List[str]:
    """Persist Expired on every non-terminal booking whose end has passed."""
    due = expiry_service.find_expired(db.query(Booking).all(), now)
    for booking in due:
        booking.status = BookingStatus.expired.value
    if due:
        commit_or_rollback(db)
        logger.info("Expired %d booking(s): %s", len(due), [b.id for b in due])
    return [b.id for b in due]


def refresh_expirations(db: Session, now: Optional[datetime] = None) -> List[str]:
    """Best-effort sweep run before status-dependent views load."""
    try:
        return sweep_expirations(db, now)
    except SQLAlchemyError as e:
        logger.warning("Expiry sweep not persisted, will retry on next load: %s", e)
        return []


# ----------------- Get All Bookings -----------------

def list_bookings(db: Session) -> List[Booking]:
    return db.query(Booking).all()


def get_bookings(db: Session, params: BookingRequest, now: Optional[datetime] = None) -> BookingListResponse:
    refresh_expirations(db, now)
    customer_names, space_names = name_maps(db)

    matched = filter_bookings(list_bookings(db), params, customer_names)
    matched = sorted(matched, key=_created_key, reverse=True)

    total = len(matched)
    skip = params.skip or 0
    page = matched[skip: skip + params.limit] if params.limit else matched[skip:]

    return {
        "bookings": [to_view(b, customer_names, space_names) for b in page],
        "total": total,
    }


# ----------------- Get Single Booking -----------------

def get_booking_by_id(db: Session, booking_id: str) -> Optional[Booking]:
    return db.query(Booking).filter(Booking.id == booking_id).first()


def get_booking(db: Session, booking_id: str) -> BookingView:
    db_booking = get_booking_by_id(db, booking_id)
    if not db_booking:
        return not_found("Booking", booking_id)
    return to_views(db, [db_booking])[0]


# ----------------- Create Booking -----------------

def create_booking(db: Session, booking: BookingCreate) -> BookingOut:
    data = apply_pricing_rule(booking.model_dump())
    if not data.get("created_at"):
        data["created_at"] = datetime.now(timezone.utc).isoformat()

    db_booking = Booking(id=next_booking_id(db), **data)
    db.add(db_booking)
    commit_or_rollback(db)
    db.refresh(db_booking)
    logger.info("Created booking %s (%s)", db_booking.id, db_booking.status)
    return BookingOut.model_validate(db_booking)


# ----------------- Update Booking -----------------

def update_booking(db: Session, booking_update: BookingUpdate) -> BookingOut:
    db_booking = get_booking_by_id(db, booking_update.id)
    if not db_booking:
        return not_found("Booking", booking_update.id)

    # Merge onto the stored record, then validate it as a whole
    merged = {
        **BookingOut.model_validate(db_booking).model_dump(exclude={"id"}),
        **booking_update.model_dump(exclude_unset=True, exclude={"id"}),
    }
    try:
        record = BookingBase.model_validate(merged)
    except ValidationError as e:
        return error_response(
            message=str(e),
            status_code=AppStatusCode.REQUIRED_VALIDATION_ERROR,
            http_status=422
        )

    for key, value in apply_pricing_rule(record.model_dump()).items():
        setattr(db_booking, key, value)

    commit_or_rollback(db)
    db.refresh(db_booking)
    return BookingOut.model_validate(db_booking)


# ----------------- Delete Booking -----------------

def delete_booking(db: Session, booking_id: str) -> dict:
    db_booking = get_booking_by_id(db, booking_id)
    if not db_booking:
        return not_found("Booking", booking_id)

    db.delete(db_booking)
    commit_or_rollback(db)
    return {"id": booking_id, "deleted": True}
