from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from shared.core.config import settings
from ..enum.booking_enum import BookingStatus
from ..models.customers import Customer
from ..models.responsibles import Responsible
from ..models.spaces import Space
from ..services import calendar_service, kpi_service
from . import bookings_crud
from .spaces_crud import all_space_ids


def resolve_space_scope(db: Session, space_ids: Optional[Iterable[str]]) -> List[str]:
    """No explicit selection means every known space."""
    if space_ids is None:
        return all_space_ids(db)
    return [s for s in space_ids if s]


# ------------------- KPIs -------------------

def get_aggregate_counts(db: Session, now: Optional[datetime] = None) -> Dict[str, Any]:
    bookings_crud.refresh_expirations(db, now)
    bookings = bookings_crud.list_bookings(db)

    return {
        "customerCount": db.query(func.count(Customer.id)).scalar() or 0,
        "spaceCount": db.query(func.count(Space.id)).scalar() or 0,
        "staffCount": db.query(func.count(Responsible.id)).scalar() or 0,
        "bookingCount": len(bookings),
        "perStatusCount": kpi_service.count_by_status(bookings),
        "perStaffCount": kpi_service.count_by_responsible(bookings),
    }


# ------------------- Calendar -------------------

def get_month_grid(
    db: Session,
    year: int,
    month: int,
    space_ids: Optional[List[str]] = None,
    preview_limit: Optional[int] = None,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    bookings_crud.refresh_expirations(db, now)
    scope = resolve_space_scope(db, space_ids)
    limit = settings.CALENDAR_PREVIEW_LIMIT if preview_limit is None else preview_limit

    grid = calendar_service.build_month_grid(
        year, month, bookings_crud.list_bookings(db), scope, limit)

    customer_names, space_names = bookings_crud.name_maps(db)

    def views(items):
        return [bookings_crud.to_view(b, customer_names, space_names) for b in items]

    grid["cells"] = [
        None if cell is None else {
            **cell,
            "bookings": views(cell["bookings"]),
            "preview": views(cell["preview"]),
        }
        for cell in grid["cells"]
    ]
    grid["space_ids"] = scope
    for key, delta in (("previous", -1), ("next", 1)):
        y, m = calendar_service.shift_month(year, month, delta)
        grid[key] = {"year": y, "month": m}
    return grid


def get_day_agenda(
    db: Session,
    day: date,
    space_ids: Optional[List[str]] = None,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    bookings_crud.refresh_expirations(db, now)
    scope = resolve_space_scope(db, space_ids)
    agenda = calendar_service.day_agenda(bookings_crud.list_bookings(db), day, scope)
    return {"date": day.isoformat(), "bookings": bookings_crud.to_views(db, agenda)}


# ------------------- Values -------------------

def get_values_overview(db: Session, now: Optional[datetime] = None) -> Dict[str, Any]:
    bookings_crud.refresh_expirations(db, now)
    bookings = bookings_crud.list_bookings(db)
    totals = kpi_service.financial_totals(bookings)

    return {
        "confirmedTotal": float(totals["confirmed"]),
        "pendingTotal": float(totals["pending"]),
        "confirmedTotalFormatted": kpi_service.format_currency(totals["confirmed"]),
        "pendingTotalFormatted": kpi_service.format_currency(totals["pending"]),
        "confirmedBookings": bookings_crud.to_views(
            db, kpi_service.bookings_with_status(bookings, BookingStatus.confirmed)),
        "pendingBookings": bookings_crud.to_views(
            db, kpi_service.bookings_with_status(bookings, BookingStatus.pending)),
    }
