import calendar
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .expiry_service import parse_time


def start_day(booking) -> str:
    """Calendar-day part of the booking start, as stored (no zone conversion)."""
    try:
        return parse_time(booking.start_date).date().isoformat()
    except (ValueError, OverflowError):
        return str(booking.start_date)[:10]


def days_in_month(year: int, month: int) -> int:
    """``month`` is zero-based (0 = January)."""
    return calendar.monthrange(year, month + 1)[1]


def first_weekday(year: int, month: int) -> int:
    """Weekday of day 1 with 0 = Sunday."""
    monday_based = calendar.monthrange(year, month + 1)[0]
    return (monday_based + 1) % 7


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    index = year * 12 + month + delta
    return index // 12, index % 12


# ----------------- Space scoping -----------------

def scope_bookings(bookings: Iterable, included_space_ids: Iterable[str]) -> List:
    included = set(included_space_ids)
    return [b for b in bookings if b.space_id in included]


def toggle_space(selected: Sequence[str], space_id: str) -> List[str]:
    if space_id in selected:
        return [s for s in selected if s != space_id]
    return [*selected, space_id]


def toggle_all_spaces(selected: Sequence[str], all_space_ids: Sequence[str]) -> List[str]:
    # Flips on the current state: full selection clears, anything else selects all
    if len(selected) == len(all_space_ids) and set(selected) == set(all_space_ids):
        return []
    return list(all_space_ids)


# ----------------- Aggregation -----------------

def group_by_day(bookings: Iterable) -> Dict[str, List]:
    grouped: Dict[str, List] = {}
    for booking in bookings:
        grouped.setdefault(start_day(booking), []).append(booking)
    return grouped


def build_month_grid(
    year: int,
    month: int,
    bookings: Iterable,
    included_space_ids: Iterable[str],
    preview_limit: int = 3,
    today: Optional[date] = None,
) -> dict:
    """
    Month view for ``year``/zero-based ``month``.

    ``cells`` starts with one None per leading blank (weekday of day 1,
    Sunday first) followed by one cell per day. Every cell keeps the full
    list of space-scoped bookings starting that day; ``preview`` and
    ``overflow`` only describe the compact rendering.
    """
    leading = first_weekday(year, month)
    total_days = days_in_month(year, month)
    by_day = group_by_day(scope_bookings(bookings, included_space_ids))
    today_str = (today or date.today()).isoformat()

    cells: List[Optional[dict]] = [None] * leading
    for day in range(1, total_days + 1):
        date_str = date(year, month + 1, day).isoformat()
        day_books = by_day.get(date_str, [])
        cells.append({
            "day": day,
            "date": date_str,
            "is_today": date_str == today_str,
            "bookings": day_books,
            "preview": day_books[:preview_limit],
            "overflow": max(0, len(day_books) - preview_limit),
        })

    return {
        "year": year,
        "month": month,
        "leading_blanks": leading,
        "days_in_month": total_days,
        "cells": cells,
    }


def day_agenda(bookings: Iterable, day: date, included_space_ids: Iterable[str]) -> List:
    """Space-scoped bookings starting on ``day``, earliest first (stable)."""
    day_str = day.isoformat()
    same_day = [b for b in scope_bookings(bookings, included_space_ids)
                if start_day(b) == day_str]
    return sorted(same_day, key=lambda b: parse_time(b.start_date))
