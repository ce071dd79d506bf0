from decimal import Decimal
from typing import Dict, Iterable, List

from shared.core.config import settings
from ..enum.booking_enum import BookingStatus
from .expiry_service import status_of


def count_by_status(bookings: Iterable) -> Dict[str, int]:
    counts = {status.value: 0 for status in BookingStatus}
    for booking in bookings:
        status = status_of(booking)
        if status in counts:
            counts[status] += 1
    return counts


def count_by_responsible(bookings: Iterable) -> Dict[str, int]:
    # Keyed by the raw name; "Ana" and "ana " are different buckets
    counts: Dict[str, int] = {}
    for booking in bookings:
        if booking.responsible:
            counts[booking.responsible] = counts.get(booking.responsible, 0) + 1
    return counts


def bookings_with_status(bookings: Iterable, status: BookingStatus) -> List:
    return [b for b in bookings if status_of(b) == status.value]


def sum_prices(bookings: Iterable) -> Decimal:
    return sum((Decimal(str(b.price or 0)) for b in bookings), Decimal("0"))


def financial_totals(bookings: Iterable) -> Dict[str, Decimal]:
    bookings = list(bookings)
    return {
        "confirmed": sum_prices(bookings_with_status(bookings, BookingStatus.confirmed)),
        "pending": sum_prices(bookings_with_status(bookings, BookingStatus.pending)),
    }


def format_currency(amount, symbol: str = None) -> str:
    """pt-PT style: 1.234,56 €"""
    symbol = settings.CURRENCY_SYMBOL if symbol is None else symbol
    text = f"{Decimal(str(amount or 0)):,.2f}"
    text = text.replace(",", "\x00").replace(".", ",").replace("\x00", ".")
    return f"{text} {symbol}"
