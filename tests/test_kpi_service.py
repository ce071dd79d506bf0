from decimal import Decimal
from types import SimpleNamespace

from booking_service.app.services.kpi_service import (
    count_by_responsible, count_by_status, financial_totals, format_currency)


def make_booking(status, price=0, responsible="Ana"):
    return SimpleNamespace(status=status, price=price, responsible=responsible)


def test_status_counts_include_every_status():
    counts = count_by_status([make_booking("vencida"), make_booking("vencida"),
                              make_booking("visita")])
    assert counts == {
        "pendente": 0,
        "confirmada": 0,
        "cancelada": 0,
        "vencida": 2,
        "visita": 1,
    }


def test_status_counts_sum_to_total():
    bookings = [make_booking(s) for s in
                ("pendente", "confirmada", "confirmada", "cancelada", "visita")]
    assert sum(count_by_status(bookings).values()) == len(bookings)


def test_responsible_counts_use_raw_name():
    bookings = [make_booking("pendente", responsible=name)
                for name in ("Ana", "Ana", "ana ", "")]
    assert count_by_responsible(bookings) == {"Ana": 2, "ana ": 1}


def test_financial_totals_by_status():
    bookings = [
        make_booking("confirmada", 100.00),
        make_booking("confirmada", 50.50),
        make_booking("pendente", 999),
        make_booking("cancelada", 10),
        make_booking("vencida", 20),
    ]
    totals = financial_totals(bookings)
    assert totals["confirmed"] == Decimal("150.50")
    assert totals["pending"] == Decimal("999")


def test_totals_are_zero_without_bookings():
    assert financial_totals([]) == {"confirmed": Decimal("0"), "pending": Decimal("0")}


def test_format_currency_pt():
    assert format_currency(Decimal("150.5")) == "150,50 €"
    assert format_currency(1234567.891) == "1.234.567,89 €"
    assert format_currency(0) == "0,00 €"
