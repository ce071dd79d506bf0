from datetime import date
from itertools import permutations
from types import SimpleNamespace

from booking_service.app.schemas.bookings_schemas import BookingRequest
from booking_service.app.services.filter_service import (
    build_predicates, clear_filters, filter_bookings, matches_date_range)


def make_booking(booking_id, start="2024-06-10T10:00:00Z", status="confirmada",
                 space_id="1", customer_id="c1", event_name="Concerto",
                 responsible="Ana Ferreira"):
    return SimpleNamespace(
        id=booking_id, start_date=start, status=status, space_id=space_id,
        customer_id=customer_id, event_name=event_name, responsible=responsible)


CUSTOMERS = {"c1": "Associação Cultural", "c2": "Escola Básica"}


def ids(bookings):
    return [b.id for b in bookings]


def test_end_date_bound_covers_whole_day():
    booking = make_booking("1", start="2024-06-10T23:30:00Z")
    assert matches_date_range(booking, start_to=date(2024, 6, 10))
    assert not matches_date_range(booking, start_to=date(2024, 6, 9))


def test_start_date_bound_is_inclusive():
    booking = make_booking("1", start="2024-06-10T00:00:00Z")
    assert matches_date_range(booking, start_from=date(2024, 6, 10))
    assert not matches_date_range(booking, start_from=date(2024, 6, 11))


def test_search_is_case_insensitive_across_event_customer_and_staff():
    bookings = [
        make_booking("1", event_name="Conferência Anual", responsible="Rui"),
        make_booking("2", event_name="Workshop", customer_id="c2", responsible="Rui"),
        make_booking("3", event_name="Jantar", responsible="Maria CONFERE"),
        make_booking("4", event_name="Jantar", responsible="Rui"),
    ]
    matched = filter_bookings(bookings, BookingRequest(search="CONFER"), CUSTOMERS)
    assert ids(matched) == ["1", "3"]

    matched = filter_bookings(bookings, BookingRequest(search="escola"), CUSTOMERS)
    assert ids(matched) == ["2"]


def test_visit_category_split():
    bookings = [
        make_booking("1", status="visita"),
        make_booking("2", status="confirmada"),
        make_booking("3", status="vencida"),
    ]
    assert ids(filter_bookings(bookings, BookingRequest(category="visita"))) == ["1"]
    assert ids(filter_bookings(bookings, BookingRequest(category="processo"))) == ["2", "3"]
    assert ids(filter_bookings(bookings, BookingRequest(category="all"))) == ["1", "2", "3"]


def test_status_and_space_filters():
    bookings = [
        make_booking("1", status="pendente", space_id="1"),
        make_booking("2", status="pendente", space_id="2"),
        make_booking("3", status="confirmada", space_id="2"),
    ]
    params = BookingRequest(status="pendente", space_id="2")
    assert ids(filter_bookings(bookings, params)) == ["2"]


def test_dimensions_combine_with_and():
    bookings = [
        make_booking("1", start="2024-06-01T10:00:00Z", status="pendente"),
        make_booking("2", start="2024-06-15T10:00:00Z", status="pendente"),
        make_booking("3", start="2024-06-15T10:00:00Z", status="confirmada"),
    ]
    params = BookingRequest(status="pendente", start_from=date(2024, 6, 10))
    assert ids(filter_bookings(bookings, params)) == ["2"]


def test_predicate_order_does_not_change_result():
    bookings = [
        make_booking(str(i), start=f"2024-06-{10 + i:02d}T10:00:00Z",
                     status="pendente" if i % 2 else "confirmada",
                     space_id=str(i % 3))
        for i in range(10)
    ]
    params = BookingRequest(status="pendente", space_id="1",
                            start_from="2024-06-11", start_to="2024-06-18")
    predicates = build_predicates(params, CUSTOMERS)
    expected = ids(filter_bookings(bookings, params, CUSTOMERS))

    for order in permutations(predicates):
        assert ids(b for b in bookings if all(p(b) for p in order)) == expected


def test_clear_filters_matches_everything():
    bookings = [
        make_booking("1", status="visita"),
        make_booking("2", status="cancelada", space_id="9"),
    ]
    params = clear_filters()
    assert not params.search
    assert ids(filter_bookings(bookings, params)) == ["1", "2"]


def test_search_keeps_surrounding_spaces():
    params = BookingRequest(search="ana ")
    assert params.search == "ana "

    bookings = [
        make_booking("1", event_name="Jantar", responsible="Ana Ferreira"),
        make_booking("2", event_name="Jantar", responsible="Ana"),
    ]
    assert ids(filter_bookings(bookings, params, CUSTOMERS)) == ["1"]


def test_blank_search_means_no_search():
    assert BookingRequest(search="   ").search == ""
