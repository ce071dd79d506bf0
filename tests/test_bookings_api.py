import pytest

from booking_service.app.models.bookings import Booking


@pytest.fixture
def create(client, booking_payload):
    def _create(url="/api/bookings/", **overrides):
        response = client.post(url, json=booking_payload(**overrides))
        assert response.status_code == 200, response.text
        return response.json()["data"]

    return _create


def test_create_wraps_response_and_assigns_sequential_ids(client, create, booking_payload):
    response = client.post("/api/bookings/", json=booking_payload())
    body = response.json()

    assert body["status"] == "Success"
    assert body["status_code"] == "100"
    assert body["data"]["id"] == "1"
    assert body["data"]["created_at"]
    assert create()["id"] == "2"


def test_free_booking_forces_price_to_zero(client, create):
    booking = create(type="gratuita", price=500)
    assert booking["price"] == 0

    updated = client.put("/api/bookings/", json={"id": booking["id"], "price": 80})
    assert updated.json()["data"]["price"] == 0


def test_create_rejects_missing_required_fields(client, booking_payload):
    payload = booking_payload()
    del payload["event_name"]
    response = client.post("/api/bookings/", json=payload)

    assert response.status_code == 422
    assert response.json()["status"] == "Failure"


def test_create_rejects_negative_price(client, booking_payload):
    response = client.post("/api/bookings/", json=booking_payload(price=-1))
    assert response.status_code == 422


def test_partial_update_keeps_other_fields(client, create):
    booking = create()
    response = client.put("/api/bookings/", json={"id": booking["id"], "status": "confirmada"})

    data = response.json()["data"]
    assert data["status"] == "confirmada"
    assert data["event_name"] == booking["event_name"]
    assert data["price"] == booking["price"]


def test_invalid_update_leaves_record_untouched(client, create):
    booking = create()
    response = client.put("/api/bookings/", json={"id": booking["id"], "event_name": ""})
    assert response.status_code == 422

    stored = client.get(f"/api/bookings/{booking['id']}").json()["data"]
    assert stored["event_name"] == booking["event_name"]


def test_missing_booking_is_404(client):
    assert client.get("/api/bookings/42").status_code == 404

    response = client.put("/api/bookings/", json={"id": "42", "status": "confirmada"})
    assert response.status_code == 404
    assert response.json()["status_code"] == "202"

    assert client.delete("/api/bookings/42").status_code == 404


def test_delete_booking(client, create):
    booking = create()
    response = client.delete(f"/api/bookings/{booking['id']}")

    assert response.json()["data"] == {"id": booking["id"], "deleted": True}
    assert client.get(f"/api/bookings/{booking['id']}").status_code == 404


def test_sweep_marks_past_bookings_expired_and_is_idempotent(client, db, create):
    past = create(status="confirmada",
                  start_date="2020-01-01T08:00:00Z", end_date="2020-01-01T10:00:00Z")
    cancelled = create(status="cancelada",
                       start_date="2020-01-01T08:00:00Z", end_date="2020-01-01T10:00:00Z")
    future = create(status="confirmada")

    first = client.post("/api/bookings/sweep-expirations").json()["data"]
    assert first["expired_ids"] == [past["id"]]

    second = client.post("/api/bookings/sweep-expirations").json()["data"]
    assert second == {"expired_ids": [], "total": 0}

    statuses = {b.id: b.status for b in db.query(Booking).all()}
    assert statuses == {
        past["id"]: "vencida",
        cancelled["id"]: "cancelada",
        future["id"]: "confirmada",
    }


def test_listing_expires_before_filtering(client, create):
    create(status="pendente",
           start_date="2020-01-01T08:00:00Z", end_date="2020-01-01T10:00:00Z")

    pending = client.get("/api/bookings/all", params={"status": "pendente"}).json()["data"]
    assert pending["total"] == 0

    expired = client.get("/api/bookings/all", params={"status": "vencida"}).json()["data"]
    assert expired["total"] == 1
    assert expired["bookings"][0]["status_label"] == "Aguarda Resposta"


def test_list_resolves_names_and_marks_unknown(client, create):
    customer = client.post("/api/customers/", json={
        "name": "Associação Cultural", "email": "geral@associacao.pt"}).json()["data"]
    create(customer_id=customer["id"], event_name="Concerto")
    create(customer_id="ghost", event_name="Feira")

    listing = client.get("/api/bookings/all").json()["data"]
    names = {b["event_name"]: b["customer_name"] for b in listing["bookings"]}
    assert names == {"Concerto": "Associação Cultural", "Feira": "(unknown)"}

    found = client.get("/api/bookings/all", params={"search": "associação"}).json()["data"]
    assert [b["event_name"] for b in found["bookings"]] == ["Concerto"]


def test_list_is_newest_first_and_paginated(client, create):
    for n, created in enumerate(["2024-01-01T00:00:00Z", "2024-03-01T00:00:00Z",
                                 "2024-02-01T00:00:00Z"]):
        create(event_name=f"Evento {n}", created_at=created)

    listing = client.get("/api/bookings/all").json()["data"]
    assert [b["event_name"] for b in listing["bookings"]] == ["Evento 1", "Evento 2", "Evento 0"]

    page = client.get("/api/bookings/all", params={"skip": 1, "limit": 1}).json()["data"]
    assert page["total"] == 3
    assert [b["event_name"] for b in page["bookings"]] == ["Evento 2"]


def test_visits_endpoint_forces_visit_status(client, create):
    visit = create(url="/api/visits/", status="confirmada", event_name="Visita guiada")
    assert visit["status"] == "visita"

    updated = client.put("/api/visits/", json={"id": visit["id"], "status": "confirmada"})
    assert updated.json()["data"]["status"] == "visita"

    create(event_name="Casamento")
    visits = client.get("/api/visits/all").json()["data"]
    assert [b["event_name"] for b in visits["bookings"]] == ["Visita guiada"]

    records = client.get("/api/records/all", params={"category": "processo"}).json()["data"]
    assert [b["event_name"] for b in records["bookings"]] == ["Casamento"]


def test_status_lookup(client):
    lookup = client.get("/api/bookings/status-lookup").json()["data"]
    assert {"id": "vencida", "name": "Aguarda Resposta"} in lookup


def test_switching_paid_booking_to_free_zeroes_price(client, create):
    booking = create(type="paga", price=250)
    assert booking["price"] == 250

    response = client.put("/api/bookings/", json={"id": booking["id"], "type": "gratuita"})
    assert response.json()["data"]["price"] == 0

    stored = client.get(f"/api/bookings/{booking['id']}").json()["data"]
    assert stored["type"] == "gratuita"
    assert stored["price"] == 0


def test_visit_update_to_free_zeroes_price(client, create):
    visit = create(url="/api/visits/", type="paga", price=75)
    response = client.put("/api/visits/", json={"id": visit["id"], "type": "gratuita"})

    data = response.json()["data"]
    assert data["price"] == 0
    assert data["status"] == "visita"
