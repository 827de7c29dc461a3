from __future__ import annotations

import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from booking_engine.application.utils.documents import PACKAGES
from booking_engine.core.config import settings
from booking_engine.infrastructure.store.json_store import JsonDocumentStore
from booking_engine.infrastructure.store.memory_store import MemoryDocumentStore
from booking_engine.main import app
from booking_engine.wiring import dependencies

STAFF = {"X-Staff-Name": "Nadia"}
FUTURE_DATE = "2099-01-15"


@pytest.fixture
def client(monkeypatch):
    store = MemoryDocumentStore()
    store.insert(PACKAGES, {"name": "Bridal Signature", "price": 5_000_000}, doc_id="pkg_bridal")
    monkeypatch.setattr(dependencies, "_document_store", store)
    monkeypatch.setattr(settings, "ADMIN_API_TOKEN", None)
    monkeypatch.setattr(settings, "ENV", "dev")
    return TestClient(app)


def _submit(client, **overrides):
    payload = {"client_name": "Siti Rahma", "client_phone": "081234567890", "date": FUTURE_DATE, "time": "10:00"}
    payload.update(overrides)
    return client.post("/api/v1/bookings", json=payload)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_public_submission_notifies_in_background(client):
    response = _submit(client, language="en")

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "Pending"
    assert body["total_paid"] == 0
    assert (body["id"], "en") in dependencies.get_notifier().sent


def test_public_submission_rejects_past_date(client):
    response = _submit(client, date="2000-01-01")
    assert response.status_code == 400
    assert "in the past" in response.json()["detail"]


def test_invalid_time_is_rejected(client):
    assert _submit(client, time="25:00").status_code == 400


def test_calendar_endpoints(client):
    booking_id = _submit(client).json()["id"]

    day = client.get(f"/api/v1/calendar/dates/{FUTURE_DATE}").json()
    assert day["status"] == "booked"
    assert day["booking_count"] == 1
    assert day["selectable"] is True

    month = client.get("/api/v1/calendar/2099/1", params={"lang": "en"}).json()
    assert month["month_name"] == "January"
    assert len(month["days"]) == 31
    assert month["previous_month"] == [2098, 12]

    assert client.get("/api/v1/calendar/2099/13").status_code == 400
    assert client.get("/api/v1/calendar/policy").json() == {"daily_capacity": 6, "advertised_daily_limit": 4}

    on_date = client.get(f"/api/v1/calendar/dates/{FUTURE_DATE}/bookings", headers=STAFF).json()
    assert [b["id"] for b in on_date] == [booking_id]


def test_packages(client):
    assert client.get("/api/v1/packages").json() == [{"id": "pkg_bridal", "name": "Bridal Signature", "price": 5_000_000}]


def test_unreadable_store_is_reported_as_unavailable(client, monkeypatch):
    with tempfile.TemporaryDirectory() as tmpdir:
        (Path(tmpdir) / f"{PACKAGES}.json").write_text("{not json", encoding="utf-8")
        monkeypatch.setattr(dependencies, "_document_store", JsonDocumentStore(data_dir=tmpdir))

        response = client.get("/api/v1/packages")

    assert response.status_code == 503


def test_staff_endpoints_require_token_when_configured(client, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_API_TOKEN", "s3cret")

    assert client.get("/api/v1/bookings", headers=STAFF).status_code == 403
    assert client.get("/api/v1/bookings", headers={**STAFF, "X-Admin-Token": "wrong"}).status_code == 403
    assert client.get("/api/v1/bookings", headers={**STAFF, "X-Admin-Token": "s3cret"}).status_code == 200


def test_staff_name_is_required(client):
    assert client.get("/api/v1/bookings").status_code == 400


def test_booking_payment_and_invoice_flow(client):
    booking_id = _submit(client, selected_package="pkg_bridal").json()["id"]

    confirmed = client.put(f"/api/v1/bookings/{booking_id}/status", json={"status": "Confirmed"}, headers=STAFF)
    assert confirmed.status_code == 200
    assert confirmed.json()["package_price"] == 5_000_000
    assert confirmed.json()["last_updated_by"] == "Nadia"

    payment = client.post(
        f"/api/v1/bookings/{booking_id}/payments",
        json={"amount": 1_000_000, "type": "dp", "method": "transfer"},
        headers=STAFF,
    )
    assert payment.status_code == 201
    assert client.post(
        f"/api/v1/bookings/{booking_id}/payments", json={"amount": 0, "type": "dp"}, headers=STAFF
    ).status_code == 400

    summary = client.get(f"/api/v1/bookings/{booking_id}/payment-summary", headers=STAFF).json()
    assert summary == {"price": 5_000_000, "total_paid": 1_000_000, "remaining_balance": 4_000_000, "status": "Partial"}

    invoice = client.get(f"/api/v1/bookings/{booking_id}/invoice", headers=STAFF).json()
    assert invoice["invoice_number"] == f"INV-9901-{booking_id[-6:].upper()}"
    assert invoice["service_name"] == "Bridal Signature"

    payment_id = payment.json()["id"]
    assert client.delete(f"/api/v1/bookings/{booking_id}/payments/{payment_id}", headers=STAFF).status_code == 204
    summary = client.get(f"/api/v1/bookings/{booking_id}/payment-summary", headers=STAFF).json()
    assert summary["status"] == "Unpaid"


def test_edit_and_delete_booking(client):
    booking_id = _submit(client).json()["id"]

    edited = client.patch(f"/api/v1/bookings/{booking_id}", json={"time": "14:00"}, headers=STAFF)
    assert edited.json()["time"] == "14:00"

    assert client.delete(f"/api/v1/bookings/{booking_id}", headers=STAFF).status_code == 204
    assert client.get(f"/api/v1/bookings/{booking_id}", headers=STAFF).status_code == 404


def test_notes_endpoints(client):
    booking_id = _submit(client).json()["id"]
    base = f"/api/v1/bookings/{booking_id}/notes"

    created = client.post(base, json={"body": "Client prefers natural look"}, headers=STAFF)
    assert created.status_code == 201
    assert created.json()["author"] == "Nadia"

    assert client.post(base, json={"body": "  "}, headers=STAFF).status_code == 400
    assert client.get(f"{base}/text", headers=STAFF).json()["text"].endswith("- Nadia\nClient prefers natural look")

    replaced = client.put(base, json={"entries": [{"body": "Rewritten"}]}, headers={"X-Staff-Name": "Rina"})
    assert [n["author"] for n in replaced.json()] == ["Rina"]

    note_id = replaced.json()[0]["id"]
    assert client.delete(f"{base}/{note_id}", headers=STAFF).status_code == 204
    assert client.get(base, headers=STAFF).json() == []


def test_orders_and_transactions(client):
    created = client.post(
        "/api/v1/orders",
        json={"client_name": "Dewi", "total_amount": 500_000, "dp_amount": 200_000, "note": "Pickup Friday"},
        headers=STAFF,
    )
    assert created.status_code == 201
    order_id = created.json()["id"]
    assert created.json()["notes"][0]["body"] == "Pickup Friday"

    paid = client.put(f"/api/v1/orders/{order_id}/payment-status", json={"payment_status": "Paid"}, headers=STAFF)
    assert paid.json()["payment_status"] == "Paid"

    items = client.get("/api/v1/transactions", params={"kind": "orders"}, headers=STAFF).json()
    assert [i["kind"] for i in items] == ["order"]

    summary = client.get("/api/v1/transactions/summary", headers=STAFF).json()
    assert summary["order_count"] == 1
    assert summary["total_revenue"] == 500_000

    assert client.delete(f"/api/v1/orders/{order_id}", headers=STAFF).status_code == 204
    assert client.get(f"/api/v1/orders/{order_id}", headers=STAFF).status_code == 404
