from __future__ import annotations

from typing import Any

from booking_engine.domain.entities.booking import Booking, BookingStatus, HennaProvider
from booking_engine.domain.entities.note import NoteEntry
from booking_engine.domain.entities.order import Order
from booking_engine.domain.entities.payment import Payment, PaymentStatus, PaymentType
from booking_engine.domain.entities.service_package import ServicePackage

BOOKINGS = "bookings"
ORDERS = "orders"
PACKAGES = "packages"


def serialize_payment(payment: Payment) -> dict[str, Any]:
    return {
        "id": payment.id,
        "amount": payment.amount,
        "type": payment.type.value,
        "method": payment.method,
        "note": payment.note,
        "created_at": payment.created_at,
    }


def deserialize_payment(data: dict[str, Any]) -> Payment:
    return Payment(
        id=str(data["id"]),
        amount=int(data.get("amount", 0)),
        type=PaymentType(data.get("type", PaymentType.INSTALLMENT.value)),
        created_at=data.get("created_at", ""),
        method=data.get("method"),
        note=data.get("note"),
    )


def serialize_note(entry: NoteEntry) -> dict[str, Any]:
    return {
        "id": entry.id,
        "timestamp": entry.timestamp,
        "author": entry.author,
        "body": entry.body,
    }


def deserialize_note(data: dict[str, Any]) -> NoteEntry:
    return NoteEntry(
        id=str(data["id"]),
        timestamp=data.get("timestamp", ""),
        author=data.get("author", ""),
        body=data.get("body", ""),
    )


def serialize_booking(booking: Booking) -> dict[str, Any]:
    """Serialize a Booking to a store document (without its id)."""
    return {
        "client_name": booking.client_name,
        "client_phone": booking.client_phone,
        "address": booking.address,
        "social_media": booking.social_media,
        "date": booking.date,
        "time": booking.time,
        "event_date": booking.event_date,
        "ceremony_time": booking.ceremony_time,
        "henna_by": booking.henna_by.value if booking.henna_by else None,
        "selected_package": booking.selected_package,
        "package_price": booking.package_price,
        "request_note": booking.request_note,
        "status": booking.status.value,
        "payments": [serialize_payment(p) for p in booking.payments],
        "notes": [serialize_note(n) for n in booking.notes],
        "last_updated_by": booking.last_updated_by,
        "created_at": booking.created_at,
        "updated_at": booking.updated_at,
    }


def deserialize_booking(data: dict[str, Any]) -> Booking:
    henna = data.get("henna_by")
    price = data.get("package_price")
    return Booking(
        id=str(data["id"]),
        client_name=data.get("client_name", ""),
        client_phone=data.get("client_phone", ""),
        date=data.get("date", ""),
        time=data.get("time", ""),
        status=BookingStatus(data.get("status", BookingStatus.PENDING.value)),
        address=data.get("address"),
        social_media=data.get("social_media"),
        event_date=data.get("event_date"),
        ceremony_time=data.get("ceremony_time"),
        henna_by=HennaProvider(henna) if henna else None,
        selected_package=data.get("selected_package"),
        package_price=int(price) if price is not None else None,
        request_note=data.get("request_note"),
        payments=tuple(deserialize_payment(p) for p in data.get("payments") or []),
        notes=tuple(deserialize_note(n) for n in data.get("notes") or []),
        last_updated_by=data.get("last_updated_by"),
        created_at=data.get("created_at"),
        updated_at=data.get("updated_at"),
    )


def serialize_order(order: Order) -> dict[str, Any]:
    return {
        "client_name": order.client_name,
        "client_phone": order.client_phone,
        "total_amount": order.total_amount,
        "dp_amount": order.dp_amount,
        "payment_status": order.payment_status.value,
        "items": list(order.items),
        "notes": [serialize_note(n) for n in order.notes],
        "last_updated_by": order.last_updated_by,
        "created_at": order.created_at,
        "updated_at": order.updated_at,
    }


def deserialize_order(data: dict[str, Any]) -> Order:
    return Order(
        id=str(data["id"]),
        client_name=data.get("client_name", ""),
        client_phone=data.get("client_phone", ""),
        total_amount=int(data.get("total_amount") or 0),
        dp_amount=int(data.get("dp_amount") or 0),
        payment_status=PaymentStatus(data.get("payment_status", PaymentStatus.UNPAID.value)),
        items=tuple(data.get("items") or []),
        notes=tuple(deserialize_note(n) for n in data.get("notes") or []),
        last_updated_by=data.get("last_updated_by"),
        created_at=data.get("created_at"),
        updated_at=data.get("updated_at"),
    )


def deserialize_package(data: dict[str, Any]) -> ServicePackage:
    return ServicePackage(
        id=str(data["id"]),
        name=data.get("name", ""),
        price=int(data.get("price") or 0),
    )
