from __future__ import annotations

from dataclasses import dataclass, field

from booking_engine.domain.entities.payment import PaymentStatus


@dataclass(frozen=True)
class BookingDraft:
    client_name: str
    client_phone: str
    date: str
    time: str
    address: str | None = None
    social_media: str | None = None
    event_date: str | None = None
    ceremony_time: str | None = None
    henna_by: str | None = None
    selected_package: str | None = None
    package_price: int | None = None
    request_note: str | None = None


@dataclass(frozen=True)
class OrderDraft:
    client_name: str
    client_phone: str
    total_amount: int
    dp_amount: int = 0
    payment_status: PaymentStatus = PaymentStatus.UNPAID
    items: tuple[str, ...] = field(default_factory=tuple)
    note: str | None = None


@dataclass(frozen=True)
class NoteEdit:
    """One entry of an edited trail. Entries without an id are new and get stamped on save."""

    body: str
    id: str | None = None
    author: str | None = None
    timestamp: str | None = None
