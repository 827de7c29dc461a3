from __future__ import annotations

from dataclasses import dataclass

from booking_engine.domain.entities.booking import BookingStatus
from booking_engine.domain.entities.payment import Payment, PaymentStatus


@dataclass(frozen=True)
class Invoice:
    invoice_number: str
    booking_id: str
    client_name: str
    client_phone: str
    address: str | None
    booking_date: str
    booking_time: str
    event_date: str | None
    ceremony_time: str | None
    booking_status: BookingStatus
    service_name: str
    price: int
    total_paid: int
    remaining_balance: int  # negative when overpaid
    payments: tuple[Payment, ...]
    payment_status: PaymentStatus
