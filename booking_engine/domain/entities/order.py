from __future__ import annotations

from dataclasses import dataclass

from booking_engine.domain.entities.note import NoteEntry
from booking_engine.domain.entities.payment import PaymentStatus


@dataclass(frozen=True)
class Order:
    id: str
    client_name: str
    client_phone: str
    total_amount: int
    dp_amount: int = 0
    # Set by staff directly; orders have no ledger to derive it from.
    payment_status: PaymentStatus = PaymentStatus.UNPAID
    items: tuple[str, ...] = ()
    notes: tuple[NoteEntry, ...] = ()
    last_updated_by: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
