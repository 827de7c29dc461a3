from __future__ import annotations

import uuid
from typing import Iterable

from booking_engine.domain.entities.payment import Payment, PaymentStatus


def total_paid(payments: Iterable[Payment] | None) -> int:
    """Sum of all payment amounts; 0 for an empty or missing ledger."""
    if not payments:
        return 0
    return sum(p.amount for p in payments)


def payment_status(price: int | None, payments: Iterable[Payment] | None) -> PaymentStatus:
    """
    Derive the payment status from the authoritative price and the ledger.
    Never persisted; always recomputed from current ledger contents.
    """
    if not price:
        return PaymentStatus.UNPAID
    paid = total_paid(payments)
    if paid == 0:
        return PaymentStatus.UNPAID
    if paid >= price:
        return PaymentStatus.PAID
    return PaymentStatus.PARTIAL


def resolve_price(snapshot: int | None, live_price: int | None) -> int:
    """The booking's snapshotted price wins; the live package price is the fallback."""
    if snapshot:
        return snapshot
    return live_price or 0


def new_payment_id() -> str:
    return f"pay_{uuid.uuid4().hex}"


def chronological(payments: Iterable[Payment]) -> tuple[Payment, ...]:
    return tuple(sorted(payments, key=lambda p: p.created_at))
