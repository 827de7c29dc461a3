from __future__ import annotations

from dataclasses import dataclass

from booking_engine.domain.entities.payment import PaymentStatus


@dataclass(frozen=True)
class BookingTransaction:
    """A confirmed booking seen as revenue; paid amount and status come from its ledger."""

    id: str
    client_name: str
    client_phone: str
    total_amount: int
    paid_amount: int
    payment_status: PaymentStatus
    date: str
    items: tuple[str, ...]
    last_updated_by: str | None = None
    kind: str = "booking"


@dataclass(frozen=True)
class OrderTransaction:
    """A manual order; paid amount is its single down payment, status is staff-set."""

    id: str
    client_name: str
    client_phone: str
    total_amount: int
    paid_amount: int
    payment_status: PaymentStatus
    date: str
    items: tuple[str, ...]
    last_updated_by: str | None = None
    kind: str = "order"


Transaction = BookingTransaction | OrderTransaction


@dataclass(frozen=True)
class TransactionSummary:
    total_revenue: int
    total_paid: int
    total_outstanding: int
    order_count: int
    booking_count: int
