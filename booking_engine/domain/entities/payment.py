from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PaymentType(str, Enum):
    DOWN_PAYMENT = "dp"
    INSTALLMENT = "installment"
    FINAL = "final"


class PaymentStatus(str, Enum):
    UNPAID = "Unpaid"
    PARTIAL = "Partial"
    PAID = "Paid"


@dataclass(frozen=True)
class Payment:
    id: str
    amount: int  # whole currency units, always > 0
    type: PaymentType
    created_at: str  # ISO datetime, assigned on append
    method: str | None = None
    note: str | None = None


@dataclass(frozen=True)
class PaymentSummary:
    price: int
    total_paid: int
    remaining_balance: int  # negative when overpaid
    status: PaymentStatus
