from __future__ import annotations

import pytest

from booking_engine.application.utils.ledger import (
    chronological,
    new_payment_id,
    payment_status,
    resolve_price,
    total_paid,
)
from booking_engine.domain.entities.payment import Payment, PaymentStatus, PaymentType


def _payment(amount: int, created_at: str = "2025-03-01T10:00:00+07:00", kind=PaymentType.INSTALLMENT) -> Payment:
    return Payment(id=new_payment_id(), amount=amount, type=kind, created_at=created_at)


def test_total_paid_sums_amounts():
    ledger = [_payment(3_000_000), _payment(2_000_000), _payment(150_000)]
    assert total_paid(ledger) == 5_150_000


def test_total_paid_empty_or_missing_ledger():
    assert total_paid([]) == 0
    assert total_paid(None) == 0


@pytest.mark.parametrize(
    "price, amounts, expected",
    [
        (0, [], PaymentStatus.UNPAID),
        (0, [500_000], PaymentStatus.UNPAID),
        (None, [500_000], PaymentStatus.UNPAID),
        (5_000_000, [], PaymentStatus.UNPAID),
        (5_000_000, [1_000_000], PaymentStatus.PARTIAL),
        (5_000_000, [4_999_999], PaymentStatus.PARTIAL),
        (5_000_000, [5_000_000], PaymentStatus.PAID),
        (5_000_000, [3_000_000, 3_000_000], PaymentStatus.PAID),
    ],
)
def test_payment_status_derivation(price, amounts, expected):
    assert payment_status(price, [_payment(a) for a in amounts]) == expected


def test_snapshot_price_wins_over_live_price():
    assert resolve_price(4_000_000, 5_000_000) == 4_000_000
    assert resolve_price(None, 5_000_000) == 5_000_000
    assert resolve_price(None, None) == 0


def test_payment_ids_are_unique():
    ids = {new_payment_id() for _ in range(1000)}
    assert len(ids) == 1000


def test_chronological_orders_by_creation_time():
    late = _payment(1, "2025-03-05T09:00:00+07:00")
    early = _payment(2, "2025-03-01T09:00:00+07:00")
    assert chronological([late, early]) == (early, late)
