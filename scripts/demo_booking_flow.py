#!/usr/bin/env python3
"""
Local booking walkthrough (no HTTP).

Usage:
  python3 scripts/demo_booking_flow.py 2099-01-15 --time 10:00 --price 5000000 --dp 1000000

What it does:
- Submits a public booking through the same use cases the API wires up
- Confirms it, records a down payment and a staff note
- Prints the date classification, the payment summary and the invoice
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from booking_engine.application.dto.drafts import BookingDraft  # noqa: E402
from booking_engine.application.use_cases.audit_trail import NoteTarget  # noqa: E402
from booking_engine.domain.entities.booking import BookingStatus  # noqa: E402
from booking_engine.domain.entities.payment import PaymentType  # noqa: E402
from booking_engine.wiring.dependencies import (  # noqa: E402
    get_audit_trail_use_case,
    get_availability_use_case,
    get_booking_use_case,
    get_invoice_use_case,
    get_payment_use_case,
)


def _fail(step: str, result) -> None:
    print(f"{step} failed: {result.error.value if result.error else 'error'} ({result.message})")
    sys.exit(1)


def main() -> None:
    parser = argparse.ArgumentParser(description="Walk one booking from submission to invoice.")
    parser.add_argument("date", help="booking date, YYYY-MM-DD")
    parser.add_argument("--time", default="10:00")
    parser.add_argument("--client", default="Siti Rahma")
    parser.add_argument("--phone", default="081234567890")
    parser.add_argument("--price", type=int, default=5_000_000)
    parser.add_argument("--dp", type=int, default=1_000_000)
    parser.add_argument("--staff", default="Admin")
    args = parser.parse_args()

    bookings = get_booking_use_case()
    draft = BookingDraft(
        client_name=args.client,
        client_phone=args.phone,
        date=args.date,
        time=args.time,
        package_price=args.price,
    )
    submitted = bookings.submit_public_booking(draft)
    if not submitted.ok:
        _fail("Submit", submitted)
    booking = submitted.value
    print(f"Booking {booking.id} created ({booking.status.value})")

    day = get_availability_use_case().classify(args.date).value
    print(f"{day.date}: {day.status.value}, {day.booking_count} booking(s), selectable={day.selectable}")

    confirmed = bookings.update_status(booking.id, BookingStatus.CONFIRMED, staff=args.staff)
    if not confirmed.ok:
        _fail("Confirm", confirmed)

    if args.dp:
        paid = get_payment_use_case().add_payment(booking.id, args.dp, PaymentType.DOWN_PAYMENT, staff=args.staff)
        if not paid.ok:
            _fail("Payment", paid)
    get_audit_trail_use_case().append_note(NoteTarget.BOOKING, booking.id, "Down payment received", args.staff)

    summary = get_payment_use_case().payment_summary(booking.id).value
    print(
        f"Price {summary.price:,} | paid {summary.total_paid:,} | "
        f"remaining {summary.remaining_balance:,} | {summary.status.value}"
    )

    invoice = get_invoice_use_case().build_invoice(booking.id).value
    print("-" * 60)
    print(f"{invoice.invoice_number}  {invoice.service_name}")
    for payment in invoice.payments:
        print(f"  {payment.created_at}  {payment.type.value:<12} {payment.amount:>12,}")
    print(f"  Balance: {invoice.remaining_balance:,}")


if __name__ == "__main__":
    main()
