from __future__ import annotations

from booking_engine.application.dto.result import ErrorKind
from booking_engine.application.use_cases.invoice import invoice_number, project_invoice
from booking_engine.domain.entities.booking import Booking, BookingStatus
from booking_engine.domain.entities.payment import Payment, PaymentStatus, PaymentType
from booking_engine.domain.entities.service_package import ServicePackage

from tests.helpers import TODAY, make_draft


def _booking(**overrides) -> Booking:
    values = dict(
        id="k3j9x0abc123def",
        client_name="Siti",
        client_phone="0812",
        date="2025-03-10",
        time="10:00",
        status=BookingStatus.CONFIRMED,
    )
    values.update(overrides)
    return Booking(**values)


def _pay(pid: str, amount: int, kind: PaymentType, created_at: str) -> Payment:
    return Payment(id=pid, amount=amount, type=kind, created_at=created_at)


def test_invoice_number_from_booking_date():
    assert invoice_number(_booking()) == "INV-2503-123DEF"


def test_invoice_number_prefers_event_date():
    assert invoice_number(_booking(event_date="2026-11-02")) == "INV-2611-123DEF"


def test_partial_payment_example():
    booking = _booking(
        package_price=8_000_000,
        payments=(
            _pay("p1", 3_000_000, PaymentType.DOWN_PAYMENT, "2025-01-05T10:00:00+07:00"),
            _pay("p2", 2_000_000, PaymentType.INSTALLMENT, "2025-02-05T10:00:00+07:00"),
        ),
    )
    invoice = project_invoice(booking, None, "Makeup Service")

    assert invoice.price == 8_000_000
    assert invoice.total_paid == 5_000_000
    assert invoice.remaining_balance == 3_000_000
    assert invoice.payment_status == PaymentStatus.PARTIAL


def test_overpayment_shows_negative_balance():
    booking = _booking(
        package_price=5_000_000,
        payments=(_pay("p1", 5_500_000, PaymentType.FINAL, "2025-03-10T12:00:00+07:00"),),
    )
    invoice = project_invoice(booking, None, "Makeup Service")

    assert invoice.remaining_balance == -500_000
    assert invoice.payment_status == PaymentStatus.PAID


def test_snapshot_price_and_package_name():
    package = ServicePackage(id="pkg_bridal", name="Bridal Signature", price=9_000_000)
    invoice = project_invoice(_booking(selected_package="pkg_bridal", package_price=5_000_000), package, "Makeup Service")

    assert invoice.service_name == "Bridal Signature"
    assert invoice.price == 5_000_000


def test_fallback_label_and_live_price():
    assert project_invoice(_booking(), None, "Makeup Service").service_name == "Makeup Service"
    package = ServicePackage(id="pkg", name="Glam", price=1_200_000)
    assert project_invoice(_booking(selected_package="pkg"), package, "Makeup Service").price == 1_200_000


def test_payment_history_is_chronological():
    booking = _booking(
        payments=(
            _pay("late", 1, PaymentType.FINAL, "2025-03-09T10:00:00+07:00"),
            _pay("early", 1, PaymentType.DOWN_PAYMENT, "2025-01-01T10:00:00+07:00"),
        )
    )
    invoice = project_invoice(booking, None, "Makeup Service")
    assert [p.id for p in invoice.payments] == ["early", "late"]


def test_unknown_package_falls_back(bookings, invoices):
    booking = bookings.create_staff_booking(make_draft(selected_package="pkg_gone"), staff="Nadia").value
    invoice = invoices.build_invoice(booking.id).value

    assert invoice.service_name == "Makeup Service"
    assert invoice.price == 0
    assert invoice.payment_status == PaymentStatus.UNPAID


def test_build_invoice_missing_booking(invoices):
    assert invoices.build_invoice("missing").error == ErrorKind.NOT_FOUND


def test_end_to_end_booking_to_invoice(bookings, payments, invoices):
    draft = make_draft(date="2025-03-10", time="10:00", package_price=5_000_000)
    created = bookings.submit_public_booking(draft, today=TODAY)
    assert created.ok
    booking = created.value
    assert booking.status == BookingStatus.PENDING

    assert booking.package_price == 5_000_000

    assert bookings.update_status(booking.id, BookingStatus.CONFIRMED, staff="Nadia").ok
    assert payments.add_payment(booking.id, 1_000_000, PaymentType.DOWN_PAYMENT, staff="Nadia").ok

    invoice = invoices.build_invoice(booking.id).value
    assert invoice.payment_status == PaymentStatus.PARTIAL
    assert invoice.remaining_balance == 4_000_000
    assert invoice.invoice_number == f"INV-2503-{booking.id[-6:].upper()}"
    assert invoice.booking_status == BookingStatus.CONFIRMED
