from __future__ import annotations

import logging

from booking_engine.application.dto.result import OperationResult
from booking_engine.application.exceptions import BookingEngineError, NotFoundError
from booking_engine.application.ports.document_store import DocumentStorePort
from booking_engine.application.ports.package_catalog import PackageCatalogPort
from booking_engine.application.utils.date_parser import parse_iso_date
from booking_engine.application.utils.documents import BOOKINGS, deserialize_booking
from booking_engine.application.utils.ledger import chronological, payment_status, resolve_price, total_paid
from booking_engine.domain.entities.booking import Booking
from booking_engine.domain.entities.invoice import Invoice
from booking_engine.domain.entities.service_package import ServicePackage


def invoice_number(booking: Booking) -> str:
    """INV-<YY><MM>-<last six id chars, uppercased>, dated by the event date when there is one."""
    day = parse_iso_date(booking.event_date or booking.date, "event_date" if booking.event_date else "date")
    return f"INV-{day.year % 100:02d}{day.month:02d}-{booking.id[-6:].upper()}"


def project_invoice(booking: Booking, package: ServicePackage | None, default_service_label: str) -> Invoice:
    price = resolve_price(booking.package_price, package.price if package else None)
    paid = total_paid(booking.payments)
    return Invoice(
        invoice_number=invoice_number(booking),
        booking_id=booking.id,
        client_name=booking.client_name,
        client_phone=booking.client_phone,
        address=booking.address,
        booking_date=booking.date,
        booking_time=booking.time,
        event_date=booking.event_date,
        ceremony_time=booking.ceremony_time,
        booking_status=booking.status,
        service_name=package.name if package else default_service_label,
        price=price,
        total_paid=paid,
        remaining_balance=price - paid,
        payments=chronological(booking.payments),
        payment_status=payment_status(price, booking.payments),
    )


class InvoiceUseCase:
    def __init__(
        self,
        store: DocumentStorePort,
        catalog: PackageCatalogPort,
        default_service_label: str = "Makeup Service",
    ) -> None:
        self._store = store
        self._catalog = catalog
        self._default_service_label = default_service_label
        self._logger = logging.getLogger(__name__)

    def build_invoice(self, booking_id: str) -> OperationResult[Invoice]:
        try:
            doc = self._store.get(BOOKINGS, booking_id)
            if doc is None:
                raise NotFoundError(f"booking {booking_id} not found")
            booking = deserialize_booking(doc)
            package = self._catalog.get_package(booking.selected_package) if booking.selected_package else None
            invoice = project_invoice(booking, package, self._default_service_label)
        except BookingEngineError as e:
            self._logger.warning("Invoice not built", extra={"booking_id": booking_id, "reason": str(e)})
            return OperationResult.from_error(e)
        return OperationResult.success(invoice)
