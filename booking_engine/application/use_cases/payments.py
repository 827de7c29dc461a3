from __future__ import annotations

import logging
from zoneinfo import ZoneInfo

from booking_engine.application.dto.result import OperationResult
from booking_engine.application.exceptions import BookingEngineError, InvalidInputError, NotFoundError
from booking_engine.application.ports.document_store import DocumentStorePort
from booking_engine.application.ports.package_catalog import PackageCatalogPort
from booking_engine.application.utils.date_parser import now_iso
from booking_engine.application.utils.documents import BOOKINGS, deserialize_booking, serialize_payment
from booking_engine.application.utils.ledger import new_payment_id, payment_status, resolve_price, total_paid
from booking_engine.domain.entities.payment import Payment, PaymentSummary, PaymentType


class PaymentLedgerUseCase:
    """
    Append/remove payments on a booking's ledger.

    Both operations are single atomic store calls keyed by payment id, so two
    staff members recording payments at the same time cannot overwrite each other.
    """

    def __init__(self, store: DocumentStorePort, catalog: PackageCatalogPort, timezone: ZoneInfo) -> None:
        self._store = store
        self._catalog = catalog
        self._timezone = timezone
        self._logger = logging.getLogger(__name__)

    def _audit_changes(self, staff: str | None) -> dict[str, str]:
        changes = {"updated_at": now_iso(self._timezone)}
        if staff:
            changes["last_updated_by"] = staff
        return changes

    def add_payment(
        self,
        booking_id: str,
        amount: int,
        payment_type: PaymentType | str,
        method: str | None = None,
        note: str | None = None,
        staff: str | None = None,
    ) -> OperationResult[Payment]:
        try:
            if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
                raise InvalidInputError("amount must be a positive integer")
            try:
                kind = PaymentType(payment_type)
            except ValueError:
                raise InvalidInputError(f"unknown payment type {payment_type!r}")

            payment = Payment(
                id=new_payment_id(),
                amount=amount,
                type=kind,
                created_at=now_iso(self._timezone),
                method=(method or "").strip() or None,
                note=(note or "").strip() or None,
            )
            appended = self._store.append_item(
                BOOKINGS, booking_id, "payments", serialize_payment(payment), self._audit_changes(staff)
            )
            if not appended:
                raise NotFoundError(f"booking {booking_id} not found")
        except BookingEngineError as e:
            self._logger.warning("Payment not recorded", extra={"booking_id": booking_id, "reason": str(e)})
            return OperationResult.from_error(e)

        self._logger.info(
            "Payment recorded",
            extra={"booking_id": booking_id, "payment_id": payment.id, "amount": amount, "staff": staff},
        )
        return OperationResult.success(payment)

    def remove_payment(self, booking_id: str, payment_id: str, staff: str | None = None) -> OperationResult[None]:
        """Removing an id that is not in the ledger succeeds and changes nothing."""
        try:
            removed = self._store.remove_item(
                BOOKINGS, booking_id, "payments", payment_id, self._audit_changes(staff)
            )
            if not removed:
                raise NotFoundError(f"booking {booking_id} not found")
        except BookingEngineError as e:
            self._logger.warning("Payment not removed", extra={"booking_id": booking_id, "reason": str(e)})
            return OperationResult.from_error(e)

        self._logger.info(
            "Payment removed", extra={"booking_id": booking_id, "payment_id": payment_id, "staff": staff}
        )
        return OperationResult.success(None)

    def payment_summary(self, booking_id: str) -> OperationResult[PaymentSummary]:
        try:
            doc = self._store.get(BOOKINGS, booking_id)
            if doc is None:
                raise NotFoundError(f"booking {booking_id} not found")
            booking = deserialize_booking(doc)
            package = self._catalog.get_package(booking.selected_package) if booking.selected_package else None
            price = resolve_price(booking.package_price, package.price if package else None)
        except BookingEngineError as e:
            return OperationResult.from_error(e)

        paid = total_paid(booking.payments)
        return OperationResult.success(
            PaymentSummary(
                price=price,
                total_paid=paid,
                remaining_balance=price - paid,
                status=payment_status(price, booking.payments),
            )
        )
