from __future__ import annotations

import logging
from enum import Enum

from booking_engine.application.dto.result import OperationResult
from booking_engine.application.exceptions import BookingEngineError
from booking_engine.application.ports.document_store import DocumentStorePort
from booking_engine.application.ports.package_catalog import PackageCatalogPort
from booking_engine.application.utils.documents import (
    BOOKINGS,
    ORDERS,
    deserialize_booking,
    deserialize_order,
)
from booking_engine.application.utils.ledger import payment_status, resolve_price, total_paid
from booking_engine.domain.entities.booking import Booking, BookingStatus
from booking_engine.domain.entities.order import Order
from booking_engine.domain.entities.payment import PaymentStatus
from booking_engine.domain.entities.service_package import ServicePackage
from booking_engine.domain.entities.transaction import (
    BookingTransaction,
    OrderTransaction,
    Transaction,
    TransactionSummary,
)


class TransactionKind(str, Enum):
    ALL = "all"
    ORDERS = "orders"
    BOOKINGS = "bookings"


def order_transaction(order: Order) -> OrderTransaction:
    return OrderTransaction(
        id=order.id,
        client_name=order.client_name,
        client_phone=order.client_phone,
        total_amount=order.total_amount,
        paid_amount=order.dp_amount,
        payment_status=order.payment_status,
        date=order.created_at or "",
        items=order.items,
        last_updated_by=order.last_updated_by,
    )


def booking_transaction(
    booking: Booking, package: ServicePackage | None, default_service_label: str
) -> BookingTransaction:
    price = resolve_price(booking.package_price, package.price if package else None)
    return BookingTransaction(
        id=booking.id,
        client_name=booking.client_name,
        client_phone=booking.client_phone,
        total_amount=price,
        paid_amount=total_paid(booking.payments),
        payment_status=payment_status(price, booking.payments),
        date=booking.date,
        items=(package.name if package else default_service_label,),
        last_updated_by=booking.last_updated_by,
    )


def matches_search(item: Transaction, search: str) -> bool:
    needle = search.strip().lower()
    if not needle:
        return True
    return (
        needle in item.client_name.lower()
        or needle in item.id.lower()
        or search.strip() in item.client_phone
    )


class TransactionReportUseCase:
    """
    Revenue view over manual orders and confirmed bookings.
    The two keep their own payment models; nothing here writes.
    """

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

    def _collect(self) -> tuple[list[OrderTransaction], list[BookingTransaction]]:
        orders = [order_transaction(deserialize_order(d)) for d in self._store.list_all(ORDERS)]
        packages: dict[str, ServicePackage | None] = {}
        bookings: list[BookingTransaction] = []
        for doc in self._store.query(BOOKINGS, "status", BookingStatus.CONFIRMED.value):
            booking = deserialize_booking(doc)
            package = None
            if booking.selected_package:
                if booking.selected_package not in packages:
                    packages[booking.selected_package] = self._catalog.get_package(booking.selected_package)
                package = packages[booking.selected_package]
            bookings.append(booking_transaction(booking, package, self._default_service_label))
        return orders, bookings

    def list_transactions(
        self,
        kind: TransactionKind = TransactionKind.ALL,
        status: PaymentStatus | None = None,
        search: str | None = None,
    ) -> OperationResult[list[Transaction]]:
        try:
            orders, bookings = self._collect()
        except BookingEngineError as e:
            self._logger.warning("Transaction report failed", extra={"reason": str(e)})
            return OperationResult.from_error(e)

        items: list[Transaction] = []
        if kind in (TransactionKind.ALL, TransactionKind.ORDERS):
            items.extend(orders)
        if kind in (TransactionKind.ALL, TransactionKind.BOOKINGS):
            items.extend(bookings)
        if status is not None:
            items = [i for i in items if i.payment_status == status]
        if search:
            items = [i for i in items if matches_search(i, search)]
        items.sort(key=lambda i: i.date, reverse=True)
        return OperationResult.success(items)

    def summary(self) -> OperationResult[TransactionSummary]:
        try:
            orders, bookings = self._collect()
        except BookingEngineError as e:
            self._logger.warning("Transaction summary failed", extra={"reason": str(e)})
            return OperationResult.from_error(e)

        revenue = sum(t.total_amount for t in orders) + sum(t.total_amount for t in bookings)
        paid = sum(t.paid_amount for t in orders) + sum(t.paid_amount for t in bookings)
        return OperationResult.success(
            TransactionSummary(
                total_revenue=revenue,
                total_paid=paid,
                total_outstanding=revenue - paid,
                order_count=len(orders),
                booking_count=len(bookings),
            )
        )
