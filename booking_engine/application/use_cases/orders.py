from __future__ import annotations

import logging
from typing import Any
from zoneinfo import ZoneInfo

from booking_engine.application.dto.drafts import OrderDraft
from booking_engine.application.dto.result import OperationResult
from booking_engine.application.exceptions import BookingEngineError, InvalidInputError, NotFoundError
from booking_engine.application.ports.document_store import DocumentStorePort
from booking_engine.application.utils.date_parser import now_iso
from booking_engine.application.utils.documents import ORDERS, deserialize_order, serialize_order
from booking_engine.application.utils.notes import make_note
from booking_engine.domain.entities.order import Order
from booking_engine.domain.entities.payment import PaymentStatus

EDITABLE_FIELDS = frozenset({"client_name", "client_phone", "total_amount", "dp_amount", "payment_status", "items"})


def _check_amount(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidInputError(f"{name} must be a non-negative integer")


def _validate_fields(values: dict[str, Any]) -> dict[str, Any]:
    cleaned = dict(values)
    if "client_name" in cleaned:
        name = (cleaned["client_name"] or "").strip()
        if not name:
            raise InvalidInputError("client_name is required")
        cleaned["client_name"] = name
    if "client_phone" in cleaned:
        cleaned["client_phone"] = (cleaned["client_phone"] or "").strip()
    for key in ("total_amount", "dp_amount"):
        if key in cleaned:
            _check_amount(key, cleaned[key])
    if "payment_status" in cleaned:
        try:
            cleaned["payment_status"] = PaymentStatus(cleaned["payment_status"]).value
        except ValueError:
            raise InvalidInputError(f"unknown payment status {cleaned['payment_status']!r}")
    if "items" in cleaned:
        cleaned["items"] = [i.strip() for i in cleaned["items"] or [] if i and i.strip()]
    return cleaned


class OrderUseCase:
    """Manual orders: a single down-payment amount and a payment status staff set by hand."""

    def __init__(self, store: DocumentStorePort, timezone: ZoneInfo) -> None:
        self._store = store
        self._timezone = timezone
        self._logger = logging.getLogger(__name__)

    def _load(self, order_id: str) -> Order:
        doc = self._store.get(ORDERS, order_id)
        if doc is None:
            raise NotFoundError(f"order {order_id} not found")
        return deserialize_order(doc)

    def create_order(self, draft: OrderDraft, staff: str) -> OperationResult[Order]:
        try:
            fields = _validate_fields(
                {
                    "client_name": draft.client_name,
                    "client_phone": draft.client_phone,
                    "total_amount": draft.total_amount,
                    "dp_amount": draft.dp_amount,
                    "payment_status": draft.payment_status,
                    "items": list(draft.items),
                }
            )
            now = now_iso(self._timezone)
            notes = (make_note(draft.note, staff, now),) if draft.note and draft.note.strip() else ()
            order = Order(
                id="",
                client_name=fields["client_name"],
                client_phone=fields["client_phone"],
                total_amount=fields["total_amount"],
                dp_amount=fields["dp_amount"],
                payment_status=PaymentStatus(fields["payment_status"]),
                items=tuple(fields["items"]),
                notes=notes,
                last_updated_by=staff,
                created_at=now,
            )
            order_id = self._store.insert(ORDERS, serialize_order(order))
            created = self._load(order_id)
        except BookingEngineError as e:
            self._logger.warning("Order not created", extra={"reason": str(e), "staff": staff})
            return OperationResult.from_error(e)

        self._logger.info("Order created", extra={"order_id": created.id, "staff": staff})
        return OperationResult.success(created)

    def get_order(self, order_id: str) -> OperationResult[Order]:
        try:
            return OperationResult.success(self._load(order_id))
        except BookingEngineError as e:
            return OperationResult.from_error(e)

    def list_orders(self) -> OperationResult[list[Order]]:
        try:
            docs = self._store.list_all(ORDERS, order_by="created_at", descending=True)
        except BookingEngineError as e:
            return OperationResult.from_error(e)
        return OperationResult.success([deserialize_order(d) for d in docs])

    def update_order(self, order_id: str, changes: dict[str, Any], staff: str) -> OperationResult[Order]:
        try:
            unknown = set(changes) - EDITABLE_FIELDS
            if unknown:
                raise InvalidInputError(f"fields not editable: {sorted(unknown)}")
            fields = _validate_fields(changes)
            fields["last_updated_by"] = staff
            fields["updated_at"] = now_iso(self._timezone)
            if not self._store.update(ORDERS, order_id, fields):
                raise NotFoundError(f"order {order_id} not found")
            updated = self._load(order_id)
        except BookingEngineError as e:
            self._logger.warning("Order edit failed", extra={"order_id": order_id, "reason": str(e)})
            return OperationResult.from_error(e)

        self._logger.info("Order edited", extra={"order_id": order_id, "staff": staff})
        return OperationResult.success(updated)

    def set_payment_status(self, order_id: str, status: PaymentStatus, staff: str) -> OperationResult[Order]:
        return self.update_order(order_id, {"payment_status": status}, staff)

    def delete_order(self, order_id: str, staff: str) -> OperationResult[None]:
        try:
            if not self._store.delete(ORDERS, order_id):
                raise NotFoundError(f"order {order_id} not found")
        except BookingEngineError as e:
            return OperationResult.from_error(e)

        self._logger.warning("Order deleted", extra={"order_id": order_id, "staff": staff})
        return OperationResult.success(None)
