from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import date
from typing import Any
from zoneinfo import ZoneInfo

from booking_engine.application.dto.drafts import BookingDraft
from booking_engine.application.dto.result import OperationResult
from booking_engine.application.exceptions import BookingEngineError, InvalidInputError, NotFoundError
from booking_engine.application.ports.booking_notifier import BookingNotifierPort
from booking_engine.application.ports.document_store import DocumentStorePort
from booking_engine.application.ports.package_catalog import PackageCatalogPort
from booking_engine.application.use_cases.availability import CalendarAvailabilityUseCase
from booking_engine.application.utils.date_parser import now_iso, parse_iso_date, parse_time_24h
from booking_engine.application.utils.documents import BOOKINGS, deserialize_booking, serialize_booking
from booking_engine.domain.entities.booking import Booking, BookingStatus, HennaProvider

EDITABLE_FIELDS = frozenset(
    {
        "client_name",
        "client_phone",
        "address",
        "social_media",
        "date",
        "time",
        "event_date",
        "ceremony_time",
        "henna_by",
        "selected_package",
        "package_price",
        "request_note",
    }
)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _format_time(hour_minute: tuple[int, int]) -> str:
    return f"{hour_minute[0]:02d}:{hour_minute[1]:02d}"


def _validate_fields(values: dict[str, Any]) -> dict[str, Any]:
    """Validate and normalize booking fields present in ``values``."""
    cleaned = dict(values)
    for key in ("client_name", "client_phone"):
        if key in cleaned and not _clean(cleaned[key]):
            raise InvalidInputError(f"{key} is required")
    # Stored in canonical form; capacity and month lookups match on YYYY-MM-DD and HH:MM.
    if "date" in cleaned:
        cleaned["date"] = parse_iso_date(cleaned["date"], "date").isoformat()
    if "time" in cleaned:
        cleaned["time"] = _format_time(parse_time_24h(cleaned["time"], "time"))
    if _clean(cleaned.get("event_date")):
        cleaned["event_date"] = parse_iso_date(cleaned["event_date"], "event_date").isoformat()
    if _clean(cleaned.get("ceremony_time")):
        cleaned["ceremony_time"] = _format_time(parse_time_24h(cleaned["ceremony_time"], "ceremony_time"))
    if cleaned.get("henna_by"):
        try:
            cleaned["henna_by"] = HennaProvider(cleaned["henna_by"]).value
        except ValueError:
            raise InvalidInputError(f"henna_by must be one of {[h.value for h in HennaProvider]}")
    price = cleaned.get("package_price")
    if price is not None and (isinstance(price, bool) or not isinstance(price, int) or price < 0):
        raise InvalidInputError("package_price must be a non-negative integer")
    for key, value in list(cleaned.items()):
        if isinstance(value, str):
            cleaned[key] = value.strip() if key in ("client_name", "client_phone", "date", "time") else _clean(value)
    return cleaned


class BookingUseCase:
    def __init__(
        self,
        store: DocumentStorePort,
        catalog: PackageCatalogPort,
        notifier: BookingNotifierPort,
        availability: CalendarAvailabilityUseCase,
        timezone: ZoneInfo,
    ) -> None:
        self._store = store
        self._catalog = catalog
        self._notifier = notifier
        self._availability = availability
        self._timezone = timezone
        self._logger = logging.getLogger(__name__)

    def _load(self, booking_id: str) -> Booking:
        doc = self._store.get(BOOKINGS, booking_id)
        if doc is None:
            raise NotFoundError(f"booking {booking_id} not found")
        return deserialize_booking(doc)

    def _live_price(self, package_id: str | None) -> int | None:
        if not package_id:
            return None
        package = self._catalog.get_package(package_id)
        return package.price if package else None

    def _insert(self, fields: dict[str, Any], status: BookingStatus, staff: str | None) -> Booking:
        booking = Booking(
            id="",
            client_name=fields["client_name"],
            client_phone=fields["client_phone"],
            date=fields["date"],
            time=fields["time"],
            status=status,
            address=fields.get("address"),
            social_media=fields.get("social_media"),
            event_date=fields.get("event_date"),
            ceremony_time=fields.get("ceremony_time"),
            henna_by=HennaProvider(fields["henna_by"]) if fields.get("henna_by") else None,
            selected_package=fields.get("selected_package"),
            package_price=fields.get("package_price"),
            request_note=fields.get("request_note"),
            last_updated_by=staff,
            created_at=now_iso(self._timezone),
        )
        booking_id = self._store.insert(BOOKINGS, serialize_booking(booking))
        return self._load(booking_id)

    def submit_public_booking(
        self,
        draft: BookingDraft,
        language: str = "id",
        today: date | None = None,
        notify: bool = True,
    ) -> OperationResult[Booking]:
        """
        Create a Pending booking from the public form.
        The date must be selectable; the notifier runs after the insert and
        its failures never undo the booking.
        """
        try:
            fields = _validate_fields(asdict(draft))
            day = self._availability.check_date(parse_iso_date(fields["date"]), today)
            if not day.selectable:
                reason = "in the past" if day.is_past else "fully booked"
                raise InvalidInputError(f"date {day.date} is not available ({reason})")

            booking = self._insert(fields, BookingStatus.PENDING, staff=None)
        except BookingEngineError as e:
            self._logger.warning("Public booking rejected", extra={"reason": str(e), "date": draft.date})
            return OperationResult.from_error(e)

        self._logger.info(
            "Booking submitted",
            extra={"booking_id": booking.id, "date": booking.date, "language": language},
        )
        if notify:
            self.notify_new_booking(booking, language)
        return OperationResult.success(booking)

    def notify_new_booking(self, booking: Booking, language: str) -> None:
        try:
            self._notifier.notify_new_booking(booking, language)
        except Exception as e:
            self._logger.exception(
                "New booking notification failed", extra={"booking_id": booking.id, "reason": str(e)}
            )

    def create_staff_booking(self, draft: BookingDraft, staff: str) -> OperationResult[Booking]:
        """Staff entry is trusted: stored as Confirmed with the package price snapshotted."""
        try:
            fields = _validate_fields(asdict(draft))
            if fields.get("package_price") is None:
                fields["package_price"] = self._live_price(fields.get("selected_package"))
            booking = self._insert(fields, BookingStatus.CONFIRMED, staff=staff)
        except BookingEngineError as e:
            self._logger.warning("Staff booking rejected", extra={"reason": str(e), "staff": staff})
            return OperationResult.from_error(e)

        self._logger.info("Booking created by staff", extra={"booking_id": booking.id, "staff": staff})
        return OperationResult.success(booking)

    def get_booking(self, booking_id: str) -> OperationResult[Booking]:
        try:
            return OperationResult.success(self._load(booking_id))
        except BookingEngineError as e:
            return OperationResult.from_error(e)

    def list_bookings(self, status: BookingStatus | None = None) -> OperationResult[list[Booking]]:
        try:
            if status is None:
                docs = self._store.list_all(BOOKINGS, order_by="date")
            else:
                docs = self._store.query(BOOKINGS, "status", status.value, order_by="date")
            return OperationResult.success([deserialize_booking(d) for d in docs])
        except BookingEngineError as e:
            return OperationResult.from_error(e)

    def update_status(self, booking_id: str, status: BookingStatus, staff: str) -> OperationResult[Booking]:
        """
        Any state may move to any other state. Moving to Confirmed snapshots the
        live package price when the booking has none yet.
        """
        try:
            booking = self._load(booking_id)
            changes: dict[str, Any] = {
                "status": status.value,
                "last_updated_by": staff,
                "updated_at": now_iso(self._timezone),
            }
            if status == BookingStatus.CONFIRMED and booking.package_price is None:
                changes["package_price"] = self._live_price(booking.selected_package)
            if not self._store.update(BOOKINGS, booking_id, changes):
                raise NotFoundError(f"booking {booking_id} not found")
            updated = self._load(booking_id)
        except BookingEngineError as e:
            self._logger.warning(
                "Status update failed", extra={"booking_id": booking_id, "status": status.value, "reason": str(e)}
            )
            return OperationResult.from_error(e)

        self._logger.info(
            "Booking status changed",
            extra={"booking_id": booking_id, "status": status.value, "staff": staff},
        )
        return OperationResult.success(updated)

    def update_details(self, booking_id: str, changes: dict[str, Any], staff: str) -> OperationResult[Booking]:
        """Staff edit of client/schedule fields. Capacity is not re-checked; staff may overbook."""
        try:
            unknown = set(changes) - EDITABLE_FIELDS
            if unknown:
                raise InvalidInputError(f"fields not editable: {sorted(unknown)}")
            fields = _validate_fields(changes)
            fields["last_updated_by"] = staff
            fields["updated_at"] = now_iso(self._timezone)
            if not self._store.update(BOOKINGS, booking_id, fields):
                raise NotFoundError(f"booking {booking_id} not found")
            updated = self._load(booking_id)
        except BookingEngineError as e:
            self._logger.warning("Booking edit failed", extra={"booking_id": booking_id, "reason": str(e)})
            return OperationResult.from_error(e)

        self._logger.info("Booking edited", extra={"booking_id": booking_id, "staff": staff})
        return OperationResult.success(updated)

    def delete_booking(self, booking_id: str, staff: str) -> OperationResult[None]:
        """Irreversible."""
        try:
            if not self._store.delete(BOOKINGS, booking_id):
                raise NotFoundError(f"booking {booking_id} not found")
        except BookingEngineError as e:
            return OperationResult.from_error(e)

        self._logger.warning("Booking deleted", extra={"booking_id": booking_id, "staff": staff})
        return OperationResult.success(None)
