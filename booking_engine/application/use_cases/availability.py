from __future__ import annotations

import logging
from datetime import date
from zoneinfo import ZoneInfo

from booking_engine.application.dto.result import OperationResult
from booking_engine.application.exceptions import BookingEngineError, InvalidInputError
from booking_engine.application.ports.document_store import DocumentStorePort
from booking_engine.application.utils.capacity import (
    classify_date,
    days_in_month,
    leading_blanks,
    month_labels,
)
from booking_engine.application.utils.date_parser import parse_iso_date, shift_month, today_in
from booking_engine.application.utils.documents import BOOKINGS, deserialize_booking
from booking_engine.domain.entities.booking import Booking
from booking_engine.domain.entities.calendar_day import CalendarDay, MonthView


class CalendarAvailabilityUseCase:
    """
    Classifies calendar dates by occupancy.

    Reads are snapshots: two submissions racing for the last slot of a day can
    both pass the check. There is no reservation hold.
    """

    def __init__(
        self,
        store: DocumentStorePort,
        timezone: ZoneInfo,
        daily_capacity: int = 6,
        advertised_daily_limit: int = 4,
    ) -> None:
        self._store = store
        self._timezone = timezone
        self._daily_capacity = daily_capacity
        self._advertised_daily_limit = advertised_daily_limit
        self._logger = logging.getLogger(__name__)

    @property
    def daily_capacity(self) -> int:
        return self._daily_capacity

    @property
    def advertised_daily_limit(self) -> int:
        return self._advertised_daily_limit

    def _bookings_on(self, day: date) -> list[Booking]:
        docs = self._store.query(BOOKINGS, "date", day.isoformat(), order_by="time")
        return [deserialize_booking(d) for d in docs]

    def _bookings_in_month(self, year: int, month: int) -> list[Booking]:
        prefix = f"{year:04d}-{month:02d}-"
        docs = self._store.list_all(BOOKINGS, order_by="date")
        return [deserialize_booking(d) for d in docs if str(d.get("date", "")).startswith(prefix)]

    def check_date(self, day: date, today: date | None = None) -> CalendarDay:
        """Classify one date. Raises StoreUnavailableError; used by callers that already handle errors."""
        today = today or today_in(self._timezone)
        return classify_date(day, self._bookings_on(day), self._daily_capacity, today)

    def classify(self, date_iso: str, today: date | None = None) -> OperationResult[CalendarDay]:
        try:
            day = parse_iso_date(date_iso)
            return OperationResult.success(self.check_date(day, today))
        except BookingEngineError as e:
            self._logger.warning("Date classification failed", extra={"date": date_iso, "reason": str(e)})
            return OperationResult.from_error(e)

    def bookings_on_date(self, date_iso: str) -> OperationResult[list[Booking]]:
        try:
            day = parse_iso_date(date_iso)
            return OperationResult.success(self._bookings_on(day))
        except BookingEngineError as e:
            return OperationResult.from_error(e)

    def month_view(
        self,
        year: int,
        month: int,
        language: str = "id",
        today: date | None = None,
    ) -> OperationResult[MonthView]:
        try:
            if not 1 <= month <= 12:
                raise InvalidInputError(f"month must be 1-12, got {month}")
            if not 1 <= year <= 9999:
                raise InvalidInputError(f"year out of range: {year}")

            today = today or today_in(self._timezone)
            bookings = self._bookings_in_month(year, month)
            month_names, weekday_labels = month_labels(language)
            days = tuple(
                classify_date(date(year, month, d), bookings, self._daily_capacity, today)
                for d in range(1, days_in_month(year, month) + 1)
            )
            view = MonthView(
                year=year,
                month=month,
                month_name=month_names[month - 1],
                weekday_labels=weekday_labels,
                leading_blanks=leading_blanks(year, month),
                days=days,
                previous_month=shift_month(year, month, -1),
                next_month=shift_month(year, month, 1),
            )
            return OperationResult.success(view)
        except BookingEngineError as e:
            self._logger.warning(
                "Month view failed", extra={"year": year, "month": month, "reason": str(e)}
            )
            return OperationResult.from_error(e)
