from __future__ import annotations

import logging

from booking_engine.application.ports.booking_notifier import BookingNotifierPort
from booking_engine.domain.entities.booking import Booking


class MockBookingNotifier(BookingNotifierPort):
    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []
        self._logger = logging.getLogger(__name__)

    def notify_new_booking(self, booking: Booking, language: str) -> None:
        self.sent.append((booking.id, language))
        self._logger.info(
            "Mock new booking notification",
            extra={"booking_id": booking.id, "language": language},
        )
