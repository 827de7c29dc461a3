from __future__ import annotations

from booking_engine.application.ports.booking_notifier import BookingNotifierPort
from booking_engine.application.utils.documents import serialize_booking
from booking_engine.domain.entities.booking import Booking
from booking_engine.infrastructure.notify.webhook_client import WebhookClient


class WebhookBookingNotifier(BookingNotifierPort):
    """Hands the raw booking to an outbound webhook; message formatting happens downstream."""

    def __init__(self, client: WebhookClient) -> None:
        self._client = client

    def notify_new_booking(self, booking: Booking, language: str) -> None:
        payload = serialize_booking(booking)
        payload["id"] = booking.id
        payload["language"] = language
        self._client.post_event("booking.created", payload)
