from __future__ import annotations

from datetime import date
from zoneinfo import ZoneInfo

from booking_engine.application.dto.drafts import BookingDraft
from booking_engine.application.ports.booking_notifier import BookingNotifierPort

TZ = ZoneInfo("Asia/Jakarta")
TODAY = date(2025, 3, 1)


class FailingNotifier(BookingNotifierPort):
    def __init__(self) -> None:
        self.calls = 0

    def notify_new_booking(self, booking, language):
        self.calls += 1
        raise RuntimeError("webhook down")


def make_draft(**overrides) -> BookingDraft:
    values = {
        "client_name": "Siti Rahma",
        "client_phone": "081234567890",
        "date": "2025-03-10",
        "time": "10:00",
    }
    values.update(overrides)
    return BookingDraft(**values)
