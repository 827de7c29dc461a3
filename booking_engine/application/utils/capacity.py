from __future__ import annotations

import calendar
from datetime import date
from typing import Iterable

from booking_engine.domain.entities.booking import Booking, BookingStatus
from booking_engine.domain.entities.calendar_day import CalendarDay, DateStatus

MONTH_NAMES = {
    "id": (
        "Januari", "Februari", "Maret", "April", "Mei", "Juni",
        "Juli", "Agustus", "September", "Oktober", "November", "Desember",
    ),
    "en": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
}

WEEKDAY_LABELS = {
    "id": ("Min", "Sen", "Sel", "Rab", "Kam", "Jum", "Sab"),
    "en": ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
}


def counts_toward_capacity(booking: Booking) -> bool:
    # Pending and Confirmed count alike; only cancelled bookings free the slot.
    return booking.status != BookingStatus.CANCELLED


def occupancy(day: date, bookings: Iterable[Booking]) -> int:
    key = day.isoformat()
    return sum(1 for b in bookings if b.date == key and counts_toward_capacity(b))


def classify_count(count: int, daily_capacity: int) -> DateStatus:
    if count == 0:
        return DateStatus.AVAILABLE
    if count >= daily_capacity:
        return DateStatus.FULL
    return DateStatus.BOOKED


def classify_date(day: date, bookings: Iterable[Booking], daily_capacity: int, today: date) -> CalendarDay:
    count = occupancy(day, bookings)
    status = classify_count(count, daily_capacity)
    is_past = day < today
    return CalendarDay(
        date=day.isoformat(),
        status=status,
        booking_count=count,
        is_past=is_past,
        selectable=not is_past and status != DateStatus.FULL,
    )


def is_selectable(day: date, bookings: Iterable[Booking], daily_capacity: int, today: date) -> bool:
    return classify_date(day, bookings, daily_capacity, today).selectable


def month_labels(language: str) -> tuple[tuple[str, ...], tuple[str, ...]]:
    lang = language if language in MONTH_NAMES else "id"
    return MONTH_NAMES[lang], WEEKDAY_LABELS[lang]


def leading_blanks(year: int, month: int) -> int:
    """Number of empty cells before day 1 in a Sunday-first grid."""
    # calendar.weekday: Monday == 0
    return (calendar.weekday(year, month, 1) + 1) % 7


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]
