from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DateStatus(str, Enum):
    AVAILABLE = "available"
    BOOKED = "booked"
    FULL = "full"


@dataclass(frozen=True)
class CalendarDay:
    date: str  # YYYY-MM-DD
    status: DateStatus
    booking_count: int
    is_past: bool
    selectable: bool


@dataclass(frozen=True)
class MonthView:
    year: int
    month: int
    month_name: str
    weekday_labels: tuple[str, ...]  # Sunday first
    leading_blanks: int  # empty cells before day 1 in a Sunday-first grid
    days: tuple[CalendarDay, ...]
    previous_month: tuple[int, int]
    next_month: tuple[int, int]
