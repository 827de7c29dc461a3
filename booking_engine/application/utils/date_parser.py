from __future__ import annotations

import re
from datetime import date, datetime
from zoneinfo import ZoneInfo

from booking_engine.application.exceptions import InvalidInputError

_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


def parse_iso_date(value: str | None, field: str = "date") -> date:
    """Parse a YYYY-MM-DD string, raising InvalidInputError on anything else."""
    if not value or not value.strip():
        raise InvalidInputError(f"{field} is required")
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        raise InvalidInputError(f"{field} must be YYYY-MM-DD, got {value!r}")


def parse_time_24h(value: str | None, field: str = "time") -> tuple[int, int]:
    """Parse an HH:MM string into (hour, minute)."""
    if not value or not value.strip():
        raise InvalidInputError(f"{field} is required")
    match = _TIME_PATTERN.match(value.strip())
    if not match:
        raise InvalidInputError(f"{field} must be HH:MM, got {value!r}")
    return int(match.group(1)), int(match.group(2))


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move (year, month) by ``delta`` months."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def safe_timezone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except Exception:
        return ZoneInfo("UTC")


def today_in(timezone: ZoneInfo) -> date:
    return datetime.now(timezone).date()


def now_iso(timezone: ZoneInfo) -> str:
    return datetime.now(timezone).isoformat(timespec="seconds")
