from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from booking_engine.domain.entities.note import NoteEntry
from booking_engine.domain.entities.payment import Payment


class BookingStatus(str, Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class HennaProvider(str, Enum):
    EXISTING = "existing"
    STUDIO = "studio"


@dataclass(frozen=True)
class Booking:
    id: str
    client_name: str
    client_phone: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM
    status: BookingStatus = BookingStatus.PENDING
    address: str | None = None
    social_media: str | None = None
    event_date: str | None = None  # YYYY-MM-DD
    ceremony_time: str | None = None  # HH:MM
    henna_by: HennaProvider | None = None
    selected_package: str | None = None
    # Snapshot taken at confirmation; wins over the live package price once set.
    package_price: int | None = None
    request_note: str | None = None
    payments: tuple[Payment, ...] = ()
    notes: tuple[NoteEntry, ...] = ()
    last_updated_by: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
