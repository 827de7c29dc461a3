from __future__ import annotations

from booking_engine.application.dto.result import ErrorKind


class BookingEngineError(RuntimeError):
    """Base for expected failures of a single operation."""

    kind: ErrorKind = ErrorKind.STORE_UNAVAILABLE


class NotFoundError(BookingEngineError):
    """Raised when a booking, order or package that must exist is missing."""

    kind = ErrorKind.NOT_FOUND


class InvalidInputError(BookingEngineError):
    """Raised when input fails validation (non-positive amounts, missing required fields)."""

    kind = ErrorKind.INVALID_INPUT


class StoreUnavailableError(BookingEngineError):
    """Raised when the document store fails (I/O errors, timeouts, unreadable data)."""

    kind = ErrorKind.STORE_UNAVAILABLE
