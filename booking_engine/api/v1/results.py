from typing import TypeVar

from fastapi import HTTPException

from booking_engine.application.dto.result import ErrorKind, OperationResult

T = TypeVar("T")

_STATUS_CODES = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.STORE_UNAVAILABLE: 503,
}


def unwrap(result: OperationResult[T]) -> T:
    """Return the value of a successful result or raise the matching HTTPException."""
    if result.ok:
        return result.value  # type: ignore[return-value]
    status_code = _STATUS_CODES.get(result.error, 500)
    raise HTTPException(status_code=status_code, detail=result.message or (result.error.value if result.error else "error"))
