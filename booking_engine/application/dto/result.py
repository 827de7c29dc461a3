from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    INVALID_INPUT = "invalid_input"
    STORE_UNAVAILABLE = "store_unavailable"


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    ok: bool
    value: T | None = None
    error: ErrorKind | None = None
    message: str | None = None

    @classmethod
    def success(cls, value: T | None = None) -> "OperationResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> "OperationResult[T]":
        return cls(ok=False, error=error, message=message)

    @classmethod
    def from_error(cls, exc: Exception) -> "OperationResult[T]":
        kind = getattr(exc, "kind", ErrorKind.STORE_UNAVAILABLE)
        return cls(ok=False, error=kind, message=str(exc))
