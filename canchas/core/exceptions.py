"""Domain errors raised by the canchas services.

Services never build HTTP responses themselves; they raise one of these and
``canchas.core.error_handlers`` turns it into a JSON payload.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class CanchasError(Exception):
    """Base class for every error surfaced by the service layer."""

    status_code: int = 500
    error: str = "error"

    def __init__(self, detail: str, **extra: Any) -> None:
        super().__init__(detail)
        self.detail = detail
        self.extra: Dict[str, Any] = extra

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"detail": self.detail, "error": self.error}
        payload.update(self.extra)
        return payload


class ValidationError(CanchasError):
    """Missing or malformed input; the caller can resubmit corrected data."""

    status_code = 400
    error = "validation_error"


class NotFoundError(CanchasError):
    status_code = 404
    error = "not_found"


class ConflictError(CanchasError):
    """A business rule blocks the operation given the current stored state."""

    status_code = 409
    error = "conflict"


class StorageError(CanchasError):
    status_code = 500
    error = "storage_error"

    def __init__(self, detail: str, *, cause: Optional[BaseException] = None, **extra: Any) -> None:
        super().__init__(detail, **extra)
        self.cause = cause


__all__ = [
    "CanchasError",
    "ConflictError",
    "NotFoundError",
    "StorageError",
    "ValidationError",
]
