"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AppError(Exception):
    """Base application error."""

    code: str
    message: str
    status_code: int
    details: Any | None = None


class ValidationError(AppError):
    """Input validation error."""

    def __init__(self, message: str = "Validation error", details: Any | None = None) -> None:
        super().__init__(code="validation_error", message=message, status_code=400, details=details)


class UnsupportedTypeError(AppError):
    """Unknown lottery type (or other format key)."""

    def __init__(self, lottery_type: str, details: Any | None = None) -> None:
        super().__init__(
            code="unsupported_type",
            message=f"Unsupported lottery type: {lottery_type}",
            status_code=400,
            details=details,
        )


class InvalidRangeError(AppError):
    """More distinct values requested than the range can hold."""

    def __init__(self, message: str = "Invalid range", details: Any | None = None) -> None:
        super().__init__(code="invalid_range", message=message, status_code=400, details=details)


class UpstreamUnavailableError(AppError):
    """A third-party provider failed. Services absorb this and fall back."""

    def __init__(self, message: str = "Upstream unavailable", details: Any | None = None) -> None:
        super().__init__(code="upstream_unavailable", message=message, status_code=502, details=details)
