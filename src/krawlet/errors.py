"""Error types raised by the Krawlet SDK."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

import httpx

from .models import ErrorResponse


class ErrorCode(str, Enum):
    """Error codes returned by the Krawlet API."""

    # Client errors (4xx)
    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Resource-specific errors
    PLAYER_NOT_FOUND = "PLAYER_NOT_FOUND"
    SHOP_NOT_FOUND = "SHOP_NOT_FOUND"
    TURTLE_NOT_FOUND = "TURTLE_NOT_FOUND"
    INVALID_API_KEY = "INVALID_API_KEY"

    # Server errors (5xx)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    HEALTH_CHECK_FAILED = "HEALTH_CHECK_FAILED"

    # Synthesised client-side when an error body cannot be parsed
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


# Transport failures that never produced an HTTP response and are worth re-issuing.
RETRYABLE_TRANSPORT_ERRORS = (httpx.TimeoutException, httpx.NetworkError, httpx.RemoteProtocolError)


class KrawletError(Exception):
    """An API call failed with an HTTP response.

    ``code`` is the API's error token (see :class:`ErrorCode`), ``status_code``
    the HTTP status. ``response`` holds the parsed error envelope when the
    body could be read.
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int,
        request_id: Optional[str] = None,
        details: Any = None,
        response: Optional[ErrorResponse] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code.value if isinstance(code, ErrorCode) else code
        self.status_code = status_code
        self.request_id = request_id
        self.details = details
        self.response = response

    @classmethod
    def from_envelope(cls, envelope: ErrorResponse, status_code: int) -> "KrawletError":
        return cls(
            envelope.error.message,
            envelope.error.code,
            status_code,
            request_id=envelope.meta.request_id if envelope.meta else None,
            details=envelope.error.details,
            response=envelope,
        )

    @classmethod
    def unknown(cls, status_code: int, reason: str) -> "KrawletError":
        return cls(f"HTTP {status_code}: {reason}", ErrorCode.UNKNOWN_ERROR, status_code)

    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    def is_server_error(self) -> bool:
        return self.status_code >= 500

    def is_rate_limit_error(self) -> bool:
        return self.status_code == 429 or self.code == ErrorCode.RATE_LIMIT_EXCEEDED.value

    def __repr__(self) -> str:
        return (
            f"KrawletError(code={self.code!r}, status_code={self.status_code}, "
            f"request_id={self.request_id!r}, message={self.message!r})"
        )


__all__ = ["ErrorCode", "KrawletError", "RETRYABLE_TRANSPORT_ERRORS"]
