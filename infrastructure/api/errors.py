"""Error taxonomy for PandaScore API calls.

Every failure in the request pipeline surfaces as an :class:`APIError`
subclass. ``is_retryable`` and ``suggested_retry_delay`` drive the retry
handler; ``str(error)`` is the human-readable description shown by the CLI.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ErrorResponse:
    """Error body returned by the API: ``{"error": ..., "message": ...}``."""

    error: str
    message: str

    @classmethod
    def parse(cls, content: bytes) -> Optional[ErrorResponse]:
        try:
            data = json.loads(content)
        except (ValueError, UnicodeDecodeError):
            return None
        if not isinstance(data, dict) or not isinstance(data.get("message"), str):
            return None
        return cls(error=str(data.get("error", "")), message=data["message"])


class APIError(Exception):
    """Base class for all client errors."""

    retryable: bool = False

    @property
    def is_retryable(self) -> bool:
        return self.retryable

    @property
    def suggested_retry_delay(self) -> Optional[float]:
        return None


class NetworkError(APIError):
    retryable = True

    def __init__(self, underlying: BaseException) -> None:
        self.underlying = underlying
        super().__init__(f"Network error: {underlying}")

    @property
    def suggested_retry_delay(self) -> Optional[float]:
        return 2.0


class HTTPError(APIError):
    def __init__(self, status_code: int, response: Optional[ErrorResponse] = None) -> None:
        self.status_code = status_code
        self.response = response
        message = response.message if response else "Unknown error"
        super().__init__(f"HTTP {status_code}: {message}")


class UnauthorizedError(APIError):
    def __init__(self, message: str = "Invalid authentication token") -> None:
        self.message = message
        super().__init__(f"Unauthorized: {message}")


class ForbiddenError(APIError):
    def __init__(self, message: str = "Plan does not support requested URL") -> None:
        self.message = message
        super().__init__(f"Forbidden: {message}")


class NotFoundError(APIError):
    def __init__(self, resource: str) -> None:
        self.resource = resource
        super().__init__(f"Resource not found: {resource}")


class RateLimitExceededError(APIError):
    retryable = True

    def __init__(self, retry_after: Optional[float] = None, remaining: Optional[int] = None) -> None:
        self.retry_after = retry_after
        self.remaining = remaining
        message = "Rate limit exceeded"
        if remaining is not None:
            message += f" (remaining: {remaining})"
        if retry_after is not None:
            message += f" - retry after {int(retry_after)}s"
        super().__init__(message)

    @property
    def suggested_retry_delay(self) -> Optional[float]:
        return self.retry_after


class ServerError(APIError):
    retryable = True

    def __init__(self, status_code: int, message: Optional[str] = None) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"Server error {status_code}: {message or 'Unknown error'}")

    @property
    def suggested_retry_delay(self) -> Optional[float]:
        return 5.0


class DecodingError(APIError):
    def __init__(self, underlying: BaseException, data: Optional[bytes] = None) -> None:
        self.underlying = underlying
        self.data = data
        super().__init__(f"Decoding error: {underlying!r}")


class InvalidRequestError(APIError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid request: {reason}")


class RequestTimeoutError(APIError):
    retryable = True

    def __init__(self, underlying: Optional[BaseException] = None) -> None:
        self.underlying = underlying
        super().__init__("Request timed out")

    @property
    def suggested_retry_delay(self) -> Optional[float]:
        return 2.0


class CacheError(APIError):
    def __init__(self, underlying: BaseException) -> None:
        self.underlying = underlying
        super().__init__(f"Cache error: {underlying}")


class WebSocketError(APIError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"WebSocket error: {reason}")


def is_retryable(error: BaseException) -> bool:
    """Default retry predicate: only retryable API errors."""
    return isinstance(error, APIError) and error.is_retryable
