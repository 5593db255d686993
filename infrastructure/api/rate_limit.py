"""Rate-limit bookkeeping from PandaScore response headers."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Mapping, Optional

REMAINING_HEADER = "X-Rate-Limit-Remaining"
RESET_HEADER = "X-Rate-Limit-Reset"
RETRY_AFTER_HEADER = "Retry-After"


def header(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Case-insensitive lookup over httpx headers or a plain (cached) dict."""
    value = headers.get(name)
    if value is None:
        value = headers.get(name.lower())
    return value


def _int_header(headers: Mapping[str, str], name: str) -> Optional[int]:
    value = header(headers, name)
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def _float_header(headers: Mapping[str, str], name: str) -> Optional[float]:
    value = header(headers, name)
    if value is None:
        return None
    try:
        return float(value.strip())
    except ValueError:
        return None


def retry_after(headers: Mapping[str, str]) -> Optional[float]:
    """``Retry-After`` in seconds (the API sends delta-seconds only)."""
    return _float_header(headers, RETRY_AFTER_HEADER)


def remaining(headers: Mapping[str, str]) -> Optional[int]:
    return _int_header(headers, REMAINING_HEADER)


def reset_time(headers: Mapping[str, str]) -> Optional[datetime]:
    """Epoch seconds from ``X-Rate-Limit-Reset``; None when out of range."""
    reset = _float_header(headers, RESET_HEADER)
    if reset is None:
        return None
    try:
        return datetime.fromtimestamp(reset, tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        return None


@dataclass(frozen=True)
class RateLimitStatus:
    remaining: Optional[int] = None
    reset_time: Optional[datetime] = None


class RateLimitTracker:
    """Latest known quota, updated from every response.

    Updates are synchronous, so concurrent requests on one event loop
    cannot interleave inside ``update``. Headers missing from a response
    leave the previous value in place.
    """

    def __init__(self) -> None:
        self._remaining: Optional[int] = None
        self._reset_time: Optional[datetime] = None

    def update(self, headers: Mapping[str, str]) -> None:
        left = remaining(headers)
        if left is not None:
            self._remaining = left
        reset = reset_time(headers)
        if reset is not None:
            self._reset_time = reset

    def status(self) -> RateLimitStatus:
        return RateLimitStatus(remaining=self._remaining, reset_time=self._reset_time)
