"""Date handling for PandaScore payloads.

Timestamps arrive as ``2024-01-15T10:00:00Z``; birthdays and a few other
fields arrive as bare ``1998-05-23``. Both decode to timezone-aware UTC
datetimes.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

_FORMATS = (
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%d",
)


def parse_date(value: str) -> datetime:
    """Parse a PandaScore date string, trying full timestamps first.

    Raises:
        ValueError: if no known format matches.
    """
    if not isinstance(value, str):
        raise ValueError(f"Expected a date string, got {type(value).__name__}")
    for fmt in _FORMATS:
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
    try:
        # fractional seconds and other ISO-8601 offsets
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise ValueError(
            f"Expected date string to be ISO8601-formatted or YYYY-MM-DD: {value!r}"
        ) from None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def parse_optional_date(value: Any) -> Optional[datetime]:
    if value is None:
        return None
    return parse_date(value)


def format_date(value: Optional[datetime]) -> Optional[str]:
    """Inverse of :func:`parse_date`, emitting ``...Z`` UTC timestamps."""
    if value is None:
        return None
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
