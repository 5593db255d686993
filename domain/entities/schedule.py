"""Time-window helpers shared by series and tournaments."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from core.dates import utcnow


class Scheduled:
    """Mixin for entities with optional ``begin_at`` / ``end_at`` bounds."""

    begin_at: Optional[datetime]
    end_at: Optional[datetime]

    def is_running_at(self, now: datetime) -> bool:
        if self.begin_at is None:
            return False
        if self.end_at is not None:
            return self.begin_at <= now <= self.end_at
        return now >= self.begin_at

    def has_ended_at(self, now: datetime) -> bool:
        return self.end_at is not None and now > self.end_at

    def is_pending_at(self, now: datetime) -> bool:
        return self.begin_at is not None and now < self.begin_at

    @property
    def is_running(self) -> bool:
        return self.is_running_at(utcnow())

    @property
    def has_ended(self) -> bool:
        return self.has_ended_at(utcnow())

    @property
    def is_pending(self) -> bool:
        return self.is_pending_at(utcnow())

    @property
    def duration(self) -> Optional[float]:
        """Scheduled length in seconds, when both bounds are known."""
        if self.begin_at is None or self.end_at is None:
            return None
        return (self.end_at - self.begin_at).total_seconds()
