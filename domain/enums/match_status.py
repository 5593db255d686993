"""Match and game status values reported by PandaScore."""
from enum import Enum


class MatchStatus(Enum):
    """Lifecycle state of a match or an individual game."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    FINISHED = "finished"
    # PandaScore also reports these for cancelled or forfeited fixtures
    CANCELED = "canceled"
    POSTPONED = "postponed"

    @property
    def is_live(self) -> bool:
        return self is MatchStatus.RUNNING

    @property
    def is_terminal(self) -> bool:
        return self in (MatchStatus.FINISHED, MatchStatus.CANCELED)
