"""Live streaming requests (frames/events feeds over WebSocket)."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple


class StreamFeed(Enum):
    FRAMES = "frames"
    EVENTS = "events"


@dataclass(frozen=True)
class StreamingRequest:
    """Subscription to a match's live feeds.

    PandaScore serves these over WebSocket, which this client does not
    implement; the client rejects every streaming request.
    """

    match_id: int
    feeds: Tuple[StreamFeed, ...] = (StreamFeed.FRAMES, StreamFeed.EVENTS)
    query_parameters: Dict[str, str] = field(default_factory=dict)

    @property
    def path(self) -> str:
        return f"/matches/{self.match_id}"
