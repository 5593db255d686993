"""Tournament entity: one stage of a series (e.g. group stage, playoffs)."""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from core.dates import format_date, parse_date, parse_optional_date
from .schedule import Scheduled
from .team import Team

_NON_NUMERIC = re.compile(r"[^0-9.]")


@dataclass(frozen=True, eq=False)
class Tournament(Scheduled):
    """A tournament. ``serie_id`` and ``league_id`` are bare foreign keys."""

    id: int
    name: str
    slug: Optional[str]
    serie_id: int
    league_id: int
    modified_at: datetime
    begin_at: Optional[datetime] = None
    end_at: Optional[datetime] = None
    live_supported: bool = False
    has_bracket: bool = False
    prizepool: Optional[str] = None
    tier: Optional[str] = None
    teams: Optional[tuple[Team, ...]] = None
    winner_id: Optional[int] = None
    winner_type: Optional[str] = None

    @property
    def team_count(self) -> int:
        return len(self.teams) if self.teams else 0

    @property
    def prizepool_amount(self) -> Optional[float]:
        """Numeric part of ``prizepool`` ("10000 United States Dollar" -> 10000.0)."""
        if not self.prizepool:
            return None
        cleaned = _NON_NUMERIC.sub("", self.prizepool)
        try:
            return float(cleaned)
        except ValueError:
            return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tournament):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(('tournament', self.id))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Tournament:
        teams = data.get('teams')
        return cls(
            id=data['id'],
            name=data['name'],
            slug=data.get('slug'),
            serie_id=data['serie_id'],
            league_id=data['league_id'],
            modified_at=parse_date(data['modified_at']),
            begin_at=parse_optional_date(data.get('begin_at')),
            end_at=parse_optional_date(data.get('end_at')),
            live_supported=bool(data.get('live_supported', False)),
            has_bracket=bool(data.get('has_bracket', False)),
            prizepool=data.get('prizepool'),
            tier=data.get('tier'),
            teams=tuple(Team.from_dict(t) for t in teams) if teams is not None else None,
            winner_id=data.get('winner_id'),
            winner_type=data.get('winner_type'),
        )

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'slug': self.slug,
            'serie_id': self.serie_id,
            'league_id': self.league_id,
            'modified_at': format_date(self.modified_at),
            'begin_at': format_date(self.begin_at),
            'end_at': format_date(self.end_at),
            'live_supported': self.live_supported,
            'has_bracket': self.has_bracket,
            'prizepool': self.prizepool,
            'tier': self.tier,
            'teams': [t.to_dict() for t in self.teams] if self.teams is not None else None,
            'winner_id': self.winner_id,
            'winner_type': self.winner_type,
        }
