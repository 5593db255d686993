"""Series entity: a season or edition of a league."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from core.dates import format_date, parse_date, parse_optional_date
from .schedule import Scheduled
from .tournament import Tournament


@dataclass(frozen=True, eq=False)
class Series(Scheduled):
    id: int
    name: Optional[str]
    slug: Optional[str]
    league_id: int
    full_name: str
    modified_at: datetime
    begin_at: Optional[datetime] = None
    end_at: Optional[datetime] = None
    year: Optional[int] = None
    season: Optional[str] = None
    description: Optional[str] = None
    tier: Optional[str] = None
    tournaments: Optional[tuple[Tournament, ...]] = None
    winner_id: Optional[int] = None
    winner_type: Optional[str] = None

    @property
    def tournament_count(self) -> int:
        return len(self.tournaments) if self.tournaments else 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Series):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(('series', self.id))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Series:
        tournaments = data.get('tournaments')
        return cls(
            id=data['id'],
            name=data.get('name'),
            slug=data.get('slug'),
            league_id=data['league_id'],
            full_name=data['full_name'],
            modified_at=parse_date(data['modified_at']),
            begin_at=parse_optional_date(data.get('begin_at')),
            end_at=parse_optional_date(data.get('end_at')),
            year=data.get('year'),
            season=data.get('season'),
            description=data.get('description'),
            tier=data.get('tier'),
            tournaments=(
                tuple(Tournament.from_dict(t) for t in tournaments) if tournaments is not None else None
            ),
            winner_id=data.get('winner_id'),
            winner_type=data.get('winner_type'),
        )

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'slug': self.slug,
            'league_id': self.league_id,
            'full_name': self.full_name,
            'modified_at': format_date(self.modified_at),
            'begin_at': format_date(self.begin_at),
            'end_at': format_date(self.end_at),
            'year': self.year,
            'season': self.season,
            'description': self.description,
            'tier': self.tier,
            'tournaments': (
                [t.to_dict() for t in self.tournaments] if self.tournaments is not None else None
            ),
            'winner_id': self.winner_id,
            'winner_type': self.winner_type,
        }
