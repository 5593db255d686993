"""Team entity."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from core.dates import format_date, parse_optional_date
from .player import Player
from .videogame import Videogame


@dataclass(frozen=True, eq=False)
class Team:
    """A team, optionally with its current roster."""

    id: int
    name: str
    slug: Optional[str] = None
    acronym: Optional[str] = None
    image_url: Optional[str] = None
    location: Optional[str] = None
    players: Optional[tuple[Player, ...]] = None
    current_videogame: Optional[Videogame] = None
    modified_at: Optional[datetime] = None

    @property
    def display_name(self) -> str:
        return self.acronym or self.name

    @property
    def roster_size(self) -> int:
        return len(self.players) if self.players else 0

    @property
    def has_roster(self) -> bool:
        return self.roster_size > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Team):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(('team', self.id))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Team:
        players = data.get('players')
        videogame = data.get('current_videogame')
        return cls(
            id=data['id'],
            name=data['name'],
            slug=data.get('slug'),
            acronym=data.get('acronym'),
            image_url=data.get('image_url'),
            location=data.get('location'),
            players=tuple(Player.from_dict(p) for p in players) if players is not None else None,
            current_videogame=Videogame.from_dict(videogame) if videogame else None,
            modified_at=parse_optional_date(data.get('modified_at')),
        )

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'slug': self.slug,
            'acronym': self.acronym,
            'image_url': self.image_url,
            'location': self.location,
            'players': [p.to_dict() for p in self.players] if self.players is not None else None,
            'current_videogame': self.current_videogame.to_dict() if self.current_videogame else None,
            'modified_at': format_date(self.modified_at),
        }
