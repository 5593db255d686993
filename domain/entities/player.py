"""Player entity representing a professional StarCraft II player."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any, Mapping, Optional

from core.dates import format_date, parse_optional_date
from .videogame import Videogame

if TYPE_CHECKING:
    from .team import Team


@dataclass(frozen=True, eq=False)
class Player:
    """A player as returned by ``/starcraft-2/players``."""

    # Identity
    id: int
    name: str
    slug: Optional[str] = None

    # Profile
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[str] = None
    nationality: Optional[str] = None
    image_url: Optional[str] = None
    age: Optional[int] = None
    birthday: Optional[datetime] = None
    hometown: Optional[str] = None

    # Affiliation
    current_team: Optional[Team] = None
    current_videogame: Optional[Videogame] = None

    @property
    def full_name(self) -> Optional[str]:
        """First and last name, when both are known."""
        if self.first_name is None or self.last_name is None:
            return None
        return f"{self.first_name} {self.last_name}"

    @property
    def display_name(self) -> str:
        return self.full_name or self.name

    @property
    def has_team(self) -> bool:
        return self.current_team is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(('player', self.id))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Player:
        from .team import Team

        team = data.get('current_team')
        videogame = data.get('current_videogame')
        return cls(
            id=data['id'],
            name=data['name'],
            slug=data.get('slug'),
            first_name=data.get('first_name'),
            last_name=data.get('last_name'),
            role=data.get('role'),
            nationality=data.get('nationality'),
            image_url=data.get('image_url'),
            age=data.get('age'),
            birthday=parse_optional_date(data.get('birthday')),
            hometown=data.get('hometown'),
            current_team=Team.from_dict(team) if team else None,
            current_videogame=Videogame.from_dict(videogame) if videogame else None,
        )

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'slug': self.slug,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'role': self.role,
            'nationality': self.nationality,
            'image_url': self.image_url,
            'age': self.age,
            'birthday': format_date(self.birthday),
            'hometown': self.hometown,
            'current_team': self.current_team.to_dict() if self.current_team else None,
            'current_videogame': self.current_videogame.to_dict() if self.current_videogame else None,
        }
