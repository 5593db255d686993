"""Videogame reference embedded in players and teams."""
from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Videogame:
    id: int
    name: str
    slug: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Videogame":
        return cls(id=data['id'], name=data['name'], slug=data['slug'])

    def to_dict(self) -> dict:
        return {'id': self.id, 'name': self.name, 'slug': self.slug}
