"""League entity."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from core.dates import format_date, parse_date


@dataclass(frozen=True, eq=False)
class League:
    id: int
    name: str
    slug: Optional[str]
    modified_at: datetime
    image_url: Optional[str] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, League):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(('league', self.id))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> League:
        return cls(
            id=data['id'],
            name=data['name'],
            slug=data.get('slug'),
            modified_at=parse_date(data['modified_at']),
            image_url=data.get('image_url'),
        )

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'slug': self.slug,
            'modified_at': format_date(self.modified_at),
            'image_url': self.image_url,
        }
