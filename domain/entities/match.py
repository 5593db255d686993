"""Match entity and the structures nested inside it."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional

from core.dates import format_date, parse_date, parse_optional_date
from ..enums import MatchStatus


@dataclass(frozen=True)
class GameWinner:
    type: str
    id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GameWinner:
        return cls(type=data['type'], id=data.get('id'))

    def to_dict(self) -> dict:
        return {'id': self.id, 'type': self.type}


@dataclass(frozen=True)
class Game:
    """A single map played inside a match."""

    id: int
    position: int
    status: MatchStatus
    complete: bool = False
    finished: bool = False
    forfeit: bool = False
    begin_at: Optional[datetime] = None
    end_at: Optional[datetime] = None
    length: Optional[int] = None  # seconds
    winner: Optional[GameWinner] = None
    winner_type: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Game:
        winner = data.get('winner')
        return cls(
            id=data['id'],
            position=data['position'],
            status=MatchStatus(data['status']),
            complete=bool(data.get('complete', False)),
            finished=bool(data.get('finished', False)),
            forfeit=bool(data.get('forfeit', False)),
            begin_at=parse_optional_date(data.get('begin_at')),
            end_at=parse_optional_date(data.get('end_at')),
            length=data.get('length'),
            # PandaScore sends {"id": null, "type": "Player"} for undecided games
            winner=GameWinner.from_dict(winner) if winner else None,
            winner_type=data.get('winner_type'),
        )

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'position': self.position,
            'status': self.status.value,
            'complete': self.complete,
            'finished': self.finished,
            'forfeit': self.forfeit,
            'begin_at': format_date(self.begin_at),
            'end_at': format_date(self.end_at),
            'length': self.length,
            'winner': self.winner.to_dict() if self.winner else None,
            'winner_type': self.winner_type,
        }


@dataclass(frozen=True)
class OpponentDetails:
    """Either a player or a team; which one is given by ``Opponent.type``."""

    id: int
    name: str
    slug: Optional[str] = None
    image_url: Optional[str] = None
    # team fields
    acronym: Optional[str] = None
    location: Optional[str] = None
    # player fields
    active: Optional[bool] = None
    role: Optional[str] = None
    birthday: Optional[datetime] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    nationality: Optional[str] = None
    age: Optional[int] = None
    modified_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OpponentDetails:
        return cls(
            id=data['id'],
            name=data['name'],
            slug=data.get('slug'),
            image_url=data.get('image_url'),
            acronym=data.get('acronym'),
            location=data.get('location'),
            active=data.get('active'),
            role=data.get('role'),
            birthday=parse_optional_date(data.get('birthday')),
            first_name=data.get('first_name'),
            last_name=data.get('last_name'),
            nationality=data.get('nationality'),
            age=data.get('age'),
            modified_at=parse_optional_date(data.get('modified_at')),
        )

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'slug': self.slug,
            'image_url': self.image_url,
            'acronym': self.acronym,
            'location': self.location,
            'active': self.active,
            'role': self.role,
            'birthday': format_date(self.birthday),
            'first_name': self.first_name,
            'last_name': self.last_name,
            'nationality': self.nationality,
            'age': self.age,
            'modified_at': format_date(self.modified_at),
        }


@dataclass(frozen=True)
class Opponent:
    """A match participant; ``type`` is ``"Player"`` or ``"Team"``."""

    type: str
    opponent: OpponentDetails

    @property
    def is_player(self) -> bool:
        return self.type.lower() == "player"

    @property
    def is_team(self) -> bool:
        return self.type.lower() == "team"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Opponent:
        return cls(type=data['type'], opponent=OpponentDetails.from_dict(data['opponent']))

    def to_dict(self) -> dict:
        return {'type': self.type, 'opponent': self.opponent.to_dict()}


@dataclass(frozen=True)
class MatchResult:
    score: int
    team_id: Optional[int] = None
    player_id: Optional[int] = None

    @property
    def opponent_id(self) -> Optional[int]:
        return self.player_id if self.player_id is not None else self.team_id

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MatchResult:
        return cls(score=data['score'], team_id=data.get('team_id'), player_id=data.get('player_id'))

    def to_dict(self) -> dict:
        return {'score': self.score, 'team_id': self.team_id, 'player_id': self.player_id}


@dataclass(frozen=True)
class Winner:
    id: int
    type: Optional[str] = None
    name: Optional[str] = None
    slug: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Winner:
        return cls(id=data['id'], type=data.get('type'), name=data.get('name'), slug=data.get('slug'))

    def to_dict(self) -> dict:
        return {'id': self.id, 'type': self.type, 'name': self.name, 'slug': self.slug}


@dataclass(frozen=True)
class LiveData:
    supported: bool
    opens_at: Optional[datetime] = None
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LiveData:
        return cls(
            supported=bool(data.get('supported', False)),
            opens_at=parse_optional_date(data.get('opens_at')),
            url=data.get('url'),
        )

    def to_dict(self) -> dict:
        return {'supported': self.supported, 'opens_at': format_date(self.opens_at), 'url': self.url}


@dataclass(frozen=True)
class Stream:
    raw_url: str
    language: Optional[str] = None
    main: bool = False
    official: bool = False
    embed_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Stream:
        return cls(
            raw_url=data['raw_url'],
            language=data.get('language'),
            main=bool(data.get('main', False)),
            official=bool(data.get('official', False)),
            embed_url=data.get('embed_url'),
        )

    def to_dict(self) -> dict:
        return {
            'raw_url': self.raw_url,
            'language': self.language,
            'main': self.main,
            'official': self.official,
            'embed_url': self.embed_url,
        }


@dataclass(frozen=True)
class Match:
    """A best-of-N fixture between two opponents."""

    # Identity
    id: int
    name: str
    slug: Optional[str]
    status: MatchStatus

    # Foreign keys, resolved by the caller when needed
    tournament_id: int
    serie_id: int

    number_of_games: int
    modified_at: datetime
    begin_at: Optional[datetime] = None
    end_at: Optional[datetime] = None

    games: tuple[Game, ...] = field(default_factory=tuple)
    opponents: tuple[Opponent, ...] = field(default_factory=tuple)
    results: tuple[MatchResult, ...] = field(default_factory=tuple)
    winner: Optional[Winner] = None
    winner_id: Optional[int] = None
    live: Optional[LiveData] = None
    streams: Optional[tuple[Stream, ...]] = None

    @property
    def is_live(self) -> bool:
        return self.status is MatchStatus.RUNNING

    @property
    def has_ended(self) -> bool:
        return self.status is MatchStatus.FINISHED

    @property
    def is_pending(self) -> bool:
        return self.status is MatchStatus.NOT_STARTED

    @property
    def duration(self) -> Optional[float]:
        """Elapsed seconds between ``begin_at`` and ``end_at``."""
        if self.begin_at is None or self.end_at is None:
            return None
        return (self.end_at - self.begin_at).total_seconds()

    @property
    def main_stream(self) -> Optional[Stream]:
        if not self.streams:
            return None
        return next((s for s in self.streams if s.main), self.streams[0])

    def score_for(self, opponent_id: int) -> Optional[int]:
        """Score of the opponent (player or team) with ``opponent_id``."""
        for result in self.results:
            if result.opponent_id == opponent_id:
                return result.score
        return None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Match:
        winner = data.get('winner')
        live = data.get('live')
        streams = data.get('streams_list')
        return cls(
            id=data['id'],
            name=data['name'],
            slug=data.get('slug'),
            status=MatchStatus(data['status']),
            tournament_id=data['tournament_id'],
            serie_id=data['serie_id'],
            number_of_games=data['number_of_games'],
            modified_at=parse_date(data['modified_at']),
            begin_at=parse_optional_date(data.get('begin_at')),
            end_at=parse_optional_date(data.get('end_at')),
            games=tuple(Game.from_dict(g) for g in data.get('games') or ()),
            opponents=tuple(Opponent.from_dict(o) for o in data.get('opponents') or ()),
            results=tuple(MatchResult.from_dict(r) for r in data.get('results') or ()),
            winner=Winner.from_dict(winner) if winner else None,
            winner_id=data.get('winner_id'),
            live=LiveData.from_dict(live) if live else None,
            streams=tuple(Stream.from_dict(s) for s in streams) if streams is not None else None,
        )

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'slug': self.slug,
            'status': self.status.value,
            'tournament_id': self.tournament_id,
            'serie_id': self.serie_id,
            'number_of_games': self.number_of_games,
            'modified_at': format_date(self.modified_at),
            'begin_at': format_date(self.begin_at),
            'end_at': format_date(self.end_at),
            'games': [g.to_dict() for g in self.games],
            'opponents': [o.to_dict() for o in self.opponents],
            'results': [r.to_dict() for r in self.results],
            'winner': self.winner.to_dict() if self.winner else None,
            'winner_id': self.winner_id,
            'live': self.live.to_dict() if self.live else None,
            'streams_list': [s.to_dict() for s in self.streams] if self.streams is not None else None,
        }
