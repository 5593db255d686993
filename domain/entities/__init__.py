"""Domain entities."""
from .videogame import Videogame
from .player import Player
from .team import Team
from .league import League
from .tournament import Tournament
from .series import Series
from .match import (
    Game,
    GameWinner,
    LiveData,
    Match,
    MatchResult,
    Opponent,
    OpponentDetails,
    Stream,
    Winner,
)

__all__ = [
    'Game',
    'GameWinner',
    'League',
    'LiveData',
    'Match',
    'MatchResult',
    'Opponent',
    'OpponentDetails',
    'Player',
    'Series',
    'Stream',
    'Team',
    'Tournament',
    'Videogame',
    'Winner',
]
