"""Domain layer - Entities, enums, requests, and interfaces."""
from .entities import League, Match, Player, Series, Team, Tournament
from .enums import AuthMethod, EndpointScope, HTTPMethod, MatchStatus, Resource, SortDirection
from .interfaces import IStarCraftClient

__all__ = [
    # Entities
    'League',
    'Match',
    'Player',
    'Series',
    'Team',
    'Tournament',
    # Enums
    'AuthMethod',
    'EndpointScope',
    'HTTPMethod',
    'MatchStatus',
    'Resource',
    'SortDirection',
    # Interfaces
    'IStarCraftClient',
]
