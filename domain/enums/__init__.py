"""Domain enumerations."""
from .http import AuthMethod, HTTPMethod, SortDirection
from .match_status import MatchStatus
from .resource import EndpointScope, Resource

__all__ = [
    'AuthMethod',
    'EndpointScope',
    'HTTPMethod',
    'MatchStatus',
    'Resource',
    'SortDirection',
]
