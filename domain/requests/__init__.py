"""Request value objects and query parameters."""
from .base import DEFAULT_CACHE_TTL, APIRequest, CachePolicy, CachePolicyKind
from .parameters import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    PaginationParameters,
    QueryParameters,
    QueryParametersBuilder,
    RangeParameter,
    SortParameter,
)
from .resources import (
    LeaguesRequest,
    MatchesRequest,
    PlayersRequest,
    ResourceRequest,
    SeriesRequest,
    TeamsRequest,
    TournamentsRequest,
)
from .response import RAW, ListOf, One, ResponseType, as_response_type
from .streaming import StreamFeed, StreamingRequest

__all__ = [
    'APIRequest',
    'CachePolicy',
    'CachePolicyKind',
    'DEFAULT_CACHE_TTL',
    'DEFAULT_PAGE_SIZE',
    'MAX_PAGE_SIZE',
    'LeaguesRequest',
    'ListOf',
    'MatchesRequest',
    'One',
    'PaginationParameters',
    'PlayersRequest',
    'QueryParameters',
    'QueryParametersBuilder',
    'RAW',
    'RangeParameter',
    'ResourceRequest',
    'ResponseType',
    'SeriesRequest',
    'SortParameter',
    'StreamFeed',
    'StreamingRequest',
    'TeamsRequest',
    'TournamentsRequest',
    'as_response_type',
]
