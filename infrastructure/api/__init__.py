"""Infrastructure API module."""
from .errors import (
    APIError,
    CacheError,
    DecodingError,
    ErrorResponse,
    ForbiddenError,
    HTTPError,
    InvalidRequestError,
    NetworkError,
    NotFoundError,
    RateLimitExceededError,
    RequestTimeoutError,
    ServerError,
    UnauthorizedError,
    WebSocketError,
)
from .networking_client import NetworkingClient
from .pagination import NavigationLinks, Page, PaginationInfo
from .rate_limit import RateLimitStatus, RateLimitTracker
from .retry_handler import RetryConfiguration, RetryHandler
from .starcraft_client import CacheConfiguration, ClientConfiguration, StarCraftClient

__all__ = [
    'APIError',
    'CacheConfiguration',
    'CacheError',
    'ClientConfiguration',
    'DecodingError',
    'ErrorResponse',
    'ForbiddenError',
    'HTTPError',
    'InvalidRequestError',
    'NavigationLinks',
    'NetworkError',
    'NetworkingClient',
    'NotFoundError',
    'Page',
    'PaginationInfo',
    'RateLimitExceededError',
    'RateLimitStatus',
    'RateLimitTracker',
    'RequestTimeoutError',
    'RetryConfiguration',
    'RetryHandler',
    'ServerError',
    'StarCraftClient',
    'UnauthorizedError',
    'WebSocketError',
]
