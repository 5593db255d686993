"""In-memory response cache."""
from .response_cache import CacheEntry, CacheStatistics, ResponseCache

__all__ = [
    'CacheEntry',
    'CacheStatistics',
    'ResponseCache',
]
