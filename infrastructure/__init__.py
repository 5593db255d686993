"""Infrastructure layer - HTTP client, retry, and response cache."""
from .api import ClientConfiguration, NetworkingClient, RetryHandler, StarCraftClient
from .cache import ResponseCache

__all__ = [
    'ClientConfiguration',
    'NetworkingClient',
    'ResponseCache',
    'RetryHandler',
    'StarCraftClient',
]
