"""Domain interfaces."""
from .api_client import IStarCraftClient

__all__ = [
    'IStarCraftClient',
]
