"""Client interface consumed by the presentation layer."""
from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, List, Optional

from ..requests import APIRequest, StreamingRequest


class IStarCraftClient(ABC):
    """Interface for the PandaScore StarCraft II client."""

    @abstractmethod
    async def execute(self, request: APIRequest) -> Any:
        """Execute one request and return its decoded result."""
        pass

    @abstractmethod
    async def execute_paginated(self, request: APIRequest, max_pages: Optional[int] = None) -> List[Any]:
        """Fetch pages sequentially and return the concatenated items."""
        pass

    @abstractmethod
    def stream(self, request: StreamingRequest) -> AsyncIterator[Any]:
        """Subscribe to a live feed."""
        pass

    @abstractmethod
    async def close(self) -> None:
        pass
