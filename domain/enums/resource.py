"""StarCraft II resources and the endpoint scopes PandaScore exposes for them."""
from enum import Enum
from typing import Optional


class EndpointScope(Enum):
    """Time scope appended to a resource path (``/matches/running``)."""

    ALL = "all"
    PAST = "past"
    RUNNING = "running"
    UPCOMING = "upcoming"

    @property
    def sub_path(self) -> Optional[str]:
        return None if self is EndpointScope.ALL else self.value


class Resource(Enum):
    """Top-level StarCraft II collections.

    Provides:
    - base_path: collection path (e.g., /starcraft-2/matches)
    - scopes: which EndpointScope values the API serves for it
    """

    LEAGUES = "leagues"
    MATCHES = "matches"
    PLAYERS = "players"
    SERIES = "series"
    TEAMS = "teams"
    TOURNAMENTS = "tournaments"

    @property
    def base_path(self) -> str:
        return f"/starcraft-2/{self.value}"

    @property
    def scopes(self) -> tuple[EndpointScope, ...]:
        if self in (Resource.MATCHES, Resource.SERIES, Resource.TOURNAMENTS):
            return tuple(EndpointScope)
        return (EndpointScope.ALL,)

    def full_path(self, scope: EndpointScope = EndpointScope.ALL) -> str:
        """Build the request path for this resource within ``scope``.

        Raises:
            ValueError: if the resource has no such scope.
        """
        if scope not in self.scopes:
            raise ValueError(f"{self.value} has no '{scope.value}' endpoint")
        if scope.sub_path is None:
            return self.base_path
        return f"{self.base_path}/{scope.sub_path}"
