"""Per-resource requests for the StarCraft II endpoints."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..entities import League, Match, Player, Series, Team, Tournament
from ..enums import EndpointScope, Resource, SortDirection
from .base import APIRequest, CachePolicy
from .parameters import (
    DEFAULT_PAGE_SIZE,
    PaginationParameters,
    QueryParameters,
    SortParameter,
    merge_filters,
)
from .response import ListOf


def _parameters(
    parameters: Optional[QueryParameters],
    page: int,
    page_size: int,
    sort: Optional[List[SortParameter]],
    filters: Optional[Dict[str, Any]],
    search: Optional[Dict[str, str]],
) -> QueryParameters:
    if parameters is not None:
        return parameters
    return QueryParameters(
        pagination=PaginationParameters(page, page_size),
        sort=sort,
        filters=filters,
        search=search,
    )


class ResourceRequest(APIRequest):
    """List request for one :class:`Resource`, decoded into its entity."""

    resource: Resource
    model: type

    def __init__(
        self,
        scope: EndpointScope = EndpointScope.ALL,
        parameters: Optional[QueryParameters] = None,
        *,
        cache_policy: Optional[CachePolicy] = None,
    ) -> None:
        self.scope = scope
        super().__init__(
            self.resource.full_path(scope),
            (parameters or QueryParameters()).to_dict(),
            cache_policy=cache_policy,
            response_type=ListOf(self.model),
        )


class LeaguesRequest(ResourceRequest):
    resource = Resource.LEAGUES
    model = League

    def __init__(
        self,
        parameters: Optional[QueryParameters] = None,
        *,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        sort: Optional[List[SortParameter]] = None,
        filters: Optional[Dict[str, Any]] = None,
        search: Optional[Dict[str, str]] = None,
        cache_policy: Optional[CachePolicy] = None,
    ) -> None:
        params = _parameters(parameters, page, page_size, sort, filters, search)
        super().__init__(EndpointScope.ALL, params, cache_policy=cache_policy)


class MatchesRequest(ResourceRequest):
    resource = Resource.MATCHES
    model = Match

    def __init__(
        self,
        scope: EndpointScope = EndpointScope.ALL,
        parameters: Optional[QueryParameters] = None,
        *,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        sort: Optional[List[SortParameter]] = None,
        filters: Optional[Dict[str, Any]] = None,
        search: Optional[Dict[str, str]] = None,
        opponent_id: Optional[int] = None,
        tournament_id: Optional[int] = None,
        serie_id: Optional[int] = None,
        league_id: Optional[int] = None,
        cache_policy: Optional[CachePolicy] = None,
    ) -> None:
        params = merge_filters(
            _parameters(parameters, page, page_size, sort, filters, search),
            opponent_id=opponent_id,
            tournament_id=tournament_id,
            serie_id=serie_id,
            league_id=league_id,
        )
        super().__init__(scope, params, cache_policy=cache_policy)

    @classmethod
    def past(
        cls, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE, sort: Optional[List[SortParameter]] = None
    ) -> MatchesRequest:
        return cls(EndpointScope.PAST, page=page, page_size=page_size, sort=sort)

    @classmethod
    def running(cls, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> MatchesRequest:
        # live data goes stale quickly
        return cls(
            EndpointScope.RUNNING,
            page=page,
            page_size=page_size,
            cache_policy=CachePolicy.use_cache(30),
        )

    @classmethod
    def upcoming(
        cls, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE, sort: Optional[List[SortParameter]] = None
    ) -> MatchesRequest:
        return cls(
            EndpointScope.UPCOMING,
            page=page,
            page_size=page_size,
            sort=sort or [SortParameter("begin_at", SortDirection.ASCENDING)],
        )

    @classmethod
    def for_tournament(
        cls, tournament_id: int, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE
    ) -> MatchesRequest:
        return cls(page=page, page_size=page_size, tournament_id=tournament_id)


class PlayersRequest(ResourceRequest):
    resource = Resource.PLAYERS
    model = Player

    def __init__(
        self,
        parameters: Optional[QueryParameters] = None,
        *,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        sort: Optional[List[SortParameter]] = None,
        filters: Optional[Dict[str, Any]] = None,
        search: Optional[Dict[str, str]] = None,
        nationality: Optional[str] = None,
        team_id: Optional[int] = None,
        cache_policy: Optional[CachePolicy] = None,
    ) -> None:
        params = merge_filters(
            _parameters(parameters, page, page_size, sort, filters, search),
            nationality=nationality,
            current_team_id=team_id,
        )
        super().__init__(EndpointScope.ALL, params, cache_policy=cache_policy)

    @classmethod
    def search_by_name(cls, name: str, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> PlayersRequest:
        return cls(page=page, page_size=page_size, search={"name": name})

    @classmethod
    def by_nationality(
        cls,
        nationality: str,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        sort: Optional[List[SortParameter]] = None,
    ) -> PlayersRequest:
        return cls(page=page, page_size=page_size, sort=sort, nationality=nationality)

    @classmethod
    def by_team(cls, team_id: int, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> PlayersRequest:
        return cls(page=page, page_size=page_size, team_id=team_id)


class SeriesRequest(ResourceRequest):
    resource = Resource.SERIES
    model = Series

    def __init__(
        self,
        scope: EndpointScope = EndpointScope.ALL,
        parameters: Optional[QueryParameters] = None,
        *,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        sort: Optional[List[SortParameter]] = None,
        filters: Optional[Dict[str, Any]] = None,
        search: Optional[Dict[str, str]] = None,
        league_id: Optional[int] = None,
        year: Optional[int] = None,
        cache_policy: Optional[CachePolicy] = None,
    ) -> None:
        params = merge_filters(
            _parameters(parameters, page, page_size, sort, filters, search),
            league_id=league_id,
            year=year,
        )
        super().__init__(scope, params, cache_policy=cache_policy)

    @classmethod
    def past(
        cls, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE, sort: Optional[List[SortParameter]] = None
    ) -> SeriesRequest:
        return cls(
            EndpointScope.PAST,
            page=page,
            page_size=page_size,
            sort=sort or [SortParameter("end_at", SortDirection.DESCENDING)],
        )

    @classmethod
    def running(cls, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> SeriesRequest:
        return cls(EndpointScope.RUNNING, page=page, page_size=page_size)

    @classmethod
    def upcoming(
        cls, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE, sort: Optional[List[SortParameter]] = None
    ) -> SeriesRequest:
        return cls(
            EndpointScope.UPCOMING,
            page=page,
            page_size=page_size,
            sort=sort or [SortParameter("begin_at", SortDirection.ASCENDING)],
        )

    @classmethod
    def by_year(
        cls,
        year: int,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        sort: Optional[List[SortParameter]] = None,
    ) -> SeriesRequest:
        return cls(page=page, page_size=page_size, sort=sort, year=year)


class TeamsRequest(ResourceRequest):
    resource = Resource.TEAMS
    model = Team

    def __init__(
        self,
        parameters: Optional[QueryParameters] = None,
        *,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        sort: Optional[List[SortParameter]] = None,
        filters: Optional[Dict[str, Any]] = None,
        search: Optional[Dict[str, str]] = None,
        location: Optional[str] = None,
        cache_policy: Optional[CachePolicy] = None,
    ) -> None:
        params = merge_filters(
            _parameters(parameters, page, page_size, sort, filters, search),
            location=location,
        )
        super().__init__(EndpointScope.ALL, params, cache_policy=cache_policy)

    @classmethod
    def search_by_name(cls, name: str, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> TeamsRequest:
        return cls(page=page, page_size=page_size, search={"name": name})

    @classmethod
    def by_location(
        cls,
        location: str,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        sort: Optional[List[SortParameter]] = None,
    ) -> TeamsRequest:
        return cls(page=page, page_size=page_size, sort=sort, location=location)

    @classmethod
    def alphabetical(cls, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> TeamsRequest:
        return cls(page=page, page_size=page_size, sort=[SortParameter("name")])


class TournamentsRequest(ResourceRequest):
    resource = Resource.TOURNAMENTS
    model = Tournament

    def __init__(
        self,
        scope: EndpointScope = EndpointScope.ALL,
        parameters: Optional[QueryParameters] = None,
        *,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        sort: Optional[List[SortParameter]] = None,
        filters: Optional[Dict[str, Any]] = None,
        search: Optional[Dict[str, str]] = None,
        serie_id: Optional[int] = None,
        league_id: Optional[int] = None,
        tier: Optional[str] = None,
        cache_policy: Optional[CachePolicy] = None,
    ) -> None:
        params = merge_filters(
            _parameters(parameters, page, page_size, sort, filters, search),
            serie_id=serie_id,
            league_id=league_id,
            tier=tier,
        )
        super().__init__(scope, params, cache_policy=cache_policy)

    @classmethod
    def past(
        cls, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE, sort: Optional[List[SortParameter]] = None
    ) -> TournamentsRequest:
        return cls(
            EndpointScope.PAST,
            page=page,
            page_size=page_size,
            sort=sort or [SortParameter("end_at", SortDirection.DESCENDING)],
        )

    @classmethod
    def running(cls, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> TournamentsRequest:
        return cls(EndpointScope.RUNNING, page=page, page_size=page_size)

    @classmethod
    def upcoming(
        cls, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE, sort: Optional[List[SortParameter]] = None
    ) -> TournamentsRequest:
        return cls(
            EndpointScope.UPCOMING,
            page=page,
            page_size=page_size,
            sort=sort or [SortParameter("begin_at", SortDirection.ASCENDING)],
        )

    @classmethod
    def with_prize_pools(
        cls, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE, sort: Optional[List[SortParameter]] = None
    ) -> TournamentsRequest:
        return cls(page=page, page_size=page_size, sort=sort, filters={"has_prizepool": True})
