"""PandaScore StarCraft II API client."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, AsyncIterator, Dict, List, Optional, Tuple

import httpx

from config import settings as default_settings
from core.logging import request_context
from core.logging.logger import get_logger
from domain.entities import League, Match, Player, Series, Team, Tournament
from domain.enums import AuthMethod
from domain.interfaces import IStarCraftClient
from domain.requests import (
    DEFAULT_PAGE_SIZE,
    APIRequest,
    LeaguesRequest,
    MatchesRequest,
    PlayersRequest,
    SeriesRequest,
    StreamingRequest,
    TeamsRequest,
    TournamentsRequest,
)
from ..cache import CacheStatistics, ResponseCache
from .errors import CacheError, DecodingError, WebSocketError
from .networking_client import DEFAULT_BASE_URL, TOKEN_PARAMETER, NetworkingClient
from .pagination import Page, PaginationInfo
from .rate_limit import RateLimitStatus
from .retry_handler import RetryConfiguration, RetryHandler

PAGE_NUMBER_KEY = "page[number]"
PAGE_SIZE_KEY = "page[size]"


def _page_items(value: Any, path: str) -> List[Any]:
    if not isinstance(value, list):
        raise DecodingError(TypeError(f"{path} returned {type(value).__name__}, expected a list"))
    return value


@dataclass(frozen=True)
class CacheConfiguration:
    max_size: int = 100
    default_ttl: float = 300.0


@dataclass(frozen=True)
class ClientConfiguration:
    api_key: str = field(repr=False)
    auth_method: AuthMethod = AuthMethod.BEARER_TOKEN
    base_url: str = DEFAULT_BASE_URL
    retry_configuration: RetryConfiguration = field(default_factory=RetryConfiguration.default)
    cache_configuration: CacheConfiguration = field(default_factory=CacheConfiguration)
    timeout: float = 30.0

    @classmethod
    def from_environment(cls, source: Any = None) -> ClientConfiguration:
        """Build from ``config.settings`` (PANDA_TOKEN, AUTH_METHOD, ...).

        Raises:
            ValueError: if no API token is configured.
        """
        source = source or default_settings
        source.validate()
        return cls(
            api_key=source.PANDA_TOKEN,
            auth_method=AuthMethod.from_setting(source.AUTH_METHOD),
            base_url=source.BASE_URL,
            retry_configuration=RetryConfiguration.from_env(),
            cache_configuration=CacheConfiguration(
                max_size=source.CACHE_MAX_SIZE,
                default_ttl=source.CACHE_TTL,
            ),
            timeout=source.REQUEST_TIMEOUT,
        )


def _key_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def cache_key(request: APIRequest) -> str:
    """``path&k1=v1&k2=v2`` with parameters sorted by key.

    List values repeat their key, as they do on the wire, so ``["a", "b"]``
    and ``"a,b"`` map to different entries.
    """
    components = [request.path]
    for key in sorted(request.query_parameters):
        value = request.query_parameters[key]
        if value is None:
            continue
        values = value if isinstance(value, (list, tuple)) else [value]
        components.extend(f"{key}={_key_value(v)}" for v in values)
    return "&".join(components)


class StarCraftClient(IStarCraftClient):
    """Cache-first, retrying client over :class:`NetworkingClient`.

    Usage::

        async with StarCraftClient(ClientConfiguration.from_environment()) as client:
            matches = await client.get_live_matches()

    Collaborators can be injected for testing; ``transport`` is passed to the
    default networking client (e.g. ``httpx.MockTransport``).
    """

    def __init__(
        self,
        configuration: ClientConfiguration,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        networking_client: Optional[NetworkingClient] = None,
        cache: Optional[ResponseCache] = None,
        retry_handler: Optional[RetryHandler] = None,
    ) -> None:
        self.configuration = configuration
        self.logger = get_logger(__name__, service="client")

        default_headers: Dict[str, str] = {}
        if configuration.auth_method is AuthMethod.BEARER_TOKEN:
            default_headers["Authorization"] = f"Bearer {configuration.api_key}"

        self._network = networking_client or NetworkingClient(
            configuration.base_url,
            default_headers=default_headers,
            timeout=configuration.timeout,
            transport=transport,
        )
        self._cache = cache or ResponseCache(configuration.cache_configuration.max_size)
        self._retry = retry_handler or RetryHandler(configuration.retry_configuration)

    async def __aenter__(self) -> StarCraftClient:
        await self._network.__aenter__()
        return self

    async def __aexit__(self, *_) -> None:
        await self.close()

    async def close(self) -> None:
        await self._network.aclose()

    # ── Core pipeline ──────────────────────────────────────────────────

    async def execute(self, request: APIRequest) -> Any:
        value, _ = await self._execute(request)
        return value

    async def execute_page(self, request: APIRequest) -> Page[Any]:
        """Like :meth:`execute`, with pagination metadata from the response headers."""
        value, headers = await self._execute(request)
        return Page(items=_page_items(value, request.path), pagination=PaginationInfo.from_headers(headers))

    async def execute_paginated(self, request: APIRequest, max_pages: Optional[int] = None) -> List[Any]:
        """Fetch pages 1, 2, ... one at a time and concatenate the items.

        Stops after ``max_pages`` pages or at the first page shorter than the
        request's ``page[size]``. Items are not de-duplicated across pages.
        """
        try:
            page_size = int(request.query_parameters.get(PAGE_SIZE_KEY, DEFAULT_PAGE_SIZE))
        except (TypeError, ValueError):
            page_size = DEFAULT_PAGE_SIZE

        items: List[Any] = []
        page = 1
        while max_pages is None or page <= max_pages:
            batch = _page_items(await self.execute(request.with_page(page)), request.path)
            items.extend(batch)
            self.logger.debug(lambda: f"page {page}: {len(batch)} items", extra={"path": request.path})
            if len(batch) < page_size:
                break
            page += 1
        return items

    async def stream(self, request: StreamingRequest) -> AsyncIterator[Any]:
        """Live feeds need WebSocket support, which this client lacks."""
        raise WebSocketError(f"streaming match {request.match_id} is not supported")
        yield  # pragma: no cover

    async def _execute(self, request: APIRequest) -> Tuple[Any, Any]:
        key = cache_key(request)
        policy = request.cache_policy
        response_type = request.response_type

        page = request.query_parameters.get(PAGE_NUMBER_KEY)
        with request_context(request.path, method=request.method.value, page=page):
            if policy.enabled:
                cached = await self._cache.get(key, response_type.decode)
                if cached is not None:
                    self.logger.debug(lambda: "cache hit", extra={"cache_key": key})
                    return cached

            query = dict(request.query_parameters)
            if self.configuration.auth_method is AuthMethod.QUERY_PARAMETER:
                query[TOKEN_PARAMETER] = self.configuration.api_key

            http_request = self._network.build_request(
                request.path,
                request.method,
                query,
                request.headers,
                request.body,
            )
            value, headers = await self._retry.execute(
                lambda: self._network.execute(http_request, response_type)
            )

            if policy.enabled:
                ttl = policy.effective_ttl(self.configuration.cache_configuration.default_ttl)
                try:
                    await self._cache.set(value, headers, key, ttl, response_type.encode)
                except CacheError as exc:
                    self.logger.warning(lambda: f"cache write skipped: {exc}", extra={"cache_key": key})
            return value, headers

    # ── Status ─────────────────────────────────────────────────────────

    def rate_limit_status(self) -> RateLimitStatus:
        return self._network.rate_limit_status()

    async def clear_cache(self) -> None:
        await self._cache.clear_all()

    def cache_statistics(self) -> CacheStatistics:
        return self._cache.statistics()

    async def clear_expired_cache(self) -> int:
        return await self._cache.clear_expired()

    # ── Convenience ────────────────────────────────────────────────────

    async def get_leagues(self, request: Optional[LeaguesRequest] = None) -> List[League]:
        return await self.execute(request or LeaguesRequest())

    async def get_all_leagues(self, max_pages: Optional[int] = None) -> List[League]:
        return await self.execute_paginated(LeaguesRequest(), max_pages=max_pages)

    async def get_matches(self, request: Optional[MatchesRequest] = None) -> List[Match]:
        return await self.execute(request or MatchesRequest())

    async def get_live_matches(self) -> List[Match]:
        return await self.get_matches(MatchesRequest.running())

    async def get_upcoming_matches(self) -> List[Match]:
        return await self.get_matches(MatchesRequest.upcoming())

    async def get_past_matches(self) -> List[Match]:
        return await self.get_matches(MatchesRequest.past())

    async def get_tournament_matches(
        self, tournament_id: int, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE
    ) -> List[Match]:
        return await self.get_matches(MatchesRequest.for_tournament(tournament_id, page, page_size))

    async def get_players(self, request: Optional[PlayersRequest] = None) -> List[Player]:
        return await self.execute(request or PlayersRequest())

    async def search_players(self, name: str) -> List[Player]:
        return await self.get_players(PlayersRequest.search_by_name(name))

    async def get_teams(self, request: Optional[TeamsRequest] = None) -> List[Team]:
        return await self.execute(request or TeamsRequest())

    async def search_teams(self, name: str) -> List[Team]:
        return await self.get_teams(TeamsRequest.search_by_name(name))

    async def get_series(self, request: Optional[SeriesRequest] = None) -> List[Series]:
        return await self.execute(request or SeriesRequest())

    async def get_tournaments(self, request: Optional[TournamentsRequest] = None) -> List[Tournament]:
        return await self.execute(request or TournamentsRequest())

    async def get_running_tournaments(self) -> List[Tournament]:
        return await self.get_tournaments(TournamentsRequest.running())

    async def get_upcoming_tournaments(self) -> List[Tournament]:
        return await self.get_tournaments(TournamentsRequest.upcoming())
