"""PandaScore HTTP transport: request construction, status mapping, decoding."""
from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

import httpx

from core.logging.logger import StructuredLogger, get_logger
from domain.enums import HTTPMethod
from domain.requests.response import RAW, ResponseType
from .errors import (
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
)
from .rate_limit import RateLimitStatus, RateLimitTracker, remaining, retry_after

DEFAULT_BASE_URL = "https://api.pandascore.co"
JSON_CONTENT_TYPE = "application/json"
TOKEN_PARAMETER = "token"


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def redacted_url(url: httpx.URL) -> str:
    """``url`` with the API token query parameter masked, for logs and errors."""
    if TOKEN_PARAMETER not in url.params:
        return str(url)
    return str(url.copy_set_param(TOKEN_PARAMETER, "redacted"))


def _query_items(parameters: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Flatten parameters; list values expand to repeated keys."""
    items: list[tuple[str, str]] = []
    for key, value in parameters.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            items.extend((key, _query_value(v)) for v in value)
        else:
            items.append((key, _query_value(value)))
    return items


class NetworkingClient:
    """Asynchronous HTTP client for one base URL.

    Use as ``async with NetworkingClient(...) as net`` or call ``aclose()``
    when done; the session is created on first use otherwise.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        default_headers: Optional[Mapping[str, str]] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[StructuredLogger] = None,
    ) -> None:
        self.base_url = httpx.URL(base_url)
        self.default_headers = dict(default_headers or {})
        self.timeout = timeout
        self._transport = transport
        self._session: Optional[httpx.AsyncClient] = None
        self._rate_limit = RateLimitTracker()
        self.logger = logger or get_logger(__name__, service="http")

    async def __aenter__(self) -> NetworkingClient:
        self._get_session()
        return self

    async def __aexit__(self, *_) -> None:
        await self.aclose()

    def _get_session(self) -> httpx.AsyncClient:
        if self._session is None:
            self._session = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self._session

    async def aclose(self) -> None:
        if self._session is not None:
            await self._session.aclose()
            self._session = None

    # ── Request construction ───────────────────────────────────────────

    def build_request(
        self,
        path: str,
        method: HTTPMethod = HTTPMethod.GET,
        query_parameters: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[bytes] = None,
    ) -> httpx.Request:
        """Resolve ``path`` against the base URL and assemble the request.

        Call-specific headers override the defaults. ``Accept`` is always
        JSON; ``Content-Type`` defaults to JSON when a body is sent.

        Raises:
            InvalidRequestError: if ``path`` cannot be resolved to an http(s) URL.
        """
        try:
            url = self.base_url.join(path)
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise InvalidRequestError(f"Invalid path: {path!r}") from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidRequestError(f"Invalid path: {path!r}")

        merged = httpx.Headers(self.default_headers)
        merged.update(dict(headers or {}))
        if body is not None and "Content-Type" not in merged:
            merged["Content-Type"] = JSON_CONTENT_TYPE
        merged["Accept"] = JSON_CONTENT_TYPE

        try:
            return httpx.Request(
                method.value,
                url,
                params=_query_items(query_parameters or {}) or None,
                headers=merged,
                content=body,
            )
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise InvalidRequestError(f"Failed to build URL for {path!r}: {exc}") from exc

    # ── Execution ──────────────────────────────────────────────────────

    async def execute(
        self, request: httpx.Request, response_type: ResponseType = RAW
    ) -> Tuple[Any, httpx.Headers]:
        """Send ``request`` and decode the JSON body with ``response_type``.

        Returns the decoded value and the response headers.
        """
        self.logger.debug(lambda: f"{request.method} {redacted_url(request.url)}")
        try:
            response = await self._get_session().send(request)
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(exc) from exc
        except httpx.TransportError as exc:
            raise NetworkError(exc) from exc

        self._rate_limit.update(response.headers)
        self._validate(response)

        try:
            value = response_type.decode(response.json())
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            self.logger.error(
                lambda: f"decoding failed: {exc!r}",
                extra={"status": response.status_code, "path": request.url.path},
            )
            raise DecodingError(exc, response.content) from exc
        return value, response.headers

    def rate_limit_status(self) -> RateLimitStatus:
        return self._rate_limit.status()

    def _validate(self, response: httpx.Response) -> None:
        status = response.status_code
        if 200 <= status < 300:
            return

        self.logger.warning(
            lambda: f"HTTP {status} for {redacted_url(response.request.url)}",
            extra={"status": status},
        )
        if status == 404:
            raise NotFoundError(redacted_url(response.request.url))
        if status == 429:
            raise RateLimitExceededError(
                retry_after=retry_after(response.headers),
                remaining=remaining(response.headers),
            )

        error_body = ErrorResponse.parse(response.content)
        if status == 400:
            raise HTTPError(400, error_body)
        if status == 401:
            raise UnauthorizedError(error_body.message) if error_body else UnauthorizedError()
        if status == 403:
            raise ForbiddenError(error_body.message) if error_body else ForbiddenError()
        if 500 <= status < 600:
            raise ServerError(status, error_body.message if error_body else None)
        raise HTTPError(status, error_body)
