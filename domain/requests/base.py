"""Request value objects consumed by the API client."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..enums import HTTPMethod
from .response import RAW, ResponseType, as_response_type

DEFAULT_CACHE_TTL = 300.0


class CachePolicyKind(Enum):
    NO_CACHE = "no_cache"
    USE_CACHE = "use_cache"
    CACHE_FOREVER = "cache_forever"


@dataclass(frozen=True)
class CachePolicy:
    kind: CachePolicyKind
    ttl: Optional[float] = None

    @classmethod
    def no_cache(cls) -> CachePolicy:
        return cls(CachePolicyKind.NO_CACHE)

    @classmethod
    def use_cache(cls, ttl: Optional[float] = DEFAULT_CACHE_TTL) -> CachePolicy:
        """Cache for ``ttl`` seconds; None defers to the client's default TTL."""
        return cls(CachePolicyKind.USE_CACHE, ttl)

    @classmethod
    def cache_forever(cls) -> CachePolicy:
        return cls(CachePolicyKind.CACHE_FOREVER)

    @property
    def enabled(self) -> bool:
        return self.kind is not CachePolicyKind.NO_CACHE

    def effective_ttl(self, default: float) -> float:
        if self.kind is CachePolicyKind.CACHE_FOREVER:
            return math.inf
        if self.kind is CachePolicyKind.NO_CACHE:
            return 0.0
        return default if self.ttl is None else self.ttl


class APIRequest:
    """An immutable description of one API call.

    Subclasses usually fix ``path`` and ``response_type``; everything else
    defaults to a cached GET with pagination support.
    """

    def __init__(
        self,
        path: str,
        query_parameters: Optional[Mapping[str, Any]] = None,
        *,
        method: HTTPMethod = HTTPMethod.GET,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[bytes] = None,
        supports_pagination: bool = True,
        cache_policy: Optional[CachePolicy] = None,
        response_type: Any = RAW,
    ) -> None:
        self._path = path
        self._query = MappingProxyType(dict(query_parameters or {}))
        self._method = method
        self._headers = MappingProxyType(dict(headers or {}))
        self._body = body
        self._supports_pagination = supports_pagination
        self._cache_policy = cache_policy or CachePolicy.use_cache()
        self._response_type: ResponseType = as_response_type(response_type)

    @property
    def path(self) -> str:
        return self._path

    @property
    def query_parameters(self) -> Mapping[str, Any]:
        return self._query

    @property
    def method(self) -> HTTPMethod:
        return self._method

    @property
    def headers(self) -> Mapping[str, str]:
        return self._headers

    @property
    def body(self) -> Optional[bytes]:
        return self._body

    @property
    def supports_pagination(self) -> bool:
        return self._supports_pagination

    @property
    def cache_policy(self) -> CachePolicy:
        return self._cache_policy

    @property
    def response_type(self) -> ResponseType:
        return self._response_type

    def with_page(self, page: int) -> APIRequest:
        """Copy of this request with ``page[number]`` overridden."""
        return self.replace(query_parameters={**self._query, "page[number]": page})

    def replace(self, **changes: Any) -> APIRequest:
        fields = {
            "path": self._path,
            "query_parameters": self._query,
            "method": self._method,
            "headers": self._headers,
            "body": self._body,
            "supports_pagination": self._supports_pagination,
            "cache_policy": self._cache_policy,
            "response_type": self._response_type,
        }
        fields.update(changes)
        return APIRequest(fields.pop("path"), **fields)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(method={self._method.value}, path={self._path!r}, "
            f"query={dict(self._query)!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, APIRequest):
            return NotImplemented
        return (
            self._path == other._path
            and dict(self._query) == dict(other._query)
            and self._method is other._method
            and dict(self._headers) == dict(other._headers)
            and self._body == other._body
        )

    __hash__ = None  # type: ignore[assignment]
