"""Pagination metadata from ``X-Page`` / ``X-Per-Page`` / ``X-Total`` / ``Link``."""
from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Generic, List, Mapping, Optional, TypeVar

from .rate_limit import header

T = TypeVar("T")

_LINK_PATTERN = re.compile(r'<([^>]+)>;\s*rel="(\w+)"')


@dataclass(frozen=True)
class NavigationLinks:
    first: Optional[str] = None
    previous: Optional[str] = None
    next: Optional[str] = None
    last: Optional[str] = None

    @classmethod
    def parse(cls, link_header: Optional[str]) -> NavigationLinks:
        """Parse an RFC 5988 ``Link`` header: ``<url>; rel="next", ...``."""
        if not link_header:
            return cls()
        links = {rel: url for url, rel in _LINK_PATTERN.findall(link_header)}
        return cls(
            first=links.get("first"),
            previous=links.get("prev"),
            next=links.get("next"),
            last=links.get("last"),
        )


@dataclass(frozen=True)
class PaginationInfo:
    page: int
    per_page: int
    total: int
    links: NavigationLinks = field(default_factory=NavigationLinks)

    @property
    def total_pages(self) -> int:
        if self.per_page <= 0:
            return 0
        return math.ceil(self.total / self.per_page)

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.page > 1

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> Optional[PaginationInfo]:
        """None unless all of X-Page, X-Per-Page and X-Total are present and numeric."""
        try:
            page = int(header(headers, "X-Page") or "")
            per_page = int(header(headers, "X-Per-Page") or "")
            total = int(header(headers, "X-Total") or "")
        except ValueError:
            return None
        return cls(page=page, per_page=per_page, total=total, links=NavigationLinks.parse(header(headers, "Link")))


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results with whatever pagination metadata the API sent."""

    items: List[T]
    pagination: Optional[PaginationInfo] = None

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)
