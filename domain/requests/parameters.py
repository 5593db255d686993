"""Query parameters understood by the PandaScore REST API.

``QueryParameters.to_dict()`` flattens everything into the bracketed keys
the API expects::

    page[number]=2  page[size]=50  sort=-begin_at,name
    filter[status]=running  search[name]=serral  range[age]=18,25
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from ..enums import SortDirection

MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 50


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class PaginationParameters:
    """1-based page and page size; out-of-range values are clamped."""

    page: int = 1
    size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        object.__setattr__(self, "page", max(1, int(self.page)))
        object.__setattr__(self, "size", min(MAX_PAGE_SIZE, max(MIN_PAGE_SIZE, int(self.size))))


@dataclass(frozen=True)
class SortParameter:
    field: str
    direction: SortDirection = SortDirection.ASCENDING

    def __str__(self) -> str:
        if self.direction is SortDirection.DESCENDING:
            return f"-{self.field}"
        return self.field

    @classmethod
    def parse(cls, value: str) -> SortParameter:
        """Inverse of ``str()``: ``-begin_at`` sorts descending."""
        value = value.strip()
        if value.startswith("-"):
            return cls(value[1:], SortDirection.DESCENDING)
        return cls(value)


@dataclass(frozen=True)
class RangeParameter:
    """Inclusive numeric range; either bound may be open."""

    min: Optional[float] = None
    max: Optional[float] = None

    def __str__(self) -> str:
        if self.min is None and self.max is None:
            return ""
        low = "" if self.min is None else _format_number(self.min)
        high = "" if self.max is None else _format_number(self.max)
        return f"{low},{high}"


@dataclass
class QueryParameters:
    pagination: Optional[PaginationParameters] = None
    sort: Optional[List[SortParameter]] = None
    filters: Optional[Dict[str, Any]] = None
    search: Optional[Dict[str, str]] = None
    ranges: Optional[Dict[str, RangeParameter]] = None

    def to_dict(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {}

        if self.pagination is not None:
            params["page[number]"] = self.pagination.page
            params["page[size]"] = self.pagination.size

        if self.sort:
            params["sort"] = ",".join(str(s) for s in self.sort)

        for key, value in (self.filters or {}).items():
            params[f"filter[{key}]"] = value

        for key, value in (self.search or {}).items():
            params[f"search[{key}]"] = value

        for key, rng in (self.ranges or {}).items():
            params[f"range[{key}]"] = str(rng)

        return params

    @staticmethod
    def builder() -> QueryParametersBuilder:
        return QueryParametersBuilder()


@dataclass
class QueryParametersBuilder:
    """Fluent construction of :class:`QueryParameters`."""

    _params: QueryParameters = field(default_factory=QueryParameters)

    def with_pagination(self, page: int, size: int = DEFAULT_PAGE_SIZE) -> QueryParametersBuilder:
        self._params.pagination = PaginationParameters(page, size)
        return self

    def with_sort(
        self, field_name: str, direction: SortDirection = SortDirection.ASCENDING
    ) -> QueryParametersBuilder:
        if self._params.sort is None:
            self._params.sort = []
        self._params.sort.append(SortParameter(field_name, direction))
        return self

    def with_filter(self, key: str, value: Any) -> QueryParametersBuilder:
        if self._params.filters is None:
            self._params.filters = {}
        self._params.filters[key] = value
        return self

    def with_search(self, key: str, value: str) -> QueryParametersBuilder:
        if self._params.search is None:
            self._params.search = {}
        self._params.search[key] = value
        return self

    def with_range(
        self, key: str, min: Optional[float] = None, max: Optional[float] = None
    ) -> QueryParametersBuilder:
        if self._params.ranges is None:
            self._params.ranges = {}
        self._params.ranges[key] = RangeParameter(min, max)
        return self

    def build(self) -> QueryParameters:
        built = self._params
        return QueryParameters(
            pagination=built.pagination,
            sort=list(built.sort) if built.sort is not None else None,
            filters=dict(built.filters) if built.filters is not None else None,
            search=dict(built.search) if built.search is not None else None,
            ranges=dict(built.ranges) if built.ranges is not None else None,
        )


def merge_filters(parameters: QueryParameters, **filters: Any) -> QueryParameters:
    """Return ``parameters`` with the non-None ``filters`` added."""
    extra: Mapping[str, Any] = {k: v for k, v in filters.items() if v is not None}
    if not extra:
        return parameters
    return QueryParameters(
        pagination=parameters.pagination,
        sort=parameters.sort,
        filters={**(parameters.filters or {}), **extra},
        search=parameters.search,
        ranges=parameters.ranges,
    )
