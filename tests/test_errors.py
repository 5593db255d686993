"""Tests for the error taxonomy, rate-limit and pagination header parsing."""

from datetime import datetime, timezone

import pytest

from infrastructure.api.errors import (
    CacheError,
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
    WebSocketError,
    is_retryable,
)
from infrastructure.api.pagination import NavigationLinks, PaginationInfo
from infrastructure.api.rate_limit import RateLimitTracker


class TestRetryability:
    @pytest.mark.parametrize('error', [
        NetworkError(OSError('reset')),
        RequestTimeoutError(),
        ServerError(500),
        RateLimitExceededError(retry_after=1),
    ])
    def test_retryable(self, error):
        assert is_retryable(error)

    @pytest.mark.parametrize('error', [
        HTTPError(400),
        UnauthorizedError(),
        ForbiddenError(),
        NotFoundError('/x'),
        DecodingError(ValueError('bad')),
        InvalidRequestError('bad path'),
        CacheError(TypeError('bad')),
        WebSocketError('unsupported'),
        RuntimeError('not ours'),
    ])
    def test_not_retryable(self, error):
        assert not is_retryable(error)

    def test_rate_limit_without_retry_after_has_no_suggestion(self):
        assert RateLimitExceededError().suggested_retry_delay is None


class TestDescriptions:
    def test_rate_limit_message(self):
        error = RateLimitExceededError(retry_after=30, remaining=0)
        assert str(error) == 'Rate limit exceeded (remaining: 0) - retry after 30s'

    def test_error_body_parsing(self):
        parsed = ErrorResponse.parse(b'{"error": "Forbidden", "message": "no access"}')
        assert parsed == ErrorResponse('Forbidden', 'no access')
        assert ErrorResponse.parse(b'not json') is None
        assert ErrorResponse.parse(b'[1, 2]') is None


class TestRateLimitTracker:
    def test_keeps_previous_values_when_headers_missing(self):
        tracker = RateLimitTracker()
        tracker.update({'X-Rate-Limit-Remaining': '10', 'X-Rate-Limit-Reset': '1700000000'})
        tracker.update({'x-rate-limit-remaining': '9'})
        status = tracker.status()
        assert status.remaining == 9
        assert status.reset_time == datetime.fromtimestamp(1700000000, tz=timezone.utc)

    def test_ignores_malformed_values(self):
        tracker = RateLimitTracker()
        tracker.update({'X-Rate-Limit-Remaining': 'lots'})
        assert tracker.status().remaining is None

    @pytest.mark.parametrize('reset', ['nan', 'inf', '-inf', '1e20', 'soon'])
    def test_out_of_range_reset_keeps_previous_value(self, reset):
        tracker = RateLimitTracker()
        tracker.update({'X-Rate-Limit-Reset': '1700000000'})
        tracker.update({'X-Rate-Limit-Reset': reset})
        assert tracker.status().reset_time == datetime.fromtimestamp(1700000000, tz=timezone.utc)


class TestPaginationHeaders:
    def test_link_header(self):
        header = (
            '<https://api.pandascore.co/starcraft-2/players?page=1>; rel="first", '
            '<https://api.pandascore.co/starcraft-2/players?page=3>; rel="next", '
            '<https://api.pandascore.co/starcraft-2/players?page=9>; rel="last"'
        )
        links = NavigationLinks.parse(header)
        assert links.next.endswith('page=3')
        assert links.last.endswith('page=9')
        assert links.previous is None

    def test_pagination_info(self):
        info = PaginationInfo.from_headers({'X-Page': '1', 'X-Per-Page': '50', 'X-Total': '101'})
        assert info.total_pages == 3
        assert info.has_next_page
        assert not info.has_previous_page

    def test_incomplete_headers(self):
        assert PaginationInfo.from_headers({'X-Page': '1', 'X-Total': '10'}) is None
        assert PaginationInfo.from_headers({'X-Page': 'one', 'X-Per-Page': '5', 'X-Total': '10'}) is None
