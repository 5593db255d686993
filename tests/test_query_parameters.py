"""Tests for query parameters and request value objects."""

import pytest

from domain.enums import EndpointScope, HTTPMethod, Resource, SortDirection
from domain.requests import (
    APIRequest,
    CachePolicy,
    CachePolicyKind,
    MatchesRequest,
    PaginationParameters,
    PlayersRequest,
    QueryParameters,
    RangeParameter,
    SeriesRequest,
    SortParameter,
    TeamsRequest,
    TournamentsRequest,
)
from domain.requests.parameters import merge_filters


class TestPaginationParameters:
    def test_clamps_out_of_range_values(self):
        params = PaginationParameters(page=0, size=500)
        assert (params.page, params.size) == (1, 100)

    def test_clamps_size_to_minimum(self):
        params = PaginationParameters(page=-3, size=0)
        assert (params.page, params.size) == (1, 1)

    def test_keeps_valid_values(self):
        params = PaginationParameters(page=4, size=25)
        assert (params.page, params.size) == (4, 25)


class TestSortAndRange:
    def test_sort_renders_direction_prefix(self):
        assert str(SortParameter('begin_at')) == 'begin_at'
        assert str(SortParameter('begin_at', SortDirection.DESCENDING)) == '-begin_at'

    def test_sort_parse_is_inverse_of_str(self):
        parsed = SortParameter.parse('-end_at')
        assert parsed == SortParameter('end_at', SortDirection.DESCENDING)

    @pytest.mark.parametrize('low, high, expected', [
        (18, 25, '18,25'),
        (1.0, 2.5, '1,2.5'),
        (None, 3, ',3'),
        (2, None, '2,'),
        (None, None, ''),
    ])
    def test_range_rendering(self, low, high, expected):
        assert str(RangeParameter(low, high)) == expected


class TestQueryParameters:
    def test_to_dict_uses_bracketed_keys(self):
        params = (
            QueryParameters.builder()
            .with_pagination(2, 20)
            .with_sort('begin_at', SortDirection.DESCENDING)
            .with_sort('name')
            .with_filter('status', 'running')
            .with_search('name', 'serral')
            .with_range('age', 18, 25)
            .build()
        )
        assert params.to_dict() == {
            'page[number]': 2,
            'page[size]': 20,
            'sort': '-begin_at,name',
            'filter[status]': 'running',
            'search[name]': 'serral',
            'range[age]': '18,25',
        }

    def test_empty_parameters_produce_empty_dict(self):
        assert QueryParameters().to_dict() == {}

    def test_built_parameters_are_independent_of_builder(self):
        builder = QueryParameters.builder().with_filter('tier', 's')
        built = builder.build()
        builder.with_filter('tier', 'a')
        assert built.filters == {'tier': 's'}

    def test_merge_filters_skips_none(self):
        merged = merge_filters(QueryParameters(filters={'a': 1}), b=2, c=None)
        assert merged.filters == {'a': 1, 'b': 2}


class TestCachePolicy:
    def test_effective_ttl(self):
        assert CachePolicy.use_cache(60).effective_ttl(300) == 60
        assert CachePolicy.use_cache(None).effective_ttl(300) == 300
        assert CachePolicy.cache_forever().effective_ttl(300) == float('inf')

    def test_no_cache_is_disabled(self):
        assert not CachePolicy.no_cache().enabled
        assert CachePolicy.use_cache().enabled


class TestAPIRequest:
    def test_defaults(self):
        request = APIRequest('/starcraft-2/leagues')
        assert request.method is HTTPMethod.GET
        assert request.supports_pagination
        assert request.cache_policy.kind is CachePolicyKind.USE_CACHE
        assert request.body is None

    def test_query_parameters_are_read_only(self):
        request = APIRequest('/x', {'page[number]': 1})
        with pytest.raises(TypeError):
            request.query_parameters['page[number]'] = 2

    def test_with_page_copies(self):
        request = APIRequest('/x', {'page[number]': 1, 'page[size]': 10})
        second = request.with_page(2)
        assert second.query_parameters['page[number]'] == 2
        assert second.query_parameters['page[size]'] == 10
        assert request.query_parameters['page[number]'] == 1

    def test_equality_by_content(self):
        assert APIRequest('/x', {'a': 1}) == APIRequest('/x', {'a': 1})
        assert APIRequest('/x', {'a': 1}) != APIRequest('/x', {'a': 2})


class TestResourceRequests:
    def test_running_matches(self):
        request = MatchesRequest.running()
        assert request.path == '/starcraft-2/matches/running'
        assert request.cache_policy.ttl == 30

    def test_upcoming_matches_sort_by_begin_at(self):
        request = MatchesRequest.upcoming()
        assert request.path == '/starcraft-2/matches/upcoming'
        assert request.query_parameters['sort'] == 'begin_at'

    def test_tournament_matches_filter(self):
        request = MatchesRequest.for_tournament(42, page=3)
        assert request.query_parameters['filter[tournament_id]'] == 42
        assert request.query_parameters['page[number]'] == 3

    def test_player_search(self):
        request = PlayersRequest.search_by_name('serral')
        assert request.path == '/starcraft-2/players'
        assert request.query_parameters['search[name]'] == 'serral'

    def test_players_by_team(self):
        request = PlayersRequest.by_team(7)
        assert request.query_parameters['filter[current_team_id]'] == 7

    def test_past_series_sorted_newest_first(self):
        assert SeriesRequest.past().query_parameters['sort'] == '-end_at'

    def test_alphabetical_teams(self):
        assert TeamsRequest.alphabetical().query_parameters['sort'] == 'name'

    def test_prize_pool_filter(self):
        request = TournamentsRequest.with_prize_pools()
        assert request.query_parameters['filter[has_prizepool]'] is True

    def test_unsupported_scope(self):
        with pytest.raises(ValueError):
            Resource.PLAYERS.full_path(EndpointScope.RUNNING)
