"""Tests for the cache-first, retrying API client (starcraft_client.py)."""

import asyncio
import logging
from types import SimpleNamespace

import httpx
import pytest

from domain.entities import League, Match, Player
from domain.enums import AuthMethod
from domain.requests import APIRequest, CachePolicy, LeaguesRequest, PlayersRequest, StreamingRequest
from infrastructure.api import ClientConfiguration, DecodingError, NotFoundError, WebSocketError
from infrastructure.api.starcraft_client import cache_key


class Recorder:
    """MockTransport handler that records requests and delegates to ``respond``."""

    def __init__(self, respond):
        self.respond = respond
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        return self.respond(request)


def _run(client, call):
    async def scenario():
        async with client:
            return await call(client)

    return asyncio.run(scenario())


class TestCacheKey:
    def test_independent_of_parameter_order(self):
        first = APIRequest('/starcraft-2/players', {'page[size]': 10, 'filter[nationality]': 'KR'})
        second = APIRequest('/starcraft-2/players', {'filter[nationality]': 'KR', 'page[size]': 10})
        assert cache_key(first) == cache_key(second)

    def test_format(self):
        request = APIRequest('/x', {'b': True, 'a': [1, 2]})
        assert cache_key(request) == '/x&a=1&a=2&b=true'

    def test_list_and_comma_string_are_distinct(self):
        listed = APIRequest('/x', {'filter[slug]': ['a', 'b']})
        joined = APIRequest('/x', {'filter[slug]': 'a,b'})
        assert cache_key(listed) != cache_key(joined)

    def test_skips_unset_parameters(self):
        assert cache_key(APIRequest('/x', {'search[name]': None})) == '/x'


class TestAuthentication:
    def test_bearer_header(self, make_client):
        recorder = Recorder(lambda r: httpx.Response(200, json=[]))
        _run(make_client(recorder), lambda c: c.get_players())
        sent = recorder.requests[0]
        assert sent.headers['Authorization'] == 'Bearer test-token'
        assert 'token' not in sent.url.params

    def test_query_parameter(self, make_client):
        recorder = Recorder(lambda r: httpx.Response(200, json=[]))
        client = make_client(recorder, auth_method=AuthMethod.QUERY_PARAMETER)
        _run(client, lambda c: c.get_players())
        sent = recorder.requests[0]
        assert sent.url.params['token'] == 'test-token'
        assert 'Authorization' not in sent.headers

    def test_query_token_kept_out_of_errors_and_logs(self, make_client, caplog):
        recorder = Recorder(lambda r: httpx.Response(404))
        client = make_client(recorder, auth_method=AuthMethod.QUERY_PARAMETER)
        with caplog.at_level(logging.DEBUG, logger='infrastructure.api.networking_client'):
            with pytest.raises(NotFoundError) as excinfo:
                _run(client, lambda c: c.get_players())
        assert 'test-token' not in str(excinfo.value)
        assert 'token=redacted' in excinfo.value.resource
        messages = [record.getMessage() for record in caplog.records]
        assert any('HTTP 404' in message for message in messages)
        assert not any('test-token' in message for message in messages)


class TestExecute:
    def test_decodes_entities(self, make_client, match_payload):
        recorder = Recorder(lambda r: httpx.Response(200, json=[match_payload]))
        matches = _run(make_client(recorder), lambda c: c.get_live_matches())
        assert recorder.requests[0].url.path == '/starcraft-2/matches/running'
        assert isinstance(matches[0], Match)
        assert matches[0].score_for(101) == 3

    def test_cache_hit_skips_network(self, make_client, player_payload):
        recorder = Recorder(lambda r: httpx.Response(200, json=[player_payload]))
        client = make_client(recorder)

        async def twice(c):
            first = await c.get_players()
            second = await c.get_players()
            return first, second

        first, second = _run(client, twice)
        assert len(recorder.requests) == 1
        assert second == first
        assert second[0].current_team.name == 'Team BASE'
        stats = client.cache_statistics()
        assert (stats.hit_count, stats.miss_count, stats.current_size) == (1, 1, 1)

    def test_no_cache_always_fetches(self, make_client):
        recorder = Recorder(lambda r: httpx.Response(200, json=[]))
        request = PlayersRequest(cache_policy=CachePolicy.no_cache())

        async def twice(c):
            await c.execute(request)
            await c.execute(request)

        client = make_client(recorder)
        _run(client, twice)
        assert len(recorder.requests) == 2
        assert client.cache_statistics().current_size == 0

    def test_clear_cache(self, make_client):
        recorder = Recorder(lambda r: httpx.Response(200, json=[]))

        async def scenario(c):
            await c.get_teams()
            await c.clear_cache()
            await c.get_teams()

        _run(make_client(recorder), scenario)
        assert len(recorder.requests) == 2

    def test_retries_server_errors(self, make_client, no_sleep):
        responses = iter([httpx.Response(503), httpx.Response(200, json=[])])
        recorder = Recorder(lambda r: next(responses))
        assert _run(make_client(recorder), lambda c: c.get_leagues()) == []
        assert len(recorder.requests) == 2
        no_sleep.assert_awaited_once()

    def test_not_found_is_not_retried(self, make_client, no_sleep):
        recorder = Recorder(lambda r: httpx.Response(404))
        with pytest.raises(NotFoundError):
            _run(make_client(recorder), lambda c: c.get_leagues())
        assert len(recorder.requests) == 1
        no_sleep.assert_not_awaited()

    def test_raw_request(self, make_client):
        recorder = Recorder(lambda r: httpx.Response(200, json={'ok': True}))
        result = _run(make_client(recorder), lambda c: c.execute(APIRequest('/starcraft-2/status')))
        assert result == {'ok': True}

    def test_rate_limit_status(self, make_client):
        headers = {'X-Rate-Limit-Remaining': '41'}
        client = make_client(lambda r: httpx.Response(200, json=[], headers=headers))
        _run(client, lambda c: c.get_series())
        assert client.rate_limit_status().remaining == 41


class TestPagination:
    @staticmethod
    def _paged(league_payload, total):
        def respond(request):
            page = int(request.url.params['page[number]'])
            size = int(request.url.params['page[size]'])
            ids = range((page - 1) * size + 1, min(page * size, total) + 1)
            return httpx.Response(
                200,
                json=[league_payload(i) for i in ids],
                headers={'X-Page': str(page), 'X-Per-Page': str(size), 'X-Total': str(total)},
            )
        return Recorder(respond)

    def test_fetches_until_short_page(self, make_client, league_payload):
        recorder = self._paged(league_payload, 125)
        leagues = _run(make_client(recorder), lambda c: c.get_all_leagues())
        assert len(leagues) == 125
        assert [r.url.params['page[number]'] for r in recorder.requests] == ['1', '2', '3']
        assert all(isinstance(league, League) for league in leagues)

    def test_respects_max_pages(self, make_client, league_payload):
        recorder = self._paged(league_payload, 500)
        leagues = _run(make_client(recorder), lambda c: c.get_all_leagues(max_pages=2))
        assert len(leagues) == 100
        assert len(recorder.requests) == 2

    def test_uses_request_page_size(self, make_client, league_payload):
        recorder = self._paged(league_payload, 25)
        request = LeaguesRequest(page_size=10)
        leagues = _run(make_client(recorder), lambda c: c.execute_paginated(request))
        assert len(leagues) == 25
        assert len(recorder.requests) == 3

    def test_exact_multiple_needs_one_empty_page(self, make_client, league_payload):
        recorder = self._paged(league_payload, 100)
        leagues = _run(make_client(recorder), lambda c: c.get_all_leagues())
        assert len(leagues) == 100
        assert len(recorder.requests) == 3

    def test_execute_page_reports_metadata(self, make_client, league_payload):
        recorder = self._paged(league_payload, 120)
        page = _run(make_client(recorder), lambda c: c.execute_page(LeaguesRequest().with_page(2)))
        assert len(page) == 50
        assert page.pagination.total_pages == 3
        assert page.pagination.has_next_page
        assert page.pagination.has_previous_page

    def test_object_response_cannot_be_paged(self, make_client):
        recorder = Recorder(lambda r: httpx.Response(200, json={'id': 1, 'name': 'GSL'}))
        request = APIRequest('/starcraft-2/leagues/1')
        with pytest.raises(DecodingError):
            _run(make_client(recorder), lambda c: c.execute_paginated(request))
        with pytest.raises(DecodingError):
            _run(make_client(recorder), lambda c: c.execute_page(request))


class TestStreaming:
    def test_stream_fails_immediately(self, make_client):
        client = make_client(lambda r: httpx.Response(200, json=[]))

        async def consume(c):
            async for _ in c.stream(StreamingRequest(match_id=5001)):
                pass

        with pytest.raises(WebSocketError):
            _run(client, consume)


class TestClientConfiguration:
    def _source(self, **overrides):
        values = dict(
            PANDA_TOKEN='abc',
            AUTH_METHOD='query',
            BASE_URL='https://api.pandascore.co',
            REQUEST_TIMEOUT=12.0,
            CACHE_MAX_SIZE=10,
            CACHE_TTL=60.0,
        )
        values.update(overrides)
        source = SimpleNamespace(**values)

        def validate():
            if not source.PANDA_TOKEN:
                raise ValueError('PANDA_TOKEN must be set')

        source.validate = validate
        return source

    def test_from_environment(self):
        config = ClientConfiguration.from_environment(self._source())
        assert config.api_key == 'abc'
        assert config.auth_method is AuthMethod.QUERY_PARAMETER
        assert config.timeout == 12.0
        assert config.cache_configuration.max_size == 10

    def test_missing_token(self):
        with pytest.raises(ValueError):
            ClientConfiguration.from_environment(self._source(PANDA_TOKEN=''))

    def test_repr_hides_token(self):
        assert 'abc' not in repr(ClientConfiguration(api_key='abc'))
