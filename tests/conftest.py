"""Shared pytest fixtures for the StarCraft II client tests."""

from unittest.mock import AsyncMock

import httpx
import pytest

from domain.enums import AuthMethod
from infrastructure.api import (
    CacheConfiguration,
    ClientConfiguration,
    RetryConfiguration,
    RetryHandler,
    StarCraftClient,
)


@pytest.fixture
def player_payload():
    """A player as served by /starcraft-2/players."""
    return {
        'id': 101,
        'name': 'Serral',
        'slug': 'serral',
        'first_name': 'Joona',
        'last_name': 'Sotala',
        'role': None,
        'nationality': 'FI',
        'image_url': None,
        'age': 26,
        'birthday': '1998-03-22',
        'hometown': 'Finland',
        'current_team': {'id': 7, 'name': 'Team BASE', 'acronym': 'BASE', 'slug': 'base'},
        'current_videogame': {'id': 29, 'name': 'StarCraft 2', 'slug': 'starcraft-2'},
    }


@pytest.fixture
def match_payload():
    """A finished best-of-5 between two players."""
    return {
        'id': 5001,
        'name': 'Serral vs Clem',
        'slug': 'serral-vs-clem',
        'status': 'finished',
        'tournament_id': 900,
        'serie_id': 800,
        'number_of_games': 5,
        'modified_at': '2024-01-15T12:30:00Z',
        'begin_at': '2024-01-15T10:00:00Z',
        'end_at': '2024-01-15T11:30:00Z',
        'games': [
            {'id': 1, 'position': 1, 'status': 'finished', 'complete': True, 'finished': True,
             'length': 720, 'winner': {'type': 'Player', 'id': 101}},
        ],
        'opponents': [
            {'type': 'Player', 'opponent': {'id': 101, 'name': 'Serral'}},
            {'type': 'Player', 'opponent': {'id': 102, 'name': 'Clem'}},
        ],
        'results': [{'score': 3, 'player_id': 101}, {'score': 1, 'player_id': 102}],
        'winner': {'id': 101, 'type': 'Player', 'name': 'Serral'},
        'winner_id': 101,
        'live': {'supported': False},
        'streams_list': [
            {'raw_url': 'https://twitch.tv/esl_sc2', 'language': 'en', 'main': True, 'official': True},
        ],
    }


@pytest.fixture
def league_payload():
    def _league(league_id):
        return {
            'id': league_id,
            'name': f'League {league_id}',
            'slug': f'league-{league_id}',
            'modified_at': '2024-01-01T00:00:00Z',
        }
    return _league


@pytest.fixture
def no_sleep():
    """Replaces asyncio.sleep in the retry handler."""
    return AsyncMock()


@pytest.fixture
def make_client(no_sleep):
    """Build a StarCraftClient whose HTTP traffic goes to ``handler``."""
    def _make(handler, *, auth_method=AuthMethod.BEARER_TOKEN, max_attempts=3, default_ttl=300.0):
        configuration = ClientConfiguration(
            api_key='test-token',
            auth_method=auth_method,
            cache_configuration=CacheConfiguration(max_size=100, default_ttl=default_ttl),
        )
        retry_handler = RetryHandler(
            RetryConfiguration(max_attempts=max_attempts),
            sleep=no_sleep,
            jitter=lambda low, high: 1.0,
        )
        return StarCraftClient(
            configuration,
            transport=httpx.MockTransport(handler),
            retry_handler=retry_handler,
        )
    return _make
