"""Tests for domain entities and date handling."""

from datetime import datetime, timezone

import pytest

from core.dates import format_date, parse_date
from domain.entities import Match, Player, Series, Team, Tournament
from domain.enums import MatchStatus


def _utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


class TestDates:
    def test_parses_timestamp(self):
        assert parse_date('2024-01-15T10:00:00Z') == _utc(2024, 1, 15, 10)

    def test_parses_bare_date(self):
        assert parse_date('1998-03-22') == _utc(1998, 3, 22)

    def test_parses_offsets_and_fractions(self):
        assert parse_date('2024-01-15T12:00:00.250+02:00') == _utc(2024, 1, 15, 10, 0, 0, 250000)

    def test_rejects_garbage(self):
        with pytest.raises(ValueError):
            parse_date('next tuesday')

    def test_format_is_utc_z(self):
        assert format_date(_utc(2024, 1, 15, 10)) == '2024-01-15T10:00:00Z'
        assert format_date(None) is None


class TestPlayer:
    def test_from_dict(self, player_payload):
        player = Player.from_dict(player_payload)
        assert player.full_name == 'Joona Sotala'
        assert player.display_name == 'Joona Sotala'
        assert player.has_team
        assert player.current_team.display_name == 'BASE'
        assert player.birthday == _utc(1998, 3, 22)
        assert player.current_videogame.slug == 'starcraft-2'

    def test_display_name_falls_back_to_handle(self):
        assert Player(id=1, name='Clem', first_name='Clément').display_name == 'Clem'

    def test_equality_by_id(self, player_payload):
        renamed = dict(player_payload, name='Serral2')
        assert Player.from_dict(player_payload) == Player.from_dict(renamed)
        assert len({Player.from_dict(player_payload), Player.from_dict(renamed)}) == 1

    def test_to_dict_round_trip(self, player_payload):
        player = Player.from_dict(player_payload)
        again = Player.from_dict(player.to_dict())
        assert again.current_team.acronym == 'BASE'
        assert again.birthday == player.birthday

    def test_missing_required_field(self):
        with pytest.raises(KeyError):
            Player.from_dict({'name': 'nobody'})


class TestTeam:
    def test_roster(self, player_payload):
        team = Team.from_dict({'id': 7, 'name': 'Team BASE', 'players': [player_payload]})
        assert team.roster_size == 1
        assert team.has_roster
        assert team.display_name == 'Team BASE'


class TestMatch:
    def test_from_dict(self, match_payload):
        match = Match.from_dict(match_payload)
        assert match.status is MatchStatus.FINISHED
        assert match.has_ended and not match.is_live
        assert match.duration == 5400
        assert match.score_for(102) == 1
        assert match.opponents[0].is_player
        assert match.main_stream.raw_url == 'https://twitch.tv/esl_sc2'
        assert match.games[0].winner.id == 101

    def test_without_streams(self, match_payload):
        del match_payload['streams_list']
        match = Match.from_dict(match_payload)
        assert match.streams is None
        assert match.main_stream is None

    def test_unknown_status(self, match_payload):
        match_payload['status'] = 'exploded'
        with pytest.raises(ValueError):
            Match.from_dict(match_payload)

    def test_to_dict_preserves_stream_key(self, match_payload):
        data = Match.from_dict(match_payload).to_dict()
        assert data['streams_list'][0]['main'] is True
        assert data['begin_at'] == '2024-01-15T10:00:00Z'


class TestScheduled:
    def _tournament(self, **overrides):
        data = {
            'id': 900,
            'name': 'Playoffs',
            'slug': 'playoffs',
            'serie_id': 800,
            'league_id': 700,
            'modified_at': '2024-01-01T00:00:00Z',
            'begin_at': '2024-01-10T00:00:00Z',
            'end_at': '2024-01-20T00:00:00Z',
            'prizepool': '10000 United States Dollar',
        }
        data.update(overrides)
        return Tournament.from_dict(data)

    def test_time_window(self):
        tournament = self._tournament()
        assert tournament.is_pending_at(_utc(2024, 1, 1))
        assert tournament.is_running_at(_utc(2024, 1, 15))
        assert tournament.has_ended_at(_utc(2024, 2, 1))
        assert tournament.duration == 10 * 24 * 3600

    def test_open_ended(self):
        tournament = self._tournament(end_at=None)
        assert tournament.is_running_at(_utc(2030, 1, 1))
        assert not tournament.has_ended_at(_utc(2030, 1, 1))
        assert tournament.duration is None

    def test_prizepool_amount(self):
        assert self._tournament().prizepool_amount == 10000.0
        assert self._tournament(prizepool=None).prizepool_amount is None

    def test_series_counts_tournaments(self):
        series = Series.from_dict({
            'id': 800,
            'name': None,
            'slug': 'gsl-2024',
            'league_id': 700,
            'full_name': 'GSL 2024',
            'modified_at': '2024-01-01T00:00:00Z',
            'tournaments': [self._tournament().to_dict()],
        })
        assert series.tournament_count == 1
