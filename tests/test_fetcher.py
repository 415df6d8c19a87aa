"""Tests for the ESPN starting QB collector with mocked HTTP."""

import json
from unittest.mock import MagicMock, Mock

import pytest
import requests

from nflquiz.fetcher import ESPNQBFetcher
from nflquiz.quarterbacks import QBTable
from nflquiz.utils import save_json

ATHLETE_BASE = 'http://sports.core.api.espn.com/v2/sports/football/leagues/nfl/athletes'


def _response(payload=None, status=200):
    response = Mock()
    response.status_code = status
    response.json.return_value = payload
    if status >= 400:
        error = requests.HTTPError(f'{status} Error')
        error.response = response
        response.raise_for_status.side_effect = error
    else:
        response.raise_for_status.return_value = None
    return response


def _depth_chart(*athletes):
    """Depth chart with a defensive formation first, then offense."""
    return {
        'items': [
            {'positions': {'lde': {'athletes': []}}},
            {'positions': {'qb': {'athletes': list(athletes)}, 'rb': {'athletes': []}}},
        ]
    }


def _athlete_ref(athlete_id, rank):
    return {'rank': rank, 'athlete': {'$ref': f'{ATHLETE_BASE}/{athlete_id}'}}


@pytest.fixture
def espn():
    """Mock ESPN API keyed by URL."""
    routes = {}

    def get(url, timeout=None):
        if url not in routes:
            return _response(status=404)
        result = routes[url]
        if isinstance(result, Exception):
            raise result
        return result

    session = MagicMock()
    session.get.side_effect = get
    return routes, session


def _depth_url(team_id, season=2025):
    return (
        'https://sports.core.api.espn.com/v2/sports/football/leagues/nfl'
        f'/seasons/{season}/teams/{team_id}/depthcharts'
    )


class TestStarterSelection:
    """Tests for depth chart parsing."""

    def test_find_qb_position_skips_formations_without_qb(self):
        chart = _depth_chart(_athlete_ref(1, 1))
        assert ESPNQBFetcher.find_qb_position(chart) == {'athletes': [_athlete_ref(1, 1)]}

    def test_find_qb_position_missing(self):
        assert ESPNQBFetcher.find_qb_position({'items': []}) is None
        assert ESPNQBFetcher.find_qb_position({}) is None

    def test_rank_one_wins(self):
        athletes = [_athlete_ref(2, 2), _athlete_ref(1, 1)]
        assert ESPNQBFetcher.pick_starter(athletes)['rank'] == 1

    def test_falls_back_to_first(self):
        athletes = [_athlete_ref(5, None), _athlete_ref(6, 3)]
        assert ESPNQBFetcher.pick_starter(athletes) is athletes[0]


class TestGetStartingQB:
    """Tests for resolving one team's starter."""

    def test_resolves_starter(self, espn):
        routes, session = espn
        routes[_depth_url(2)] = _response(_depth_chart(_athlete_ref(99, 2), _athlete_ref(3918298, 1)))
        routes[f'{ATHLETE_BASE}/3918298'] = _response(
            {'id': 3918298, 'displayName': 'Josh Allen', 'fullName': 'Joshua Allen'}
        )

        fetcher = ESPNQBFetcher(season=2025, delay=0, session=session)
        qb = fetcher.get_starting_qb('buf', 2)

        assert qb.name == 'Josh Allen'
        assert qb.athleteId == '3918298'
        assert qb.teamAbbr == 'buf'

    def test_full_name_fallback(self, espn):
        routes, session = espn
        routes[_depth_url(2)] = _response(_depth_chart(_athlete_ref(7, 1)))
        routes[f'{ATHLETE_BASE}/7'] = _response({'id': 7, 'fullName': 'Backup Guy'})

        fetcher = ESPNQBFetcher(season=2025, delay=0, session=session)
        assert fetcher.get_starting_qb('buf', 2).name == 'Backup Guy'

    def test_no_qb_listed(self, espn, caplog):
        routes, session = espn
        routes[_depth_url(2)] = _response({'items': [{'positions': {'rb': {'athletes': []}}}]})

        fetcher = ESPNQBFetcher(season=2025, delay=0, session=session)
        assert fetcher.get_starting_qb('buf', 2) is None
        assert 'No QB found for buf' in caplog.text

    def test_http_error_is_contained(self, espn, caplog):
        _, session = espn
        fetcher = ESPNQBFetcher(season=2025, delay=0, session=session)
        assert fetcher.get_starting_qb('buf', 2) is None
        assert 'Error fetching QB for buf' in caplog.text
        # 404 isn't retried
        assert session.get.call_count == 1

    def test_bad_athlete_payload(self, espn):
        routes, session = espn
        routes[_depth_url(2)] = _response(_depth_chart(_athlete_ref(7, 1)))
        routes[f'{ATHLETE_BASE}/7'] = _response({'id': 7})

        fetcher = ESPNQBFetcher(season=2025, delay=0, session=session)
        assert fetcher.get_starting_qb('buf', 2) is None

    def test_transient_failure_retried(self, espn):
        routes, session = espn
        chart = _response(_depth_chart(_athlete_ref(7, 1)))
        attempts = iter([requests.ConnectionError('reset'), _response(status=503), chart])

        def get(url, timeout=None):
            if url == _depth_url(2):
                result = next(attempts)
                if isinstance(result, Exception):
                    raise result
                return result
            return _response({'id': 7, 'displayName': 'Steady Eddie'})

        session.get.side_effect = get
        fetcher = ESPNQBFetcher(season=2025, delay=0, max_retries=3, session=session)

        assert fetcher.get_starting_qb('buf', 2).name == 'Steady Eddie'
        assert session.get.call_count == 4

    def test_retries_exhausted(self, espn):
        routes, session = espn
        routes[_depth_url(2)] = requests.Timeout('slow')

        fetcher = ESPNQBFetcher(season=2025, delay=0, max_retries=2, session=session)
        assert fetcher.get_starting_qb('buf', 2) is None
        assert session.get.call_count == 2


class TestFetchAll:
    """Tests for the full collection run."""

    def test_missing_teams_are_omitted(self, espn, tmp_path, caplog):
        routes, session = espn
        routes[_depth_url(2)] = _response(_depth_chart(_athlete_ref(1, 1)))
        routes[f'{ATHLETE_BASE}/1'] = _response({'id': 1, 'displayName': 'Josh Allen'})
        routes[_depth_url(15)] = _response(_depth_chart(_athlete_ref(2, 1)))
        routes[f'{ATHLETE_BASE}/2'] = _response({'id': 2, 'displayName': 'Tua Tagovailoa'})
        # nyj depth chart 404s

        caplog.set_level('INFO', logger='nflquiz')
        fetcher = ESPNQBFetcher(season=2025, delay=0, session=session)
        snapshot = fetcher.fetch_all({'buf': 2, 'mia': 15, 'nyj': 20})

        assert [qb.teamAbbr for qb in snapshot.qbs] == ['buf', 'mia']
        assert 'Fetched 2/32 QBs' in caplog.text

        path = tmp_path / 'qb_data.json'
        save_json(path, snapshot)
        with open(path) as f:
            raw = json.load(f)
        assert raw['qbs'][1] == {'name': 'Tua Tagovailoa', 'athleteId': '2', 'teamAbbr': 'mia'}
        assert QBTable.from_file(path).team_for('Josh Allen') == 'buf'

    def test_uses_season_in_url(self, espn):
        routes, session = espn
        fetcher = ESPNQBFetcher(season=2031, delay=0, session=session)
        fetcher.fetch_all({'buf': 2})
        session.get.assert_called_once_with(_depth_url(2, season=2031), timeout=30)
