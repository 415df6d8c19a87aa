"""Shared fixtures."""

import json
import random

import pytest

from nflquiz.divisions import get_all_teams
from nflquiz.quarterbacks import QBTable


@pytest.fixture
def rng():
    """Seeded random source for repeatable shuffles."""
    return random.Random(1234)


@pytest.fixture
def snapshot_data():
    """QB snapshot with one QB per team; Josh Allen starts for Buffalo."""
    qbs = []
    for idx, team in enumerate(get_all_teams()):
        name = 'Josh Allen' if team.abbr == 'buf' else f'QB {team.abbr.upper()}'
        qbs.append({'name': name, 'athleteId': str(1000 + idx), 'teamAbbr': team.abbr})
    return {'lastUpdated': '2025-09-02', 'qbs': qbs}


@pytest.fixture
def snapshot_path(tmp_path, snapshot_data):
    path = tmp_path / 'qb_data.json'
    with open(path, 'w') as f:
        json.dump(snapshot_data, f, indent=2)
    return path


@pytest.fixture
def qb_table(snapshot_path):
    return QBTable.from_file(snapshot_path)
