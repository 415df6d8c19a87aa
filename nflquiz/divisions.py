"""Lookups over the static team/division table."""

import random
from typing import Iterable, List, Optional, Sequence, TypeVar

from .constants import LOGO_URL_TEMPLATE, MAX_REPEAT_ATTEMPTS, NFL_DIVISIONS
from .models import Team

T = TypeVar('T')


def get_all_teams() -> List[Team]:
    """Flat list of all 32 teams in division, then team, declaration order."""
    return [team for teams in NFL_DIVISIONS.values() for team in teams]


def get_divisions() -> List[str]:
    """Division names in declaration order."""
    return list(NFL_DIVISIONS)


def get_division_for_team(team_name: str) -> Optional[str]:
    """
    Get the division a team plays in.

    Matching is exact and case-sensitive.

    Args:
        team_name: Full team name (e.g., "Buffalo Bills")

    Returns:
        Division name, or None for an unknown team
    """
    for division, teams in NFL_DIVISIONS.items():
        if any(team.name == team_name for team in teams):
            return division
    return None


def get_team_by_name(team_name: str) -> Optional[Team]:
    for team in get_all_teams():
        if team.name == team_name:
            return team
    return None


def get_team_by_abbr(abbr: str) -> Optional[Team]:
    for team in get_all_teams():
        if team.abbr == abbr:
            return team
    return None


def get_conference(division: str) -> Optional[str]:
    """Conference prefix of a division name ('AFC' or 'NFC')."""
    if division not in NFL_DIVISIONS:
        return None
    return division.split(' ', 1)[0]


def get_random_team(rng: Optional[random.Random] = None) -> Team:
    """Uniform pick over all teams. Repeats are possible."""
    rng = rng or random
    return rng.choice(get_all_teams())


def get_random_unused_team(
    used: Iterable[str],
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_REPEAT_ATTEMPTS,
) -> Team:
    """
    Pick a random team whose name is not in ``used``.

    Retries at most ``max_attempts`` times, then accepts a repeat so the
    loop stays bounded once every team has been shown.

    Args:
        used: Names of teams already shown
        rng: Optional random source (defaults to the ``random`` module)
        max_attempts: Retry cap

    Returns:
        A team, unused whenever the retries allow it
    """
    used = set(used)
    team = get_random_team(rng)
    attempts = 0
    while team.name in used and attempts < max_attempts:
        team = get_random_team(rng)
        attempts += 1
    return team


def shuffle(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """Fisher-Yates shuffle into a new list. The input is not modified."""
    rng = rng or random
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def get_logo_url(abbr: str) -> str:
    """ESPN logo URL for a team abbreviation."""
    return LOGO_URL_TEMPLATE.format(abbr=abbr)
