"""Integrity checks for the team table and the QB snapshot."""

from collections import Counter
from typing import Mapping, Sequence

from .constants import NFL_DIVISIONS, TEAMS_PER_DIVISION, TOTAL_TEAMS
from .models import Team
from .quarterbacks import QBTable


def validate_division_table(divisions: Mapping[str, Sequence[Team]] = NFL_DIVISIONS) -> list[str]:
    """
    Validate the division table.

    Checks:
    - Every division has exactly 4 teams
    - 32 teams in total
    - No team name or abbreviation appears twice

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    for division, teams in divisions.items():
        if len(teams) != TEAMS_PER_DIVISION:
            errors.append(f'{division} has {len(teams)} teams (expected {TEAMS_PER_DIVISION})')

    all_teams = [team for teams in divisions.values() for team in teams]
    if len(all_teams) != TOTAL_TEAMS:
        errors.append(f'Table has {len(all_teams)} teams (expected {TOTAL_TEAMS})')

    for label, values in (('names', [t.name for t in all_teams]), ('abbreviations', [t.abbr for t in all_teams])):
        duplicates = sorted(v for v, n in Counter(values).items() if n > 1)
        if duplicates:
            errors.append(f'Duplicate team {label}: {", ".join(duplicates)}')

    return errors


def validate_qb_table(table: QBTable, divisions: Mapping[str, Sequence[Team]] = NFL_DIVISIONS) -> list[str]:
    """
    Validate a QB table against the team table.

    Checks:
    - Every QB references a known team
    - No QB name appears twice
    - No team has more than one QB

    Teams without a QB are reported separately by ``missing_teams``
    since the collection step may legitimately omit them.

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []
    known_abbrs = {team.abbr for teams in divisions.values() for team in teams}

    for qb in table:
        if qb.team_abbr not in known_abbrs:
            errors.append(f'{qb.name} references unknown team {qb.team_abbr!r}')

    name_counts = Counter(qb.name for qb in table)
    duplicates = sorted(name for name, n in name_counts.items() if n > 1)
    if duplicates:
        errors.append(f'Duplicate QB names: {", ".join(duplicates)}')

    team_counts = Counter(qb.team_abbr for qb in table)
    for abbr, count in sorted(team_counts.items()):
        if count > 1:
            errors.append(f'{abbr} has {count} QBs (max 1)')

    return errors


def missing_teams(table: QBTable, divisions: Mapping[str, Sequence[Team]] = NFL_DIVISIONS) -> list[str]:
    """Abbreviations of teams with no QB in the table, in division order."""
    covered = {qb.team_abbr for qb in table}
    return [team.abbr for teams in divisions.values() for team in teams if team.abbr not in covered]
