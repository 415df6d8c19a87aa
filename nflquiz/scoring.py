"""Scoring for batch assignment modes."""

import math
from typing import Callable, Iterable, List, Mapping, Optional

from .models import AssignmentResult


def score_assignments(
    keys: Iterable[str],
    truth: Callable[[str], Optional[str]],
    assignments: Mapping[str, str],
) -> int:
    """
    Count keys whose assigned value matches the ground truth.

    Iterates the full key universe, so a key missing from ``assignments``
    counts as wrong.

    Args:
        keys: Every key in the quiz (all team names or all QB names)
        truth: Ground-truth lookup, e.g. get_division_for_team
        assignments: User's key -> value choices

    Returns:
        Number of correct assignments
    """
    score = 0
    for key in keys:
        assigned = assignments.get(key)
        if assigned is not None and assigned == truth(key):
            score += 1
    return score


def score_percentage(score: int, total: int) -> int:
    """Whole-number percentage, halves rounded up."""
    if total <= 0:
        return 0
    return int(math.floor(score / total * 100 + 0.5))


def assignment_breakdown(
    keys: Iterable[str],
    truth: Callable[[str], Optional[str]],
    assignments: Mapping[str, str],
) -> List[AssignmentResult]:
    """Per-key correct / incorrect / missing results in key order."""
    return [
        AssignmentResult(key=key, assigned=assignments.get(key), expected=truth(key))
        for key in keys
    ]
