"""Shareable plain-text results for the QB picker."""

import logging
from typing import Callable, Mapping, Optional

from .constants import (
    AFC_DIVISIONS,
    GLYPH_CORRECT,
    GLYPH_INCORRECT,
    GLYPH_MISSING,
    NFC_DIVISIONS,
    NFL_DIVISIONS,
    SHARE_GRID_WIDTH,
    TOTAL_TEAMS,
)
from .scoring import score_percentage

logger = logging.getLogger('nflquiz.share')

ShareTarget = Callable[[str, str], None]


class ShareCancelled(Exception):
    """Raised by a share target when the user dismisses the share dialog."""


def share_grid_order() -> list[str]:
    """Team abbreviations in AFC-then-NFC display order."""
    return [
        team.abbr
        for division in AFC_DIVISIONS + NFC_DIVISIONS
        for team in NFL_DIVISIONS[division]
    ]


def build_share_text(
    score: int,
    assignments: Mapping[str, str],
    team_for: Callable[[str], Optional[str]],
    title: str = 'NFL QB Picker',
    grid_width: int = SHARE_GRID_WIDTH,
) -> str:
    """
    Build the score line and glyph grid for sharing.

    One glyph per team: correct, incorrect, or unassigned. A newline
    follows every ``grid_width`` glyphs.

    Args:
        score: Number of correct picks
        assignments: QB name -> team abbreviation
        team_for: Ground-truth lookup from QB name to team abbreviation
        title: Heading for the score line
        grid_width: Glyphs per row
    """
    percentage = score_percentage(score, TOTAL_TEAMS)
    result = f'{title}: {score}/{TOTAL_TEAMS} ({percentage}%)\n\n'

    qb_by_team = {abbr: qb_name for qb_name, abbr in assignments.items()}
    for idx, abbr in enumerate(share_grid_order()):
        qb_name = qb_by_team.get(abbr)
        if qb_name is None:
            result += GLYPH_MISSING
        elif team_for(qb_name) == abbr:
            result += GLYPH_CORRECT
        else:
            result += GLYPH_INCORRECT
        if (idx + 1) % grid_width == 0:
            result += '\n'

    return result


def share_results(
    text: str,
    target: Optional[ShareTarget] = None,
    title: str = 'NFL QB Picker Results',
) -> bool:
    """
    Hand share text to a platform share target.

    Without a target this is a no-op. Failures are logged, never raised.

    Returns:
        True if the target accepted the text
    """
    if target is None:
        logger.debug('No share target available, skipping share')
        return False

    try:
        target(text, title)
    except ShareCancelled:
        logger.debug('Share dismissed by user')
        return False
    except Exception as e:
        logger.error(f'Error sharing: {e}')
        return False
    return True
