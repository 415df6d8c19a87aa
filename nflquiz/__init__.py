from .models import Team, Quarterback, GuessFeedback, AssignmentResult, SubmissionResult
from .divisions import (
    get_all_teams,
    get_divisions,
    get_division_for_team,
    get_team_by_name,
    get_team_by_abbr,
    get_conference,
    get_random_team,
    get_random_unused_team,
    shuffle,
    get_logo_url,
)
from .quarterbacks import QBTable, get_headshot_url
from .scoring import score_assignments, score_percentage, assignment_breakdown
from .share import ShareCancelled, build_share_text, share_results
from .sessions import GuessSession, AssignSession, QBPickerSession
from .fetcher import ESPNQBFetcher

__all__ = [
    # Models
    'Team',
    'Quarterback',
    'GuessFeedback',
    'AssignmentResult',
    'SubmissionResult',
    # Division lookups
    'get_all_teams',
    'get_divisions',
    'get_division_for_team',
    'get_team_by_name',
    'get_team_by_abbr',
    'get_conference',
    'get_random_team',
    'get_random_unused_team',
    'shuffle',
    'get_logo_url',
    # QB lookups
    'QBTable',
    'get_headshot_url',
    # Scoring
    'score_assignments',
    'score_percentage',
    'assignment_breakdown',
    # Sharing
    'ShareCancelled',
    'build_share_text',
    'share_results',
    # Game modes
    'GuessSession',
    'AssignSession',
    'QBPickerSession',
    # Data collection
    'ESPNQBFetcher',
]
