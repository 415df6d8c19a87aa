"""Data models for the NFL division quiz."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Team:
    """An NFL team. ``abbr`` is the stable key used across the quiz."""
    name: str
    abbr: str


@dataclass(frozen=True)
class Quarterback:
    """Starting quarterback from the QB snapshot."""
    name: str
    athlete_id: str
    team_abbr: str  # Not enforced against the team table


@dataclass(frozen=True)
class GuessFeedback:
    """Outcome of a single division guess."""
    is_correct: bool
    selected_division: str
    correct_division: Optional[str]


@dataclass(frozen=True)
class AssignmentResult:
    """Per-key result after a batch submission."""
    key: str
    assigned: Optional[str]
    expected: Optional[str]

    @property
    def status(self) -> str:
        if self.assigned is None:
            return 'missing'
        return 'correct' if self.assigned == self.expected else 'incorrect'


@dataclass
class SubmissionResult:
    """Container for a submitted batch mode."""
    score: int
    total: int
    percentage: int
    results: List[AssignmentResult] = field(default_factory=list)
