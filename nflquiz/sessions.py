"""Game mode state machines.

Each session owns its assignment map. Drag-and-drop and tap-to-select
front ends both drive the same ``assign`` / ``unassign`` commands.
"""

import logging
import random
from typing import Dict, List, Optional, Set, Tuple

from .constants import (
    ALL_DIVISIONS,
    MAX_REPEAT_ATTEMPTS,
    NFL_DIVISIONS,
    TEAMS_PER_DIVISION,
    TOTAL_TEAMS,
)
from .divisions import (
    get_all_teams,
    get_division_for_team,
    get_random_unused_team,
    get_team_by_abbr,
    get_team_by_name,
    shuffle,
)
from .models import AssignmentResult, GuessFeedback, Quarterback, SubmissionResult, Team
from .quarterbacks import QBTable
from .scoring import assignment_breakdown, score_assignments, score_percentage
from .share import ShareTarget, build_share_text, share_results

logger = logging.getLogger('nflquiz.sessions')


class GuessSession:
    """Division guesser: one team at a time with immediate feedback."""

    def __init__(self, rng: Optional[random.Random] = None, max_attempts: int = MAX_REPEAT_ATTEMPTS):
        self._rng = rng
        self.max_attempts = max_attempts
        self.score = 0
        self.total_attempts = 0
        self.used_teams: Set[str] = set()
        self.current_team: Optional[Team] = None
        self.feedback: Optional[GuessFeedback] = None
        self.next_team()

    @property
    def is_answered(self) -> bool:
        return self.feedback is not None

    def next_team(self, team: Optional[Team] = None) -> Team:
        """Show a new team, avoiding ones already guessed when possible."""
        if team is None:
            team = get_random_unused_team(self.used_teams, self._rng, self.max_attempts)
        self.current_team = team
        self.feedback = None
        return team

    def guess(self, division: str) -> GuessFeedback:
        """
        Record a guess for the current team.

        A second guess on an answered team is ignored and the existing
        feedback is returned.

        Raises:
            ValueError: If ``division`` is not a division name
        """
        if self.feedback is not None:
            return self.feedback
        if division not in NFL_DIVISIONS:
            raise ValueError(f'Unknown division: {division}')

        correct_division = get_division_for_team(self.current_team.name)
        is_correct = division == correct_division

        self.feedback = GuessFeedback(
            is_correct=is_correct,
            selected_division=division,
            correct_division=correct_division,
        )
        self.total_attempts += 1
        if is_correct:
            self.score += 1
        self.used_teams.add(self.current_team.name)
        return self.feedback

    def reset(self) -> None:
        """Clear score and history and show a fresh team."""
        self.score = 0
        self.total_attempts = 0
        self.used_teams = set()
        self.next_team()


class AssignSession:
    """Division picker: place all 32 teams, at most 4 per division."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._team_names = [team.name for team in get_all_teams()]
        # Pool order is fixed for the session so repeated reads agree
        self._pool_order = shuffle(get_all_teams(), rng)
        self._assignments: Dict[str, str] = {}
        self.submitted = False
        self.score = 0
        self.result: Optional[SubmissionResult] = None

    @property
    def assignments(self) -> Dict[str, str]:
        return dict(self._assignments)

    @property
    def is_complete(self) -> bool:
        return all(name in self._assignments for name in self._team_names)

    def teams_in_division(self, division: str) -> List[Team]:
        return [team for team in get_all_teams() if self._assignments.get(team.name) == division]

    def unassigned_teams(self) -> List[Team]:
        return [team for team in self._pool_order if team.name not in self._assignments]

    def assign(self, team_name: str, division: str) -> bool:
        """
        Place a team in a division (or move it there).

        Returns:
            False if rejected: unknown team or division, full division,
            or the session was already submitted
        """
        if self.submitted:
            return False
        if get_team_by_name(team_name) is None or division not in NFL_DIVISIONS:
            logger.debug(f'Rejected assignment {team_name!r} -> {division!r}')
            return False
        if self._assignments.get(team_name) == division:
            return True
        if len(self.teams_in_division(division)) >= TEAMS_PER_DIVISION:
            logger.debug(f'{division} is full, rejected {team_name}')
            return False

        self._assignments[team_name] = division
        return True

    def unassign(self, team_name: str) -> None:
        """Return a team to the pool."""
        if not self.submitted:
            self._assignments.pop(team_name, None)

    def submit(self) -> SubmissionResult:
        """
        Score the placements.

        Raises:
            ValueError: If already submitted or not every team is placed
        """
        if self.submitted:
            raise ValueError('Already submitted; call try_again() first')
        if not self.is_complete:
            raise ValueError(
                f'All teams must be assigned before submitting '
                f'({len(self._assignments)}/{TOTAL_TEAMS})'
            )

        self.score = score_assignments(self._team_names, get_division_for_team, self._assignments)
        self.result = SubmissionResult(
            score=self.score,
            total=TOTAL_TEAMS,
            percentage=score_percentage(self.score, TOTAL_TEAMS),
            results=assignment_breakdown(self._team_names, get_division_for_team, self._assignments),
        )
        self.submitted = True
        return self.result

    def results_by_division(self) -> Dict[str, List[AssignmentResult]]:
        """
        Results grouped by division for display.

        Each division lists the teams placed there, then the teams that
        belong there but were never placed.
        """
        breakdown = assignment_breakdown(self._team_names, get_division_for_team, self._assignments)
        grouped: Dict[str, List[AssignmentResult]] = {}
        for division in ALL_DIVISIONS:
            placed = [r for r in breakdown if r.assigned == division]
            missing = [r for r in breakdown if r.assigned is None and r.expected == division]
            grouped[division] = placed + missing
        return grouped

    def try_again(self) -> None:
        self._assignments = {}
        self.submitted = False
        self.score = 0
        self.result = None


class QBPickerSession:
    """QB picker: match every starting QB to a team, one QB per team."""

    def __init__(self, qb_table: QBTable, rng: Optional[random.Random] = None):
        self.qb_table = qb_table
        # Shuffled once; every read in the session goes through this order
        self.qb_order: Tuple[Quarterback, ...] = tuple(qb_table.all_qbs(rng))
        self._assignments: Dict[str, str] = {}
        self.selected_qb: Optional[Quarterback] = None
        self.submitted = False
        self.score = 0
        self.result: Optional[SubmissionResult] = None

    @property
    def assignments(self) -> Dict[str, str]:
        return dict(self._assignments)

    @property
    def total(self) -> int:
        return len(self.qb_order)

    @property
    def is_complete(self) -> bool:
        return bool(self.qb_order) and all(qb.name in self._assignments for qb in self.qb_order)

    def _find_qb(self, name: str) -> Optional[Quarterback]:
        for qb in self.qb_order:
            if qb.name == name:
                return qb
        return None

    def assigned_qb(self, team_abbr: str) -> Optional[Quarterback]:
        for qb_name, abbr in self._assignments.items():
            if abbr == team_abbr:
                return self._find_qb(qb_name)
        return None

    def select_qb(self, qb_name: str) -> Optional[Quarterback]:
        """Toggle selection of an unassigned QB. Returns the current selection."""
        if self.submitted or qb_name in self._assignments:
            return self.selected_qb
        qb = self._find_qb(qb_name)
        if qb is None:
            return self.selected_qb
        if self.selected_qb is not None and self.selected_qb.name == qb_name:
            self.selected_qb = None
        else:
            self.selected_qb = qb
        return self.selected_qb

    def tap_team(self, team_abbr: str) -> bool:
        """Assign the selected QB to a team."""
        if self.selected_qb is None:
            return False
        if not self.assign(self.selected_qb.name, team_abbr):
            return False
        self.selected_qb = None
        return True

    def assign(self, qb_name: str, team_abbr: str) -> bool:
        """
        Assign a QB to a team.

        Returns:
            False if rejected: unknown QB or team, team already has a
            different QB, or the session was already submitted
        """
        if self.submitted:
            return False
        if self._find_qb(qb_name) is None or get_team_by_abbr(team_abbr) is None:
            logger.debug(f'Rejected assignment {qb_name!r} -> {team_abbr!r}')
            return False
        current = self.assigned_qb(team_abbr)
        if current is not None:
            return current.name == qb_name

        self._assignments[qb_name] = team_abbr
        if self.selected_qb is not None and self.selected_qb.name == qb_name:
            self.selected_qb = None
        return True

    def unassign(self, qb_name: str) -> Optional[Quarterback]:
        """Remove a QB from their team and select them again."""
        if self.submitted or qb_name not in self._assignments:
            return None
        del self._assignments[qb_name]
        self.selected_qb = self._find_qb(qb_name)
        return self.selected_qb

    def submit(self) -> SubmissionResult:
        """
        Score the picks.

        Raises:
            ValueError: If already submitted or not every QB is placed
        """
        if self.submitted:
            raise ValueError('Already submitted; call try_again() first')
        if not self.is_complete:
            raise ValueError(
                f'All QBs must be assigned before submitting '
                f'({len(self._assignments)}/{self.total})'
            )

        qb_names = [qb.name for qb in self.qb_order]
        self.score = score_assignments(qb_names, self.qb_table.team_for, self._assignments)
        self.result = SubmissionResult(
            score=self.score,
            total=TOTAL_TEAMS,
            percentage=score_percentage(self.score, TOTAL_TEAMS),
            results=assignment_breakdown(qb_names, self.qb_table.team_for, self._assignments),
        )
        self.selected_qb = None
        self.submitted = True
        return self.result

    def team_results(self) -> List[AssignmentResult]:
        """
        Per-team results in division order.

        ``assigned`` is the picked QB's name and ``expected`` the actual
        starter's name (None if the snapshot has no QB for that team).
        """
        results = []
        for team in get_all_teams():
            assigned = self.assigned_qb(team.abbr)
            actual = self.qb_table.qb_by_team(team.abbr)
            results.append(AssignmentResult(
                key=team.abbr,
                assigned=assigned.name if assigned else None,
                expected=actual.name if actual else None,
            ))
        return results

    def share_text(self) -> str:
        if not self.submitted:
            raise ValueError('Submit before sharing results')
        return build_share_text(self.score, self._assignments, self.qb_table.team_for)

    def share(self, target: Optional[ShareTarget] = None) -> bool:
        """Send the share text to a platform share target, if there is one."""
        return share_results(self.share_text(), target)

    def try_again(self) -> None:
        self._assignments = {}
        self.selected_qb = None
        self.submitted = False
        self.score = 0
        self.result = None
