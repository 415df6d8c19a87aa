"""Unit tests for scoring and share text."""

from unittest.mock import Mock

from nflquiz.constants import GLYPH_CORRECT, GLYPH_INCORRECT, GLYPH_MISSING
from nflquiz.divisions import get_all_teams, get_division_for_team
from nflquiz.scoring import assignment_breakdown, score_assignments, score_percentage
from nflquiz.share import ShareCancelled, build_share_text, share_grid_order, share_results


def _wrong_division(team_name):
    """Any division other than the team's own."""
    return 'NFC West' if get_division_for_team(team_name) != 'NFC West' else 'AFC East'


class TestScoreAssignments:
    """Tests for score_assignments."""

    def test_perfect_score(self):
        names = [t.name for t in get_all_teams()]
        assignments = {name: get_division_for_team(name) for name in names}
        assert score_assignments(names, get_division_for_team, assignments) == 32

    def test_missing_counts_as_wrong(self):
        """20 correct, 5 incorrect, 7 missing scores 20."""
        names = [t.name for t in get_all_teams()]
        assignments = {}
        for name in names[:20]:
            assignments[name] = get_division_for_team(name)
        for name in names[20:25]:
            assignments[name] = _wrong_division(name)

        assert len(assignments) == 25
        assert score_assignments(names, get_division_for_team, assignments) == 20

    def test_empty_assignments(self):
        names = [t.name for t in get_all_teams()]
        assert score_assignments(names, get_division_for_team, {}) == 0

    def test_keys_outside_universe_ignored(self):
        names = ['Buffalo Bills']
        assignments = {'Buffalo Bills': 'AFC East', 'Miami Dolphins': 'AFC East'}
        assert score_assignments(names, get_division_for_team, assignments) == 1

    def test_unknown_truth_never_matches_missing(self):
        """A key with no ground truth and no assignment isn't a match."""
        assert score_assignments(['Nobody'], lambda k: None, {}) == 0

    def test_does_not_mutate_assignments(self):
        assignments = {'Buffalo Bills': 'AFC East'}
        score_assignments(['Buffalo Bills'], get_division_for_team, assignments)
        assert assignments == {'Buffalo Bills': 'AFC East'}


class TestPercentage:
    """Tests for score_percentage."""

    def test_rounding(self):
        assert score_percentage(30, 32) == 94
        assert score_percentage(20, 32) == 63
        assert score_percentage(32, 32) == 100
        assert score_percentage(0, 32) == 0

    def test_half_rounds_up(self):
        assert score_percentage(1, 8) == 13

    def test_zero_total(self):
        assert score_percentage(0, 0) == 0


class TestBreakdown:
    """Tests for assignment_breakdown."""

    def test_statuses(self):
        assignments = {'Buffalo Bills': 'AFC East', 'Miami Dolphins': 'AFC West'}
        keys = ['Buffalo Bills', 'Miami Dolphins', 'New York Jets']
        results = assignment_breakdown(keys, get_division_for_team, assignments)

        assert [r.key for r in results] == keys
        assert [r.status for r in results] == ['correct', 'incorrect', 'missing']
        assert results[1].expected == 'AFC East'
        assert results[2].assigned is None


class TestShareText:
    """Tests for share text generation."""

    def test_grid_order_is_afc_then_nfc(self):
        order = share_grid_order()
        assert len(order) == 32
        # AFC North leads the display order
        assert order[:4] == ['bal', 'cin', 'cle', 'pit']
        assert order[16:20] == ['chi', 'det', 'gb', 'min']

    def test_grid_layout(self):
        """Four rows of eight glyphs under the score line."""
        truth = {f'QB {abbr}': abbr for abbr in share_grid_order()}
        assignments = dict(truth)
        text = build_share_text(32, assignments, truth.get)

        header, grid = text.split('\n\n', 1)
        assert header == 'NFL QB Picker: 32/32 (100%)'
        rows = grid.rstrip('\n').split('\n')
        assert len(rows) == 4
        assert all(row == GLYPH_CORRECT * 8 for row in rows)

    def test_mixed_glyphs(self):
        order = share_grid_order()
        truth = {f'QB {abbr}': abbr for abbr in order}
        assignments = dict(truth)
        # Swap the first two teams' QBs, leave the last team empty
        assignments[f'QB {order[0]}'] = order[1]
        assignments[f'QB {order[1]}'] = order[0]
        del assignments[f'QB {order[-1]}']

        text = build_share_text(29, assignments, truth.get)
        rows = text.split('\n\n', 1)[1].rstrip('\n').split('\n')
        assert rows[0] == GLYPH_INCORRECT * 2 + GLYPH_CORRECT * 6
        assert rows[3] == GLYPH_CORRECT * 7 + GLYPH_MISSING
        assert text.startswith('NFL QB Picker: 29/32 (91%)')


class TestShareResults:
    """Tests for the share action."""

    def test_no_target_is_noop(self):
        assert share_results('text') is False

    def test_target_receives_text(self):
        target = Mock()
        assert share_results('hello', target) is True
        target.assert_called_once_with('hello', 'NFL QB Picker Results')

    def test_cancel_is_contained(self):
        target = Mock(side_effect=ShareCancelled())
        assert share_results('hello', target) is False

    def test_failure_is_contained(self, caplog):
        target = Mock(side_effect=RuntimeError('no share sheet'))
        assert share_results('hello', target) is False
        assert 'no share sheet' in caplog.text
