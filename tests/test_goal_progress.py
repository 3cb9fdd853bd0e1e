"""Progress rollup and the toggle rule."""

import pytest

from lifelogix.services.goal_progress_service import compute_overall_progress, toggled_progress


def _sub_goals(*progress):
    return [{"id": str(i), "subGoalName": f"step {i}", "progress": p} for i, p in enumerate(progress)]


class TestOverallProgress:

    def test_no_sub_goals_is_zero(self):
        assert compute_overall_progress([]) == 0
        assert compute_overall_progress(None) == 0

    @pytest.mark.parametrize("progress, expected", [
        ((100,), 100),
        ((0,), 0),
        ((100, 0), 50),
        ((100, 0, 0), 33),
        ((100, 100, 0), 67),
        ((100, 0, 0, 0, 0, 0, 0, 0), 13),  # 12.5 rounds up
    ])
    def test_completed_share(self, progress, expected):
        assert compute_overall_progress(_sub_goals(*progress)) == expected

    def test_partial_progress_does_not_count(self):
        assert compute_overall_progress(_sub_goals(99, 50, 100)) == 33


class TestToggledProgress:

    @pytest.mark.parametrize("current, expected", [(0, 100), (100, 0), (50, 100), (None, 100)])
    def test_binary_flip(self, current, expected):
        assert toggled_progress(current) == expected

    def test_self_inverse_from_zero(self):
        assert toggled_progress(toggled_progress(0)) == 0
