"""Tests for ConstraintAssigner."""

from __future__ import annotations

import pytest

from autopath.grouping.constraints import ConstraintAssigner
from autopath.path.models import PathConstraints


class TestConstraintAssignment:
    def test_two_constraints_four_segments_pads_with_last(self, fast, slow):
        assert ConstraintAssigner().assign([fast, slow], 4) == [fast, slow, slow, slow]

    def test_one_constraint_one_segment(self, fast):
        assert ConstraintAssigner().assign([fast], 1) == [fast]

    def test_one_constraint_applies_to_every_segment(self, slow):
        assert ConstraintAssigner().assign([slow], 3) == [slow, slow, slow]

    def test_extra_constraints_are_ignored(self, fast, slow):
        third = PathConstraints(max_velocity=1.0, max_acceleration=1.0)
        assert ConstraintAssigner().assign([fast, slow, third], 2) == [fast, slow]

    def test_exact_match_keeps_order(self, fast, slow):
        assert ConstraintAssigner().assign([slow, fast], 2) == [slow, fast]

    def test_constraints_are_reused_not_recomputed(self, fast, slow):
        assigned = ConstraintAssigner().assign([fast, slow], 3)
        assert assigned[2] is slow

    def test_zero_segments_returns_empty_list(self, fast):
        assert ConstraintAssigner().assign([fast], 0) == []

    def test_empty_constraints_raises_value_error(self):
        with pytest.raises(ValueError):
            ConstraintAssigner().assign([], 2)

    def test_negative_segment_count_raises_value_error(self, fast):
        with pytest.raises(ValueError):
            ConstraintAssigner().assign([fast], -1)
