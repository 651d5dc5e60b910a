"""Tests for MarkerRemapper."""

from __future__ import annotations

import pytest

from autopath.grouping.markers import MarkerRemapper
from autopath.path.models import EventMarker


def test_selects_markers_inside_inclusive_range():
    markers = [
        EventMarker("before", 1.99),
        EventMarker("start", 2.0),
        EventMarker("mid", 3.4),
        EventMarker("end", 5.0),
        EventMarker("after", 5.01),
    ]
    result = MarkerRemapper().remap(markers, 2, 5)
    assert [m.name for m in result] == ["start", "mid", "end"]


def test_positions_are_shifted_by_start_index():
    result = MarkerRemapper().remap([EventMarker("mid", 3.4)], 2, 5)
    assert result[0].waypoint_relative_pos == pytest.approx(1.4)


def test_name_is_carried_unchanged():
    result = MarkerRemapper().remap([EventMarker("Deploy Intake", 1.0)], 0, 3)
    assert result[0].name == "Deploy Intake"


def test_zero_start_index_keeps_positions():
    markers = [EventMarker("a", 0.0), EventMarker("b", 2.5)]
    assert MarkerRemapper().remap(markers, 0, 3) == markers


def test_input_markers_are_not_mutated():
    original = EventMarker("m", 4.0)
    markers = [original]
    result = MarkerRemapper().remap(markers, 3, 6)
    assert markers == [EventMarker("m", 4.0)]
    assert result[0] is not original


def test_preserves_input_order():
    markers = [EventMarker("z", 3.5), EventMarker("a", 2.5), EventMarker("m", 3.0)]
    result = MarkerRemapper().remap(markers, 2, 4)
    assert [m.name for m in result] == ["z", "a", "m"]


def test_empty_marker_list():
    assert MarkerRemapper().remap([], 0, 4) == []


def test_single_waypoint_range_only_matches_exact_position():
    markers = [EventMarker("on", 3.0), EventMarker("near", 3.1)]
    assert MarkerRemapper().remap(markers, 3, 3) == [EventMarker("on", 0.0)]


def test_reversed_range_raises_value_error():
    with pytest.raises(ValueError):
        MarkerRemapper().remap([EventMarker("m", 1.0)], 4, 2)
