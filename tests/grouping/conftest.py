"""Shared helpers for path-group tests."""

from __future__ import annotations

import pytest

from autopath.path.models import PathConstraints, Translation2d, Waypoint


def make_waypoint(
    x: float,
    y: float = 0.0,
    stop: bool = False,
    first: bool = False,
    last: bool = False,
    **kwargs,
) -> Waypoint:
    """Build a waypoint at (x, y) with unit-length tangent handles along +x."""
    return Waypoint(
        anchor_point=Translation2d(x, y),
        prev_control=None if first else Translation2d(x - 0.5, y),
        next_control=None if last else Translation2d(x + 0.5, y),
        is_stop_point=stop,
        **kwargs,
    )


def make_path(n: int, stops: tuple[int, ...] = ()) -> list[Waypoint]:
    """Return *n* distinct waypoints along the x axis with stop points at *stops*."""
    return [
        make_waypoint(float(i), stop=i in stops, first=i == 0, last=i == n - 1)
        for i in range(n)
    ]


@pytest.fixture
def fast() -> PathConstraints:
    return PathConstraints(max_velocity=4.0, max_acceleration=3.0)


@pytest.fixture
def slow() -> PathConstraints:
    return PathConstraints(max_velocity=2.0, max_acceleration=1.5)
