"""PathGroupBuilder: turns a parsed path into one trajectory per segment."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Protocol

from autopath.grouping.constraints import ConstraintAssigner
from autopath.grouping.segmenter import PathSegmenter
from autopath.path.models import EventMarker, PathConstraints, PathSegment, Waypoint

_logger = logging.getLogger(__name__)


class PathGroupConsistencyError(RuntimeError):
    """Raised when segmentation yields a different number of waypoint and marker groups.

    This indicates a defect in the segmenter, not bad input.
    """


class TrajectoryBuilder(Protocol):
    """Generates a trajectory for one segment (spline evaluation, velocity profile, ...)."""

    def __call__(
        self,
        waypoints: list[Waypoint],
        markers: list[EventMarker],
        constraints: PathConstraints,
        reversed: bool,
    ) -> Any: ...


def build_segment(
    waypoints: list[Waypoint],
    markers: list[EventMarker],
    constraints: PathConstraints,
    reversed: bool,
) -> PathSegment:
    """Default trajectory builder: package the inputs as a :class:`PathSegment`."""
    return PathSegment(
        waypoints=waypoints,
        markers=markers,
        constraints=constraints,
        reversed=reversed,
    )


class PathGroupBuilder:
    """Orchestrates segmentation, constraint assignment and trajectory generation.

    Holds no per-call state, so one instance may be reused for any number of
    paths.

    Args:
        trajectory_builder: Called once per segment, in path order.  Defaults
            to :func:`build_segment`.
        segmenter: Injected for tests.
        assigner: Injected for tests.
    """

    def __init__(
        self,
        trajectory_builder: TrajectoryBuilder | None = None,
        segmenter: PathSegmenter | None = None,
        assigner: ConstraintAssigner | None = None,
    ) -> None:
        self._build = trajectory_builder or build_segment
        self._segmenter = segmenter or PathSegmenter()
        self._assigner = assigner or ConstraintAssigner()

    def build_group(
        self,
        waypoints: Sequence[Waypoint],
        markers: Sequence[EventMarker],
        constraints: Sequence[PathConstraints],
        reversed: bool = False,
    ) -> list[Any]:
        """Split the path at its stop points and build one trajectory per segment.

        Args:
            waypoints: Full waypoint list of the path.
            markers: Event markers positioned against *waypoints*.
            constraints: Constraints for the first, second, ... segment; the
                last entry is reused for any further segments.
            reversed: Applied to every segment.

        Returns:
            Trajectories in original path order.

        Raises:
            ValueError: If *waypoints* or *constraints* is empty.
            PathGroupConsistencyError: If the segmenter produced mismatched
                waypoint and marker groups.
        """
        if not constraints:
            raise ValueError("At least one PathConstraints is required")

        waypoint_groups, marker_groups = self._segmenter.split(waypoints, markers)
        if len(waypoint_groups) != len(marker_groups):
            raise PathGroupConsistencyError(
                f"Segmenter produced {len(waypoint_groups)} waypoint groups "
                f"but {len(marker_groups)} marker groups"
            )

        assigned = self._assigner.assign(constraints, len(waypoint_groups))
        _logger.debug(
            "Split %d waypoints into %d segments", len(waypoints), len(waypoint_groups)
        )

        trajectories = []
        for i, (group, group_markers, group_constraints) in enumerate(
            zip(waypoint_groups, marker_groups, assigned)
        ):
            _logger.debug(
                "Segment %d: %d waypoints, %d markers, max_vel=%.3f, max_accel=%.3f",
                i,
                len(group),
                len(group_markers),
                group_constraints.max_velocity,
                group_constraints.max_acceleration,
            )
            trajectories.append(self._build(group, group_markers, group_constraints, reversed))
        return trajectories

    def build_single(
        self,
        waypoints: Sequence[Waypoint],
        markers: Sequence[EventMarker],
        constraints: PathConstraints,
        reversed: bool = False,
    ) -> Any:
        """Build one trajectory from the whole path, ignoring stop points.

        Raises:
            ValueError: If *waypoints* is empty.
        """
        if not waypoints:
            raise ValueError("At least one waypoint is required")
        return self._build(list(waypoints), list(markers), constraints, reversed)
