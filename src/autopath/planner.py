"""PathPlanner: loads deployed path files and builds their trajectories.

Combines :class:`~autopath.loader.PathFileReader`,
:class:`~autopath.loader.PathFileParser` and
:class:`~autopath.grouping.PathGroupBuilder`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from autopath.config import PlannerSettings
from autopath.grouping.builder import PathGroupBuilder, TrajectoryBuilder, build_segment
from autopath.loader.parser import PathFileParser
from autopath.loader.reader import PathFileReader
from autopath.path.models import EventMarker, PathConstraints, Waypoint

_logger = logging.getLogger(__name__)


def constraints_from(max_velocity: float, max_acceleration: float) -> PathConstraints:
    """Shorthand for ``PathConstraints(max_velocity, max_acceleration)``."""
    return PathConstraints(max_velocity=max_velocity, max_acceleration=max_acceleration)


def _default_builder_factory(resolution: float) -> TrajectoryBuilder:
    """Return the :class:`~autopath.path.PathSegment` builder (resolution unused)."""
    return build_segment


class PathPlanner:
    """Loads ``<deploy_dir>/pathplanner/<name>.path`` files as trajectories.

    Args:
        settings: Deploy directory and resolution; defaults to
            :meth:`PlannerSettings.from_env`.
        builder_factory: ``factory(resolution) -> TrajectoryBuilder``.  Called
            once at construction.  The default builder returns
            :class:`~autopath.path.PathSegment` objects.
    """

    def __init__(
        self,
        settings: PlannerSettings | None = None,
        builder_factory: Callable[[float], TrajectoryBuilder] | None = None,
    ) -> None:
        self.settings = settings or PlannerSettings.from_env()
        factory = builder_factory or _default_builder_factory
        self._reader = PathFileReader(self.settings.deploy_dir)
        self._parser = PathFileParser()
        self._builder = PathGroupBuilder(factory(self.settings.resolution))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def load_path(
        self,
        name: str,
        constraints: PathConstraints,
        reversed: bool = False,
    ) -> Any:
        """Load *name* as a single trajectory, ignoring stop points.

        Raises:
            PathLoadError: If the file is missing or malformed.
            ValueError: If the path has no waypoints.
        """
        waypoints, markers = self._load(name)
        return self._builder.build_single(waypoints, markers, constraints, reversed)

    def load_path_group(
        self,
        name: str,
        constraints: PathConstraints | Sequence[PathConstraints],
        reversed: bool = False,
    ) -> list[Any]:
        """Load *name* split at its stop points, one trajectory per segment.

        Args:
            name: Path file name without extension.
            constraints: One :class:`PathConstraints` for every segment, or a
                list whose first entry applies to the first segment and whose
                last entry applies to every segment beyond the list.
            reversed: Drive every segment reversed.

        Raises:
            PathLoadError: If the file is missing or malformed.
            ValueError: If the path has no waypoints or *constraints* is empty.
        """
        if isinstance(constraints, PathConstraints):
            constraints = [constraints]
        waypoints, markers = self._load(name)
        return self._builder.build_group(waypoints, markers, list(constraints), reversed)

    def available_paths(self) -> list[str]:
        """Names of all path files in the deploy directory."""
        return self._reader.list_paths()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _load(self, name: str) -> tuple[list[Waypoint], list[EventMarker]]:
        data = self._reader.read(name)
        waypoints, markers = self._parser.parse(data)
        _logger.info(
            "Loaded path %r: %d waypoints, %d markers", name, len(waypoints), len(markers)
        )
        return waypoints, markers
