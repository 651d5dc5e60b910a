"""SegmentationService: path loading and segmentation for the Web API."""

from __future__ import annotations

from autopath.config import PlannerSettings
from autopath.grouping.builder import PathGroupBuilder
from autopath.loader.parser import PathFileParser
from autopath.path.models import PathConstraints, PathSegment
from autopath.planner import PathPlanner
from autopath.web.schemas import ConstraintsModel, SegmentRequest


def _to_constraints(models: list[ConstraintsModel]) -> list[PathConstraints]:
    return [
        PathConstraints(max_velocity=m.max_velocity, max_acceleration=m.max_acceleration)
        for m in models
    ]


class SegmentationService:
    """Splits inline or deployed path definitions into :class:`PathSegment` objects.

    Parameters
    ----------
    settings:
        Deploy directory used for named paths.
    """

    def __init__(self, settings: PlannerSettings) -> None:
        self._settings = settings
        self._parser = PathFileParser()
        self._builder = PathGroupBuilder()

    def segment_definition(self, req: SegmentRequest) -> list[PathSegment]:
        """Segment the path definition carried in *req*.

        Raises
        ------
        PathFormatError
            If the waypoints or markers are malformed.
        ValueError
            If there are no waypoints, no constraints, or a constraint is not positive.
        """
        constraints = _to_constraints(req.constraints)
        waypoints, markers = self._parser.parse(
            {"waypoints": req.waypoints, "markers": req.markers}
        )
        return self._builder.build_group(waypoints, markers, constraints, req.reversed)

    def segment_deployed(
        self,
        name: str,
        constraints: list[ConstraintsModel],
        reversed: bool = False,
    ) -> list[PathSegment]:
        """Load the deployed path *name* and segment it.

        Raises
        ------
        PathLoadError
            If the path file is missing or malformed.
        ValueError
            If the path has no waypoints or a constraint is not positive.
        """
        planner = PathPlanner(self._settings)
        return planner.load_path_group(name, _to_constraints(constraints), reversed)

    def list_paths(self) -> list[str]:
        return PathPlanner(self._settings).available_paths()
