"""Path-group segmentation, marker remapping and constraint assignment."""

from autopath.grouping.builder import (
    PathGroupBuilder,
    PathGroupConsistencyError,
    TrajectoryBuilder,
    build_segment,
)
from autopath.grouping.constraints import ConstraintAssigner
from autopath.grouping.markers import MarkerRemapper
from autopath.grouping.segmenter import PathSegmenter

__all__ = [
    "ConstraintAssigner",
    "MarkerRemapper",
    "PathGroupBuilder",
    "PathGroupConsistencyError",
    "PathSegmenter",
    "TrajectoryBuilder",
    "build_segment",
]
