"""Path definition records: waypoints, event markers and motion constraints."""

from autopath.path.models import (
    NO_VELOCITY_OVERRIDE,
    EventMarker,
    IndexedWaypoint,
    PathConstraints,
    PathSegment,
    Translation2d,
    Waypoint,
)

__all__ = [
    "NO_VELOCITY_OVERRIDE",
    "EventMarker",
    "IndexedWaypoint",
    "PathConstraints",
    "PathSegment",
    "Translation2d",
    "Waypoint",
]
