"""Path-group segmentation at stop points.

A path group is one authored path driven as several independent trajectories.
The path is cut at every waypoint flagged ``is_stop_point``; the stop point
ends one segment and also starts the next, so consecutive segments share
exactly one anchor:

::

    W0  W1  W2*  W3  W4          (* = stop point)
    [W0, W1, W2] [W2, W3, W4]
"""

from __future__ import annotations

from collections.abc import Sequence

from autopath.grouping.markers import MarkerRemapper
from autopath.path.models import EventMarker, IndexedWaypoint, Waypoint


class PathSegmenter:
    """Split a waypoint list into segments and distribute its event markers.

    Args:
        remapper: Marker remapper used by :meth:`split`.  Injected for tests.
    """

    def __init__(self, remapper: MarkerRemapper | None = None) -> None:
        self._remapper = remapper or MarkerRemapper()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def split_waypoints(self, waypoints: Sequence[Waypoint]) -> list[list[IndexedWaypoint]]:
        """Partition *waypoints* into contiguous groups closed by stop points.

        Each waypoint is tagged with its index in *waypoints* so callers never
        have to look a waypoint up by value (two equal waypoints would be
        indistinguishable).

        Args:
            waypoints: Full, ordered waypoint list of the path.

        Returns:
            Ordered list of groups.  With no stop points this is a single
            group holding every waypoint.

        Raises:
            ValueError: If *waypoints* is empty.
        """
        if not waypoints:
            raise ValueError("At least one waypoint is required")

        last = len(waypoints) - 1
        groups: list[list[IndexedWaypoint]] = []
        current: list[IndexedWaypoint] = []

        for i, waypoint in enumerate(waypoints):
            tagged = IndexedWaypoint(index=i, waypoint=waypoint)
            current.append(tagged)

            if i == last:
                groups.append(current)
            elif waypoint.is_stop_point:
                groups.append(current)
                # The stop point also anchors the start of the next segment
                current = [tagged]

        return groups

    def split(
        self,
        waypoints: Sequence[Waypoint],
        markers: Sequence[EventMarker],
    ) -> tuple[list[list[Waypoint]], list[list[EventMarker]]]:
        """Split a path into parallel lists of waypoint groups and marker groups.

        ``marker_groups[i]`` holds the markers of ``waypoint_groups[i]`` with
        positions relative to that group's first waypoint.

        Raises:
            ValueError: If *waypoints* is empty.
        """
        waypoint_groups: list[list[Waypoint]] = []
        marker_groups: list[list[EventMarker]] = []

        for group in self.split_waypoints(waypoints):
            start_idx = group[0].index
            end_idx = group[-1].index
            marker_groups.append(self._remapper.remap(markers, start_idx, end_idx))
            waypoint_groups.append([tagged.waypoint for tagged in group])

        return waypoint_groups, marker_groups
