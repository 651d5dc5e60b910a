"""Event-marker remapping onto path-group segments."""

from __future__ import annotations

from collections.abc import Sequence

from autopath.path.models import EventMarker


class MarkerRemapper:
    """Select the markers that fall inside one segment and shift them to its local space.

    Marker positions are expressed against the original, unsegmented waypoint
    list.  A marker belongs to the segment spanning original indices
    ``[start_idx, end_idx]`` when ``start_idx <= pos <= end_idx``; both ends are
    inclusive, so a marker sitting exactly on a shared stop point is reported
    by both segments that meet there.
    """

    def remap(
        self,
        markers: Sequence[EventMarker],
        start_idx: int,
        end_idx: int,
    ) -> list[EventMarker]:
        """Return the markers inside ``[start_idx, end_idx]`` with positions relative to *start_idx*.

        Input order is preserved and the input markers are left untouched.

        Raises:
            ValueError: If *end_idx* is before *start_idx*.
        """
        if end_idx < start_idx:
            raise ValueError(f"end_idx ({end_idx}) must be >= start_idx ({start_idx})")

        return [
            EventMarker(
                name=marker.name,
                waypoint_relative_pos=marker.waypoint_relative_pos - start_idx,
            )
            for marker in markers
            if start_idx <= marker.waypoint_relative_pos <= end_idx
        ]
