"""PathFileParser: converts a decoded ``.path`` JSON object to waypoints and markers."""

from __future__ import annotations

from autopath.loader.errors import PathFormatError
from autopath.path.models import (
    NO_VELOCITY_OVERRIDE,
    EventMarker,
    Translation2d,
    Waypoint,
)


def _translation(value: object, key: str) -> Translation2d | None:
    """Return a :class:`Translation2d` for an ``{x, y}`` object, ``None`` for null."""
    if value is None:
        return None
    if not isinstance(value, dict):
        raise PathFormatError(f"{key!r} must be an object with 'x' and 'y'")
    return Translation2d(x=_number(value, "x"), y=_number(value, "y"))


def _number(obj: dict, key: str) -> float:
    if key not in obj:
        raise PathFormatError(f"Missing required field {key!r}")
    value = obj[key]
    # bool is an int subclass but never a valid coordinate or angle
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PathFormatError(f"{key!r} must be a number, got {value!r}")
    return float(value)


def _require_object(data: object) -> None:
    if not isinstance(data, dict):
        raise PathFormatError(
            f"Path definition must be a JSON object, got {type(data).__name__}"
        )


def _flag(obj: dict, key: str) -> bool:
    value = obj[key]
    if not isinstance(value, bool):
        raise PathFormatError(f"{key!r} must be true or false, got {value!r}")
    return value


class PathFileParser:
    """Parses the JSON object stored in a ``.path`` file.

    The expected shape::

        {
          "waypoints": [
            {"anchorPoint": {"x": 1.0, "y": 3.0},
             "prevControl": null,
             "nextControl": {"x": 2.0, "y": 3.0},
             "holonomicAngle": 0.0,
             "isReversal": false,
             "isStopPoint": false,
             "velOverride": null}
          ],
          "markers": [{"name": "intake", "position": 0.5}]
        }

    Values are carried over as authored; no unit conversion happens here.
    """

    def parse(self, data: dict) -> tuple[list[Waypoint], list[EventMarker]]:
        """Return ``(waypoints, markers)`` parsed from *data*.

        Raises:
            PathFormatError: If a required field is missing or has the wrong type.
        """
        return self.parse_waypoints(data), self.parse_markers(data)

    def parse_waypoints(self, data: dict) -> list[Waypoint]:
        """Parse ``data["waypoints"]``.

        Raises:
            PathFormatError: If *data* is not an object, the list is missing or any
                waypoint is malformed.
        """
        _require_object(data)
        raw_waypoints = data.get("waypoints")
        if not isinstance(raw_waypoints, list):
            raise PathFormatError("Path file has no 'waypoints' list")

        waypoints: list[Waypoint] = []
        for i, raw in enumerate(raw_waypoints):
            try:
                waypoints.append(self._parse_waypoint(raw))
            except PathFormatError as exc:
                raise PathFormatError(f"Waypoint {i}: {exc}") from exc
        return waypoints

    def parse_markers(self, data: dict) -> list[EventMarker]:
        """Parse ``data["markers"]``; a missing or null list means no markers.

        Raises:
            PathFormatError: If *data* is not an object or any marker is malformed.
        """
        _require_object(data)
        raw_markers = data.get("markers")
        if raw_markers is None:
            return []
        if not isinstance(raw_markers, list):
            raise PathFormatError("'markers' must be a list")

        markers: list[EventMarker] = []
        for i, raw in enumerate(raw_markers):
            if not isinstance(raw, dict):
                raise PathFormatError(f"Marker {i}: expected an object")
            name = raw.get("name")
            if not isinstance(name, str):
                raise PathFormatError(f"Marker {i}: 'name' must be a string")
            try:
                position = _number(raw, "position")
            except PathFormatError as exc:
                raise PathFormatError(f"Marker {i}: {exc}") from exc
            markers.append(EventMarker(name=name, waypoint_relative_pos=position))
        return markers

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _parse_waypoint(self, raw: object) -> Waypoint:
        if not isinstance(raw, dict):
            raise PathFormatError("expected an object")
        if "anchorPoint" not in raw or raw["anchorPoint"] is None:
            raise PathFormatError("Missing required field 'anchorPoint'")
        if "isReversal" not in raw:
            raise PathFormatError("Missing required field 'isReversal'")

        kwargs: dict = {
            "anchor_point": _translation(raw["anchorPoint"], "anchorPoint"),
            "prev_control": _translation(raw.get("prevControl"), "prevControl"),
            "next_control": _translation(raw.get("nextControl"), "nextControl"),
            "holonomic_angle": _number(raw, "holonomicAngle"),
            "is_reversal": _flag(raw, "isReversal"),
        }

        # Older path files predate stop points and omit ``isStopPoint``
        kwargs["is_stop_point"] = (
            _flag(raw, "isStopPoint") if raw.get("isStopPoint") is not None else False
        )

        kwargs["velocity_override"] = (
            _number(raw, "velOverride")
            if raw.get("velOverride") is not None
            else NO_VELOCITY_OVERRIDE
        )

        return Waypoint(**kwargs)
