"""Path definition data structures."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

NO_VELOCITY_OVERRIDE = -1.0
"""Sentinel ``velocity_override`` meaning the waypoint does not override speed."""


@dataclass(frozen=True)
class Translation2d:
    """A 2D position in field coordinates."""

    x: float
    y: float


@dataclass(frozen=True)
class Waypoint:
    """One control point of an authored path.

    ``prev_control`` / ``next_control`` are ``None`` only at path endpoints,
    where there is no incoming (or outgoing) spline tangent.
    """

    anchor_point: Translation2d
    """Position the path passes through."""

    prev_control: Translation2d | None
    """Incoming tangent handle, ``None`` for the first waypoint."""

    next_control: Translation2d | None
    """Outgoing tangent handle, ``None`` for the last waypoint."""

    velocity_override: float = NO_VELOCITY_OVERRIDE
    """Target speed at this waypoint, or :data:`NO_VELOCITY_OVERRIDE`."""

    holonomic_angle: float = 0.0
    """Target heading in degrees, as authored."""

    is_reversal: bool = False
    """True if the direction of travel flips at this waypoint."""

    is_stop_point: bool = False
    """True if this waypoint ends one segment of a path group and starts the next."""

    @property
    def has_velocity_override(self) -> bool:
        return self.velocity_override != NO_VELOCITY_OVERRIDE


@dataclass(frozen=True)
class EventMarker:
    """A named event bound to a fractional position along a waypoint list.

    ``floor(waypoint_relative_pos)`` is the index of the waypoint preceding the
    event; the fractional part is the progress toward the next waypoint.
    """

    name: str
    waypoint_relative_pos: float


@dataclass(frozen=True)
class PathConstraints:
    """Max velocity / max acceleration applied while generating a trajectory.

    Raises:
        ValueError: If either bound is not a finite positive number.
    """

    max_velocity: float
    max_acceleration: float

    def __post_init__(self) -> None:
        for name in ("max_velocity", "max_acceleration"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be a positive finite number, got {value!r}")


@dataclass(frozen=True)
class IndexedWaypoint:
    """A waypoint tagged with its index in the original, unsegmented path."""

    index: int
    waypoint: Waypoint


@dataclass
class PathSegment:
    """One independently drivable piece of a path group.

    ``markers`` are already expressed relative to the first waypoint of
    ``waypoints``.
    """

    waypoints: list[Waypoint]
    constraints: PathConstraints
    markers: list[EventMarker] = field(default_factory=list)
    reversed: bool = False
