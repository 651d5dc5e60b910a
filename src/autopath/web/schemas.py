"""Pydantic request/response schemas for the Web API."""

from __future__ import annotations

from pydantic import BaseModel


class ConstraintsModel(BaseModel):
    max_velocity: float
    max_acceleration: float


class SegmentRequest(BaseModel):
    """A path definition in ``.path`` file shape plus the constraints to apply."""

    waypoints: list[dict]
    markers: list[dict] | None = None
    constraints: list[ConstraintsModel]
    reversed: bool = False


class HealthResponse(BaseModel):
    status: str
    version: str


class MarkerRecord(BaseModel):
    name: str
    position: float


class SegmentSummary(BaseModel):
    index: int
    waypoint_count: int
    anchors: list[tuple[float, float]]
    markers: list[MarkerRecord]
    constraints: ConstraintsModel
    reversed: bool


class SegmentsResponse(BaseModel):
    name: str | None = None
    segment_count: int
    segments: list[SegmentSummary]


class PathsResponse(BaseModel):
    deploy_dir: str
    paths: list[str]
