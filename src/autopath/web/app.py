"""FastAPI Web application for previewing path-group segmentation."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException

from autopath.config import PlannerSettings
from autopath.loader.errors import PathFormatError, PathLoadError
from autopath.path.models import PathSegment
from autopath.web.schemas import (
    ConstraintsModel,
    HealthResponse,
    MarkerRecord,
    PathsResponse,
    SegmentRequest,
    SegmentsResponse,
    SegmentSummary,
)
from autopath.web.service import SegmentationService

load_dotenv()  # loads .env from project root; must run before env vars are consumed

_logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

VERSION = "0.1.0"

app = FastAPI(title="autopath", version=VERSION)

_SETTINGS = PlannerSettings.from_env()


def _resolve_deploy_dir(requested: str | None) -> str:
    """Resolve a requested deploy directory against the configured one.

    Relative values are taken relative to the configured deploy directory.
    Anything that resolves outside it is rejected with 403.
    """
    root = Path(_SETTINGS.deploy_dir).resolve()
    if not requested:
        return str(root)
    target = (root / requested).resolve()
    if target != root and root not in target.parents:
        _logger.warning("Rejected deploy_dir %r outside %s", requested, root)
        raise HTTPException(
            status_code=403, detail="deploy_dir must be inside the configured deploy directory"
        )
    return str(target)


def _service(deploy_dir: str) -> SegmentationService:
    return SegmentationService(replace(_SETTINGS, deploy_dir=deploy_dir))


def _summaries(segments: list[PathSegment]) -> list[SegmentSummary]:
    return [
        SegmentSummary(
            index=i,
            waypoint_count=len(seg.waypoints),
            anchors=[(w.anchor_point.x, w.anchor_point.y) for w in seg.waypoints],
            markers=[
                MarkerRecord(name=m.name, position=m.waypoint_relative_pos)
                for m in seg.markers
            ],
            constraints=ConstraintsModel(
                max_velocity=seg.constraints.max_velocity,
                max_acceleration=seg.constraints.max_acceleration,
            ),
            reversed=seg.reversed,
        )
        for i, seg in enumerate(segments)
    ]


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=VERSION)


@app.post("/api/segment", response_model=SegmentsResponse)
def segment(req: SegmentRequest) -> SegmentsResponse:
    """Split an inline path definition at its stop points."""
    try:
        segments = _service(_SETTINGS.deploy_dir).segment_definition(req)
    except (PathFormatError, ValueError) as exc:
        _logger.warning("Rejected segment request: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return SegmentsResponse(segment_count=len(segments), segments=_summaries(segments))


@app.get("/api/paths", response_model=PathsResponse)
def list_paths(deploy_dir: str | None = None) -> PathsResponse:
    """List the path files available in the deploy directory."""
    resolved = _resolve_deploy_dir(deploy_dir)
    return PathsResponse(deploy_dir=resolved, paths=_service(resolved).list_paths())


@app.get("/api/paths/{name}/segments", response_model=SegmentsResponse)
def path_segments(
    name: str,
    max_velocity: float,
    max_acceleration: float,
    reversed: bool = False,
    deploy_dir: str | None = None,
) -> SegmentsResponse:
    """Split a deployed path with one constraint applied to every segment."""
    constraints = [ConstraintsModel(max_velocity=max_velocity, max_acceleration=max_acceleration)]
    svc = _service(_resolve_deploy_dir(deploy_dir))
    try:
        segments = svc.segment_deployed(name, constraints, reversed)
    except (PathFormatError, ValueError) as exc:
        _logger.warning("Rejected path %r: %s", name, exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except PathLoadError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    return SegmentsResponse(name=name, segment_count=len(segments), segments=_summaries(segments))
