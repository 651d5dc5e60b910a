"""Shared fixtures for web tests."""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from autopath.config import PlannerSettings
from autopath.web import app as app_module
from autopath.web.app import app


@pytest.fixture
def client():
    """FastAPI test client."""
    with TestClient(app) as c:
        yield c


def make_path_definition(n: int = 5, stops: tuple[int, ...] = (2,)) -> dict:
    """Build a path definition dict in ``.path`` file shape."""
    waypoints = []
    for i in range(n):
        waypoints.append({
            "anchorPoint": {"x": float(i), "y": 1.0},
            "prevControl": None if i == 0 else {"x": i - 0.5, "y": 1.0},
            "nextControl": None if i == n - 1 else {"x": i + 0.5, "y": 1.0},
            "holonomicAngle": 0.0,
            "isReversal": False,
            "isStopPoint": i in stops,
            "velOverride": None,
        })
    return {
        "waypoints": waypoints,
        "markers": [
            {"name": "m1", "position": 1.5},
            {"name": "m2", "position": 2.0},
            {"name": "m3", "position": 3.0},
        ],
    }


@pytest.fixture
def deploy_dir(tmp_path, monkeypatch):
    """Configured deploy directory holding ``TwoPiece.path``."""
    monkeypatch.setattr(app_module, "_SETTINGS", PlannerSettings(deploy_dir=str(tmp_path)))
    folder = tmp_path / "pathplanner"
    folder.mkdir()
    (folder / "TwoPiece.path").write_text(json.dumps(make_path_definition()), encoding="utf-8")
    return tmp_path
