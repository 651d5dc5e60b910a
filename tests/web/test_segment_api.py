"""Tests for POST /api/segment."""

from __future__ import annotations

from tests.web.conftest import make_path_definition

FAST = {"max_velocity": 4.0, "max_acceleration": 3.0}
SLOW = {"max_velocity": 2.0, "max_acceleration": 1.5}


def _request(**overrides) -> dict:
    body = make_path_definition()
    body["constraints"] = [FAST, SLOW]
    body.update(overrides)
    return body


def test_segment_splits_at_stop_point(client):
    resp = client.post("/api/segment", json=_request())
    assert resp.status_code == 200
    data = resp.json()
    assert data["segment_count"] == 2

    first, second = data["segments"]
    assert first["waypoint_count"] == 3
    assert first["anchors"][-1] == second["anchors"][0]
    assert [m["name"] for m in first["markers"]] == ["m1", "m2"]
    assert [(m["name"], m["position"]) for m in second["markers"]] == [("m2", 0.0), ("m3", 1.0)]
    assert first["constraints"] == FAST
    assert second["constraints"] == SLOW


def test_segment_pads_constraints_with_last(client):
    body = make_path_definition(n=7, stops=(2, 4))
    body["constraints"] = [FAST, SLOW]
    data = client.post("/api/segment", json=body).json()
    assert [s["constraints"] for s in data["segments"]] == [FAST, SLOW, SLOW]


def test_segment_reversed_flag(client):
    data = client.post("/api/segment", json=_request(reversed=True)).json()
    assert all(s["reversed"] for s in data["segments"])


def test_segment_without_markers(client):
    resp = client.post("/api/segment", json=_request(markers=None))
    assert resp.status_code == 200
    assert all(s["markers"] == [] for s in resp.json()["segments"])


def test_segment_empty_constraints_returns_422(client):
    resp = client.post("/api/segment", json=_request(constraints=[]))
    assert resp.status_code == 422


def test_segment_non_positive_constraint_returns_422(client):
    bad = {"max_velocity": 0.0, "max_acceleration": 1.0}
    resp = client.post("/api/segment", json=_request(constraints=[bad]))
    assert resp.status_code == 422


def test_segment_empty_waypoints_returns_422(client):
    resp = client.post("/api/segment", json=_request(waypoints=[], markers=[]))
    assert resp.status_code == 422


def test_segment_malformed_waypoint_returns_422(client):
    resp = client.post("/api/segment", json=_request(waypoints=[{"anchorPoint": None}]))
    assert resp.status_code == 422
    assert "anchorPoint" in resp.json()["detail"]
