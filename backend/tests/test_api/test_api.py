"""Tests for API endpoints."""

from __future__ import annotations

import json
import math

from fastapi.testclient import TestClient

from bouba.main import app
from tests.conftest import SEED


client = TestClient(app)

SQUARE_CHAIN = {
    "circles": [
        {"x": 0.0, "y": 0.0, "r": 50.0},
        {"x": 100.0, "y": 0.0, "r": 50.0},
        {"x": 100.0, "y": 100.0, "r": 50.0},
        {"x": 50.0, "y": 50.0, "r": math.hypot(50, 50) - 50},
    ],
    "angles": [0.0, math.pi / 2, -3 * math.pi / 4, -3 * math.pi / 4],
}


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_generate_ready_shape():
    response = client.post("/api/bouba", json={"seed": SEED, "circle_count": 4})
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["tries"] == 0
    assert data["circle_count"] == 4
    assert len(data["circles"]) == 4
    assert len(data["angles"]) == 4
    assert len(data["contour"]) == 49 + 50 + 49 + 50
    assert data["contour_is_simple"] is True
    assert data["bbox"]["width"] > 0
    assert data["color"] == "#fb4885"


def test_generate_is_reproducible():
    body = {"seed": "ooBouba", "circle_count": 5}
    first = client.post("/api/bouba", json=body).json()
    second = client.post("/api/bouba", json=body).json()
    for key in ("status", "attempts", "circles", "angles", "contour", "bbox"):
        assert first[key] == second[key]


def test_generate_conventions_share_chain():
    a = client.post("/api/bouba", json={"seed": SEED, "circle_count": 4, "convention": "a"}).json()
    b = client.post("/api/bouba", json={"seed": SEED, "circle_count": 4, "convention": "b"}).json()
    assert a["circles"] == b["circles"]
    assert a["contour"] != b["contour"]
    assert b["convention"] == "b"


def test_circle_count_drawn_from_seed():
    response = client.post("/api/bouba", json={"seed": SEED, "max_tries": 3})
    assert response.status_code == 200
    data = response.json()
    assert 10 <= data["circle_count"] < 50
    assert data["status"] in ("ready", "failed")
    if data["status"] == "failed":
        assert data["circles"] == []
        assert data["contour"] == []


def test_generate_rejects_bad_parameters():
    response = client.post("/api/bouba", json={"seed": 1, "circle_count": 2})
    assert response.status_code == 422
    response = client.post(
        "/api/bouba", json={"seed": 1, "circle_count": 5, "min_radius": 80, "max_radius": 40}
    )
    assert response.status_code == 422


def test_generate_stream():
    response = client.post("/api/bouba/stream", json={"seed": SEED, "circle_count": 4})
    assert response.status_code == 200
    events = [block for block in response.text.split("\n\n") if block.strip()]
    assert events[0].startswith("event: progress")
    assert events[-1].startswith("event: done")
    result = events[-2]
    assert result.startswith("event: result")
    payload = json.loads(result.split("data: ", 1)[1])
    assert payload["status"] == "ready"
    assert len(payload["circles"]) == 4
    # One progress event per attempt
    assert len(events) - 2 == payload["attempts"]


def test_trace_endpoint():
    a = client.post("/api/bouba/trace", json={**SQUARE_CHAIN, "convention": "a"}).json()
    b = client.post("/api/bouba/trace", json={**SQUARE_CHAIN, "convention": "b"}).json()
    assert len(a["contour"]) == 198
    assert a["contour_is_simple"] is True
    assert b["contour_is_simple"] is True
    assert a["contour"] != b["contour"]


def test_trace_rejects_missing_angles():
    body = {**SQUARE_CHAIN, "angles": SQUARE_CHAIN["angles"][:2]}
    response = client.post("/api/bouba/trace", json=body)
    assert response.status_code == 422


def test_generate_accepts_negative_seed():
    response = client.post("/api/bouba", json={"seed": -1, "circle_count": 4})
    assert response.status_code == 200
    assert response.json()["seed"] == -1
    again = client.post("/api/bouba", json={"seed": -1, "circle_count": 4}).json()
    assert again["circles"] == response.json()["circles"]


def test_generate_rejects_oversized_requests():
    response = client.post("/api/bouba", json={"seed": 1, "circle_count": 1_000_000})
    assert response.status_code == 422
    response = client.post("/api/bouba", json={"seed": 1, "circle_count": 4, "n_points": 1_000_000})
    assert response.status_code == 422
    response = client.post("/api/bouba", json={"seed": 1, "circle_count": 4, "max_tries": 10**9})
    assert response.status_code == 422


def test_trace_rejects_too_few_points():
    response = client.post("/api/bouba/trace", json={**SQUARE_CHAIN, "n_points": 1})
    assert response.status_code == 422
