"""Tests for API endpoints."""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from polelabel.config import Settings
from polelabel.dependencies import get_settings
from polelabel.main import app
from tests.conftest import COLLINEAR, L_SHAPE, SQUARE_WITH_HOLE, UNIT_SQUARE


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == "0.1.0"


def test_polylabel_square():
    response = client.post("/api/polylabel", json={"polygon": UNIT_SQUARE, "precision": 0.01})
    assert response.status_code == 200
    data = response.json()
    assert data["position"] == pytest.approx([0.5, 0.5], abs=0.01)
    assert data["distance"] == pytest.approx(0.5, abs=0.01)
    assert data["probes"] > 0
    assert data["processing_time_ms"] >= 0


def test_polylabel_with_hole():
    response = client.post("/api/polylabel", json={"polygon": SQUARE_WITH_HOLE, "precision": 0.1})
    assert response.status_code == 200
    assert 0 < response.json()["distance"] < 5


def test_polylabel_degenerate():
    response = client.post("/api/polylabel", json={"polygon": COLLINEAR})
    assert response.status_code == 200
    data = response.json()
    assert data["position"] == [0, 0]
    assert data["distance"] == 0


def test_polylabel_debug_flag():
    response = client.post("/api/polylabel", json={"polygon": L_SHAPE, "debug": True})
    assert response.status_code == 200


def test_polylabel_negative_precision():
    response = client.post("/api/polylabel", json={"polygon": UNIT_SQUARE, "precision": -1})
    assert response.status_code == 400
    assert "precision" in response.json()["detail"]


def test_polylabel_empty_polygon():
    response = client.post("/api/polylabel", json={"polygon": []})
    assert response.status_code == 422


def test_polylabel_bad_point():
    response = client.post("/api/polylabel", json={"polygon": [[[0], [0, 1], [1, 1]]]})
    assert response.status_code == 422


def test_polylabel_ignores_altitude():
    with_z = [[[x, y, 5] for x, y in ring] for ring in SQUARE_WITH_HOLE]
    flat = client.post("/api/polylabel", json={"polygon": SQUARE_WITH_HOLE, "precision": 0.1}).json()
    data = client.post("/api/polylabel", json={"polygon": with_z, "precision": 0.1}).json()
    assert data["position"] == flat["position"]
    assert data["distance"] == flat["distance"]


@pytest.mark.parametrize("literal", ["NaN", "Infinity"])
def test_polylabel_non_finite_precision_rejected(literal):
    body = '{"polygon": ' + json.dumps(UNIT_SQUARE) + ', "precision": ' + literal + "}"
    response = client.post(
        "/api/polylabel", content=body, headers={"content-type": "application/json"}
    )
    assert response.status_code == 400


def test_polylabel_batch_non_finite_precision_rejected():
    body = '{"polygons": [' + json.dumps(UNIT_SQUARE) + '], "precision": NaN}'
    response = client.post(
        "/api/polylabel/batch", content=body, headers={"content-type": "application/json"}
    )
    assert response.status_code == 400


def test_polylabel_uses_settings_default_precision():
    app.dependency_overrides[get_settings] = lambda: Settings(default_precision=0.01)
    try:
        response = client.post("/api/polylabel", json={"polygon": L_SHAPE, "precision": 0})
    finally:
        app.dependency_overrides.clear()
    fine = client.post("/api/polylabel", json={"polygon": L_SHAPE, "precision": 0.01})
    assert response.json()["position"] == fine.json()["position"]
    assert response.json()["probes"] == fine.json()["probes"]


def test_polylabel_batch():
    response = client.post(
        "/api/polylabel/batch",
        json={"polygons": [UNIT_SQUARE, L_SHAPE], "precision": 0.01},
    )
    assert response.status_code == 200
    results = response.json()["results"]
    assert len(results) == 2
    assert results[0]["distance"] == pytest.approx(0.5, abs=0.01)
    assert results[1]["distance"] > 1


def test_polylabel_batch_rejects_empty_ring():
    response = client.post("/api/polylabel/batch", json={"polygons": [[[]]]})
    assert response.status_code == 422
