"""Tests for API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from sankeysight.main import app
from tests.conftest import PASSTHROUGH, PLANT

client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_sankey_plant(plant):
    response = client.post("/api/sankey", json=plant)
    assert response.status_code == 200
    data = response.json()
    assert data["output"] == pytest.approx(89.2)
    assert data["band_count"] == 2
    assert len([f for f in data["fills"] if f["role"] == "loss_arc"]) == 3
    assert len([s for s in data["strokes"] if s["role"] == "separator"]) == 1
    assert data["viewport"]["xmin"] == pytest.approx(-0.15)


def test_sankey_without_losses():
    response = client.post("/api/sankey", json=PASSTHROUGH)
    assert response.status_code == 200
    assert response.json()["output"] == pytest.approx(50.0)


def test_unbalanced_flow_is_unprocessable(plant):
    payload = dict(plant, inputs=[10.0], losses=[15.0], labels=["in", "loss", "out"])
    response = client.post("/api/sankey", json=payload)
    assert response.status_code == 422
    assert "losses exceed inputs" in response.json()["detail"]


def test_negative_input_is_unprocessable():
    payload = dict(PASSTHROUGH, inputs=[-1.0])
    response = client.post("/api/sankey", json=payload)
    assert response.status_code == 422
    assert "negative" in response.json()["detail"]


def test_colour_out_of_range_rejected():
    payload = dict(PASSTHROUGH, colours=[(1.5, 0.0, 0.0)])
    response = client.post("/api/sankey", json=payload)
    assert response.status_code == 422


def test_svg_endpoint():
    response = client.post("/api/sankey/svg", json=PLANT)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert "<polygon" in response.text


def test_png_endpoint():
    response = client.post("/api/sankey/png", json=PASSTHROUGH)
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content[:4] == b"\x89PNG"
