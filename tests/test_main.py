"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from lighthouse.main import app
from lighthouse.services import report_service


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def captured(monkeypatch):
    """Replaces the pipeline and records the requests it receives."""
    requests = []

    async def fake_report(request, api_key=None, client=None):
        requests.append(request)
        return f"Lighthouse {request.category} report for: {request.url}"

    monkeypatch.setattr(report_service, "get_lighthouse_report", fake_report)
    return requests


def test_read_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "message" in response.json()


def test_report_with_defaults(client, captured):
    response = client.post("/api/lighthouse-report", json={"url": "https://example.com"})

    assert response.status_code == 200
    assert response.json() == {"report": "Lighthouse performance report for: https://example.com"}
    request = captured[0]
    assert request.strategy == "mobile"
    assert request.category == "performance"
    assert request.timeout_ms == 60000


def test_report_with_options(client, captured):
    response = client.post(
        "/api/lighthouse-report",
        json={"url": "https://example.com", "strategy": "desktop", "category": "pwa", "timeout": 15000},
    )

    assert response.status_code == 200
    assert captured[0].strategy == "desktop"
    assert captured[0].category == "pwa"
    assert captured[0].timeout_ms == 15000


@pytest.mark.parametrize("body", [
    {"url": "example"},
    {"url": "https://example.com", "strategy": "tablet"},
    {"url": "https://example.com", "category": "speed"},
    {"url": "https://example.com", "timeout": 0},
    {},
])
def test_invalid_input_is_rejected(client, captured, body):
    response = client.post("/api/lighthouse-report", json=body)

    assert response.status_code == 422
    assert captured == []
