"""
E2E tests for household personas against the mock persistence server.

These tests require the mock persistence server to be running:
    uvicorn mock.persistence_server.main:app --port 8001

User personas:
- rent_crunch: Tight budget with rent due on the 12th, crisis expected
- steady: Comfortable salary, no crisis expected
- nobody: No stored rows at all, flat zero forecast
"""

import httpx
import pytest
from fastapi.testclient import TestClient
from oasis_forecast.config import settings


def _mock_server_up() -> bool:
    try:
        return httpx.get(f"{settings.persistence_api_base}/health", timeout=1.0).status_code == 200
    except httpx.HTTPError:
        return False


pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not _mock_server_up(), reason="mock persistence server not running"),
]


def _outlook(client: TestClient, user_id: str) -> dict:
    response = client.post(
        "/v1/outlook",
        json={"user_id": user_id, "as_of": "2025-11-08", "horizon_days": 30},
    )
    assert response.status_code == 200
    return response.json()


def test_rent_crunch_household(client: TestClient):
    """
    rent_crunch: $2400 income, $2263 expenses, EBT $296.55
    Expected: crisis two days out, stable score of 60
    """
    data = _outlook(client, "rent_crunch")

    assert data["health"]["score"] == 60
    assert data["health"]["days_until_crisis"] == 2
    assert data["points"][4]["note"] == "Rent Due -$850"
    assert data["points"][12]["note"] == "SNAP Refill +$277"


def test_steady_household(client: TestClient):
    """
    steady: $6000 salary, $2050 expenses, EBT $150
    Expected: no crisis, strong band
    """
    data = _outlook(client, "steady")

    assert data["crisis"] is None
    assert data["health"]["score"] == 90
    assert data["health"]["band"] == "strong"
    assert all(p["classification"] != "crisis" for p in data["points"])


def test_household_without_rows(client: TestClient):
    """
    nobody: persistence returns empty tables
    Expected: flat zero balance, critical score
    """
    data = _outlook(client, "nobody")

    assert data["health"]["score"] == 0
    assert data["crisis"] is None
    assert all(p["balance"] == 0 for p in data["points"])
