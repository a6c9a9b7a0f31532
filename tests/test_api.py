from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from treeshop.main import create_app

NOW = datetime(2026, 4, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def client(monkeypatch):
    monkeypatch.delenv("API_PREFIX", raising=False)
    monkeypatch.delenv("RATE_TABLE_PATH", raising=False)
    return TestClient(create_app())


def test_health(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_list_packages(client):
    response = client.get("/api/v1/pricing/packages")
    assert response.status_code == 200
    assert [row["id"] for row in response.json()] == ["fm-6dbh", "fm-8dbh", "fm-12dbh"]


def test_forestry_quote(client):
    response = client.post(
        "/api/v1/pricing/quote",
        json={"service_type": "forestry-mulching", "acreage": 3, "package_id": "fm-8dbh"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 6600
    assert body["deposit"] == 1650
    assert body["package_name"] == 'Forestry Mulching- 8"DBH Package'
    assert body["breakdown"][0]["unit"] == "acres"
    assert "(3 Acre)" in body["scope_of_work"]


def test_land_clearing_quote(client):
    response = client.post(
        "/api/v1/pricing/quote",
        json={"service_type": "land-clearing", "acreage": 1.0, "include_hauling": True},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["labor_cost"] == 36000
    assert body["hauling_cost"] == 1955
    assert body["total"] == 37955
    assert body["deposit"] == 9489
    assert [line["item"] for line in body["breakdown"]] == ["Land Clearing & Grubbing", "Debris Hauling"]


def test_quote_unknown_package_is_404(client):
    response = client.post(
        "/api/v1/pricing/quote",
        json={"service_type": "forestry-mulching", "acreage": 1, "package_id": "fm-99dbh"},
    )
    assert response.status_code == 404
    assert "fm-99dbh" in response.json()["detail"]


@pytest.mark.parametrize(
    "payload",
    [
        {"service_type": "forestry-mulching", "acreage": 1},
        {"service_type": "land-clearing", "acreage": 0},
        {"service_type": "tree-removal", "acreage": 1},
    ],
)
def test_quote_validation_errors(client, payload):
    response = client.post("/api/v1/pricing/quote", json=payload)
    assert response.status_code == 422


def test_payment_schedule(client):
    response = client.post("/api/v1/pricing/payment-schedule", json={"total": 37955, "issued_on": "2026-04-01"})
    assert response.status_code == 200
    body = response.json()
    assert body["deposit"] == 9489
    assert body["balance"] == 28466
    assert body["valid_until"] == "2026-05-31"


def test_score_lead(client):
    lead = {
        "created_at": (NOW - timedelta(minutes=30)).isoformat(),
        "email": "owner@example.com",
        "phone": "386-555-0100",
        "acreage": 6,
        "selected_package": "fm-12dbh",
        "estimated_total": 55000,
        "notes": "Back lot",
        "source": "referral",
    }
    response = client.post("/api/v1/leads/score", json={"lead": lead, "now": NOW.isoformat()})
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 85
    assert body["grade"] == "A"
    assert body["factors"]["project_quality"] == 35
    assert body["recommendations"][0] == "⭐ Premium lead - prioritize!"


def test_rank_leads(client):
    leads = [
        {"created_at": (NOW - timedelta(days=9)).isoformat(), "source": "social"},
        {"created_at": (NOW - timedelta(minutes=5)).isoformat(), "phone": "386-555-0100", "source": "referral"},
    ]
    response = client.post("/api/v1/leads/rank", json={"leads": leads, "now": NOW.isoformat()})
    assert response.status_code == 200
    body = response.json()
    assert [row["position"] for row in body] == [1, 2]
    assert body[0]["lead"]["source"] == "referral"
    assert body[0]["score"]["total"] > body[1]["score"]["total"]
