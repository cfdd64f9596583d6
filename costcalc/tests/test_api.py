"""
Tests for the calculator HTTP endpoints.
"""

import pytest

from costcalc.pricing.baseline import EKS_CLUSTER


def test_health(client):
    response = client.get("/api/calculator/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_list_regions(client):
    """Regions are listed with multipliers and the active region."""
    response = client.get("/api/calculator/regions")

    assert response.status_code == 200
    data = response.json()
    assert data["active_region"] == "eu-central-1"
    codes = {region["code"]: region["multiplier"] for region in data["regions"]}
    assert codes["us-east-1"] == 0.95


def test_get_prices(client):
    """Prices include raw values, display strings and the catalog."""
    data = client.get("/api/calculator/prices").json()

    assert data["prices"]["prices"][EKS_CLUSTER] == 73.0
    assert data["display"]["dataTransfer"] == "0.105"
    assert len(data["catalog"]) == len(data["prices"]["prices"])


def test_apply_region(client, price_table):
    """Region switch re-levels the shared table."""
    response = client.post("/api/calculator/prices/region", json={"region": "ap-southeast-1"})

    assert response.status_code == 200
    assert price_table.region == "ap-southeast-1"
    assert response.json()["prices"]["prices"][EKS_CLUSTER] == pytest.approx(73 * 1.08)


def test_unknown_region_is_not_an_error(client):
    response = client.post("/api/calculator/prices/region", json={"region": "nowhere-1"})

    assert response.status_code == 200
    assert response.json()["prices"]["multiplier"] == 1.0


def test_set_price_override(client, price_table):
    """Override is stored and listed as overridden."""
    response = client.put(f"/api/calculator/prices/{EKS_CLUSTER}", json={"value": "99.5"})

    assert response.status_code == 200
    data = response.json()
    assert data["validation_failure"] is None
    assert EKS_CLUSTER in data["prices"]["overridden_keys"]
    assert price_table.snapshot()[EKS_CLUSTER] == 99.5


def test_set_price_garbage_reports_failure(client):
    """Invalid price is stored as 0 and reported, not rejected."""
    response = client.put(f"/api/calculator/prices/{EKS_CLUSTER}", json={"value": "twelve"})

    assert response.status_code == 200
    data = response.json()
    assert data["prices"]["prices"][EKS_CLUSTER] == 0.0
    assert data["validation_failure"]["raw_value"] == "twelve"
    assert len(data["validation_failures"]) == 1


def test_set_unknown_price_key_returns_404(client):
    response = client.put("/api/calculator/prices/eks.unknown", json={"value": 1})

    assert response.status_code == 404
    assert "detail" in response.json()


def test_reset_prices(client, price_table):
    price_table.apply_region("us-east-1")
    price_table.set_price(EKS_CLUSTER, 1)

    response = client.post("/api/calculator/prices/reset")

    assert response.status_code == 200
    assert response.json()["prices"]["overridden_keys"] == []
    assert price_table.region == "eu-central-1"


def test_calculate(client):
    """Calculation returns the breakdown and formatted text."""
    response = client.post("/api/calculator/calculate", json={
        "daily_users": 1000,
        "peak_tps": "500",
        "data_volume_gb": 100,
        "environment": "production",
    })

    assert response.status_code == 200
    data = response.json()
    assert data["breakdown"]["grand_total"] == pytest.approx(3041.5)
    assert data["breakdown"]["decisions"]["node_tier"] == "small"
    assert "Overall Total Cost" in data["text"]


def test_calculate_with_garbage_input(client):
    """Garbage parameters are treated as 0 instead of failing."""
    response = client.post("/api/calculator/calculate", json={
        "daily_users": "lots",
        "peak_tps": -50,
        "environment": "prod-ish",
    })

    assert response.status_code == 200
    parameters = response.json()["breakdown"]["parameters"]
    assert parameters == {
        "daily_users": 0,
        "peak_tps": 0,
        "data_volume_gb": 0.0,
        "environment": "dev",
    }


def test_calculate_sees_prior_override(client):
    """A recalculation observes an override made before it."""
    client.put(f"/api/calculator/prices/{EKS_CLUSTER}", json={"value": 0})
    data = client.post("/api/calculator/calculate", json={}).json()

    cluster = next(i for i in data["breakdown"]["line_items"] if i["key"] == "eks.cluster")
    assert cluster["subtotal"] == 0.0


def test_compare(client, price_table):
    """Comparison leaves the live table alone."""
    response = client.post("/api/calculator/calculate/compare", json={
        "base": {"daily_users": 1000, "peak_tps": 500, "environment": "production"},
        "scenario": {"daily_users": 1000, "peak_tps": 500, "environment": "production"},
        "scenario_region": "us-east-1",
    })

    assert response.status_code == 200
    comparison = response.json()["comparison"]
    assert comparison["region_changed"] is True
    assert comparison["total_delta"] < 0
    assert price_table.region == "eu-central-1"


def test_oversized_body_rejected(client):
    """Bodies over the configured limit get 413."""
    response = client.post(
        "/api/calculator/calculate",
        json={"environment": "x" * 100_000},
    )

    assert response.status_code == 413
    assert response.json()["error"] == "request_too_large"
