"""
API tests for the settings endpoints.
"""

import datetime

TODAY = datetime.date.today()


def test_get_defaults(client):
    body = client.get("/api/v1/settings").json()
    assert body["baseline_period_days"] == 7
    assert body["minimum_days_for_baseline"] == 2
    assert body["suggested_minimum_days_for_baseline"] == 3
    assert body["use_rhr_adjustment"] is False


def test_period_change_schedules_recalculation(client):
    for n in (3, 2, 1, 0):
        day = (TODAY - datetime.timedelta(days=n)).isoformat()
        client.put(f"/api/v1/metrics/{day}", json={"hrv": 50.0})

    response = client.put("/api/v1/settings", json={"baseline_period_days": 14})

    assert response.status_code == 200
    body = response.json()
    assert body["settings"]["baseline_period_days"] == 14
    assert body["settings"]["suggested_minimum_days_for_baseline"] == 5
    assert body["changes"] == ["baseline_period"]
    assert body["recalculation_scheduled"] is True

    status = client.get("/api/v1/readiness/recalculate/status").json()
    assert status["status"] == "completed"
    score = client.get(f"/api/v1/readiness/{TODAY.isoformat()}").json()
    assert score["baseline_period_days"] == 14


def test_retention_change_does_not_recalculate(client):
    body = client.put("/api/v1/settings", json={"retention_days": 90}).json()

    assert body["changes"] == ["retention"]
    assert body["recalculation_scheduled"] is False
    assert client.get("/api/v1/readiness/recalculate/status").json()["status"] == "idle"


def test_rejects_invalid_values(client):
    assert client.put("/api/v1/settings", json={"baseline_period_days": 10}).status_code == 422
    assert client.put("/api/v1/settings", json={"minimum_days_for_baseline": 0}).status_code == 422
