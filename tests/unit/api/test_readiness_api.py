"""
API tests for the readiness endpoints.
"""

import datetime

TODAY = datetime.date.today()


def _day(n: int) -> str:
    return (TODAY - datetime.timedelta(days=n)).isoformat()


def _seed(client, values):
    for n, hrv in values:
        client.put(f"/api/v1/metrics/{_day(n)}", json={"hrv": hrv})


def test_root_endpoints(client):
    assert client.get("/").json()["status"] == "healthy"
    assert client.get("/health").json()["status"] == "healthy"
    assert "version" in client.get("/info").json()


class TestToday:

    def test_without_data(self, client):
        body = client.get("/api/v1/readiness/today").json()
        assert body["date"] == TODAY.isoformat()
        assert body["score"] == 0.0
        assert body["category"] == "unknown"

    def test_with_history(self, client):
        _seed(client, [(2, 50.0), (1, 50.0), (0, 45.0)])

        body = client.get("/api/v1/readiness/today").json()

        assert body["score"] == 30.0
        assert body["category"] == "low"
        assert body["hrv_deviation_percent"] == -10.0
        assert body["description"]

        stored = client.get(f"/api/v1/readiness/{TODAY.isoformat()}")
        assert stored.status_code == 200
        assert stored.json()["score"] == 30.0


class TestHistory:

    def test_missing_score(self, client):
        assert client.get(f"/api/v1/readiness/{_day(5)}").status_code == 404

    def test_recalculate_and_list(self, client):
        _seed(client, [(3, 50.0), (2, 50.0), (1, 50.0), (0, 50.0)])

        response = client.post("/api/v1/readiness/recalculate", json={"limit_days": 30})
        assert response.status_code == 202

        status = client.get("/api/v1/readiness/recalculate/status").json()
        assert status["status"] == "completed"
        assert status["total"] == 4

        scores = client.get("/api/v1/readiness", params={"days": 7}).json()
        assert [s["date"] for s in scores] == [_day(3), _day(2), _day(1), _day(0)]
        assert [s["category"] for s in scores] == ["unknown", "unknown", "optimal", "optimal"]

        ranged = client.get("/api/v1/readiness", params={"start": _day(1), "end": _day(0)}).json()
        assert len(ranged) == 2

    def test_recalculate_without_body(self, client):
        assert client.post("/api/v1/readiness/recalculate").status_code == 202

    def test_cancel_when_idle(self, client):
        assert client.post("/api/v1/readiness/recalculate/cancel").json()["status"] == "idle"


class TestBaselinesAndPurge:

    def test_baselines(self, client):
        _seed(client, [(2, 40.0), (1, 60.0)])

        body = client.get("/api/v1/readiness/baselines").json()

        assert body["as_of"] == TODAY.isoformat()
        assert body["hrv"]["value"] == 50.0
        assert body["hrv"]["stability"] == 0.2
        assert body["sleep"]["value"] == 0.0

    def test_purge(self, client):
        _seed(client, [(100, 50.0), (10, 50.0)])

        body = client.post("/api/v1/readiness/purge", params={"retention_days": 30}).json()

        assert body["metrics_deleted"] == 1
        assert body["cutoff"] == _day(30)
