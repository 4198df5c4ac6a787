"""
Tests for health check and metrics endpoints.
"""


class TestHealthCheck:

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["timestamp"].endswith("Z")

    def test_health_check_with_database(self, client):
        response = client.get("/health/detailed")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["checks"]["database"]["status"] == "healthy"


class TestMetrics:

    def test_metrics_counts(self, client, job_ids):
        response = client.get("/metrics")

        assert response.status_code == 200
        assert response.json()["metrics"] == {
            "total_companies": 3,
            "total_jobs": 4,
            "jobs_with_equity": 2,
        }
