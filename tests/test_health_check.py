from django.db import DatabaseError


class TestHealthCheck:
    def test_health_check_returns_200(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data
        assert "services" in data

    def test_health_check_reports_database_status(self, client):
        response = client.get("/health")
        data = response.json()
        assert data["services"]["database"]["status"] == "up"
        assert "response_time_ms" in data["services"]["database"]

    def test_health_check_returns_503_when_database_down(self, client, monkeypatch):
        from django.db import connections

        def _fail():
            raise DatabaseError("connection refused")

        with monkeypatch.context() as patched:
            patched.setattr(connections["default"], "ensure_connection", _fail)
            response = client.get("/health")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "unhealthy"
        assert data["services"]["database"]["status"] == "down"

    def test_health_check_recovers_after_database_outage(self, client, monkeypatch):
        from django.db import connections

        def _fail():
            raise DatabaseError("connection refused")

        with monkeypatch.context() as patched:
            patched.setattr(connections["default"], "ensure_connection", _fail)
            assert client.get("/health").status_code == 503

        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["services"]["database"]["status"] == "up"
