"""Health endpoints, middleware and error body shape."""
import logging
from datetime import datetime, timedelta, timezone

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tuf_portal.main import app
from tuf_portal.middleware.rate_limit import RateLimitMiddleware


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["environment"] == "test"


def test_detailed_health_reports_services(client):
    data = client.get("/health/detailed").json()
    assert data["services"]["database"]["status"] == "healthy"
    assert data["services"]["identity_provider"]["status"] in ("configured", "not_configured")


def test_probes(client):
    assert client.get("/live").json()["status"] == "alive"
    assert client.get("/ready").json()["status"] == "ready"


def test_root(client):
    data = client.get("/").json()
    assert data["health_check"] == "/health"


def test_request_id_is_echoed(client):
    response = client.get("/api/clubs", headers={"X-Request-ID": "abc123"})
    assert response.headers["X-Request-ID"] == "abc123"
    assert response.headers["X-Response-Time"].endswith("ms")


def test_error_body_carries_correlation_id(client):
    response = client.get("/api/notes/missing", headers={"X-Request-ID": "req-42"})
    assert response.status_code == 404
    assert response.json() == {"message": "Note not found", "correlation_id": "req-42"}


def test_unknown_route_uses_message_shape(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert "message" in response.json()


def test_unhandled_error_is_500(monkeypatch):
    def boom(db, filters):
        raise RuntimeError("store unavailable")

    monkeypatch.setattr("tuf_portal.services.queries.list_clubs", boom)
    response = TestClient(app, raise_server_exceptions=False).get("/api/clubs")
    assert response.status_code == 500
    assert response.json()["message"] == "Internal server error"


def test_create_is_audited(client, as_student, caplog):
    audit_logger = logging.getLogger("tuf_portal.audit")
    audit_logger.addHandler(caplog.handler)
    try:
        with caplog.at_level(logging.INFO, logger="tuf_portal.audit"):
            client.post("/api/clubs", json={"name": "SSN Photo Club", "category": "Cultural"})
    finally:
        audit_logger.removeHandler(caplog.handler)
    assert any("AUDIT" in r.getMessage() and "clubs.create" in r.getMessage() for r in caplog.records)


@pytest.fixture
def limited_client():
    limited = FastAPI()
    limited.add_middleware(RateLimitMiddleware, calls_per_minute=2)

    @limited.get("/ping")
    def ping():
        return {"ok": True}

    @limited.get("/health")
    def health():
        return {"status": "healthy"}

    return TestClient(limited)


def test_rate_limit_returns_429(limited_client):
    assert limited_client.get("/ping").status_code == 200
    assert limited_client.get("/ping").status_code == 200
    response = limited_client.get("/ping")
    assert response.status_code == 429
    assert "message" in response.json()


def test_rate_limit_exempts_health(limited_client):
    for _ in range(5):
        assert limited_client.get("/health").status_code == 200


def test_rate_limit_forgets_idle_clients():
    limiter = RateLimitMiddleware(FastAPI(), calls_per_minute=2)
    long_ago = datetime.now(timezone.utc) - timedelta(minutes=5)
    limiter._hits = {f"10.0.0.{n}": [long_ago] for n in range(50)}
    limiter._last_sweep = long_ago

    assert limiter._allow("10.0.1.1")
    assert list(limiter._hits) == ["10.0.1.1"]
