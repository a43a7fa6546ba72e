"""API tests: health and root endpoints."""
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

pytestmark = pytest.mark.api


def test_api_health_returns_200(client):
    """GET /api/health returns 200, service info and database status."""
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "service": "yard-fleet-api", "database": "ok"}


def test_api_health_degraded_when_database_fails(client, db_session):
    """A failing SELECT 1 reports degraded instead of erroring."""
    with patch.object(db_session, "execute", side_effect=OperationalError("SELECT 1", {}, Exception("down"))):
        r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"status": "degraded", "service": "yard-fleet-api", "database": "unavailable"}


def test_root_returns_info(client):
    """GET / returns service info and docs link."""
    r = client.get("/")
    assert r.status_code == 200
    data = r.json()
    assert data["docs"] == "/docs"
    assert data["health"] == "/api/health"
