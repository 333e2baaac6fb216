from __future__ import annotations

from sqlalchemy.exc import OperationalError


def test_health_runs_query_through_pool(client, db_session) -> None:
    response = client.get("/api/v1/system/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "ok"}
    assert db_session.executed == ["SELECT 1"]


def test_health_reports_unavailable_database(client, db_session) -> None:
    db_session.execute_error = OperationalError("SELECT 1", {}, Exception("connection refused"))

    response = client.get("/api/v1/system/health")

    assert response.status_code == 503
    assert response.json() == {"status": "degraded", "database": "unavailable"}
