from fastapi import status
from fastapi.testclient import TestClient

from main import create_application


def test_metrics_exposed(db_session, settings, monkeypatch):
    monkeypatch.setattr(settings, "METRICS_ENABLED", True)
    app = create_application()
    with TestClient(app) as client:
        client.get("/health")
        response = client.get("/metrics")

    assert response.status_code == status.HTTP_200_OK
    assert response.headers["content-type"].startswith("text/plain")
    assert "# HELP" in response.text
    assert "http_request" in response.text
