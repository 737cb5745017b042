from fastapi import status


def test_health(client, settings):
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["status"] == "healthy"
    assert body["version"] == settings.APP_VERSION
