from datetime import timedelta
from fastapi import status
import jwt

from dependencies import create_access_token


def test_missing_token(client):
    response = client.get("/posts")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {"msg": "No token, authorization denied"}


def test_invalid_token(client):
    response = client.get("/posts", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {"msg": "Token is not valid"}


def test_token_signed_with_other_key(client, user):
    token = jwt.encode({"sub": user.id}, "not-the-secret", algorithm="HS256")
    response = client.get("/posts", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_expired_token(client, user):
    token = create_access_token({"sub": user.id}, expires_delta=timedelta(minutes=-5))
    response = client.get("/posts", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {"msg": "Token is not valid"}


def test_token_without_subject(client):
    token = create_access_token({"role": "nobody"})
    response = client.get("/posts", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_token_in_custom_header(client, user, settings):
    token = create_access_token({"sub": user.id})
    response = client.get("/posts", headers={settings.AUTH_HEADER_NAME: token})
    assert response.status_code == status.HTTP_200_OK


def test_token_in_cookie(client, user, settings):
    token = create_access_token({"sub": user.id})
    client.cookies.set(settings.AUTH_COOKIE_NAME, token)
    response = client.get("/posts")
    assert response.status_code == status.HTTP_200_OK


def test_identity_checked_before_validation(client):
    response = client.post("/posts", json={"text": ""})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
