import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["METRICS_ENABLED"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from main import create_application
from core.config import get_settings
from dependencies import get_engine, create_access_token
from models import User


@pytest.fixture(scope="session")
def settings():
    return get_settings()

@pytest.fixture
def test_db_engine():
    engine = get_engine()
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)

@pytest.fixture
def db_session(test_db_engine):
    with Session(test_db_engine) as session:
        yield session

@pytest.fixture
def client(db_session):
    app = create_application()
    with TestClient(app) as test_client:
        yield test_client

@pytest.fixture
def make_user(db_session):
    def _make_user(name="Test User", email="test@example.com", avatar="avatar.png"):
        user = User(name=name, email=email, avatar=avatar)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user
    return _make_user

@pytest.fixture
def user(make_user):
    return make_user()

@pytest.fixture
def other_user(make_user):
    return make_user(name="Other User", email="other@example.com", avatar="other.png")

@pytest.fixture
def header_for():
    def _header_for(user_id):
        return {"Authorization": f"Bearer {create_access_token({'sub': user_id})}"}
    return _header_for

@pytest.fixture
def auth_header(user, header_for):
    return header_for(user.id)

@pytest.fixture
def other_auth_header(other_user, header_for):
    return header_for(other_user.id)

@pytest.fixture
def client_no_raise(db_session):
    """Client that returns 500 responses instead of re-raising server errors"""
    app = create_application()
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
