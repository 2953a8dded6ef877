"""
Shared fixtures: in-memory SQLite database, a registered user and an API client.
"""
import os

# Must be set before travel_tracker builds its engine
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["ENVIRONMENT"] = "testing"
os.environ["LOG_FORMAT"] = "text"
os.environ["AUTO_CREATE_TABLES"] = "false"

import pytest
from fastapi.testclient import TestClient

import travel_tracker.models  # noqa: F401
from travel_tracker.core.db import Base, SessionLocal, engine
from travel_tracker.core.jwt import create_access_token
from travel_tracker.main import app
from travel_tracker.services.user_service import UserService

TEST_PASSWORD = "Passw0rd!"


@pytest.fixture(autouse=True)
def _database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def test_user(db_session):
    return UserService(db_session).register("traveler@example.com", TEST_PASSWORD, "Traveler")


@pytest.fixture
def other_user(db_session):
    return UserService(db_session).register("someone@example.com", TEST_PASSWORD, "Someone")


@pytest.fixture
def auth_headers(test_user):
    return {"Authorization": f"Bearer {create_access_token(str(test_user.id))}"}


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
