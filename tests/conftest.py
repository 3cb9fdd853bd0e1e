"""
Shared fixtures.

The environment has to be in place before anything under ``lifelogix`` is
imported: the JWT and Fernet secrets and the database URL are read at import
time.
"""

import os

from cryptography.fernet import Fernet

os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["FERNET_SECRET"] = Fernet.generate_key().decode()
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from lifelogix.main import app
from lifelogix.models.database import Base, get_db
from lifelogix.utils.jwt_utils import Identity

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register(client, username, password="pw1"):
    response = client.post("/api/auth/register", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["token"]


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice_headers(client):
    return bearer(register(client, "alice"))


@pytest.fixture
def bob_headers(client):
    return bearer(register(client, "bob"))


@pytest.fixture
def alice(db_session):
    """A stored user plus its identity, for service-level tests."""
    from lifelogix.models.user import User

    user = User(username="alice", password_hash="not-a-real-hash")
    db_session.add(user)
    db_session.commit()
    return Identity(user_id=user.id)


@pytest.fixture
def mallory(db_session):
    from lifelogix.models.user import User

    user = User(username="mallory", password_hash="not-a-real-hash")
    db_session.add(user)
    db_session.commit()
    return Identity(user_id=user.id)
