"""
Pytest configuration and fixtures.

Server tests run against an in-memory SQLite database shared through a
StaticPool, with the image host and the LinkedIn scraper replaced by fakes.
Client tests use the in-process fake API wrappers from tests/fakes.py.
"""

from __future__ import annotations

import os

# Must be set before any server module reads settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"

from typing import Dict, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from core.database import get_db
from core.dependencies import get_image_host, get_profile_scraper
from main import app
from models import Base, User
from tests.fakes import FakeImageHost, FakeScraper


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "api: HTTP-level tests through TestClient")
    config.addinivalue_line("markers", "ownership: Cross-owner access tests")
    config.addinivalue_line("markers", "store: Client state slice tests")


# =============================================================================
# Database
# =============================================================================


@pytest.fixture()
def engine():
    db_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=db_engine)
    yield db_engine
    Base.metadata.drop_all(bind=db_engine)
    db_engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db_session(session_factory) -> Iterator[Session]:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


def make_user(db: Session, email: str, username: str) -> User:
    user = User(email=email, username=username, password_hash="not-a-real-hash")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture()
def owner_a(db_session) -> str:
    return make_user(db_session, "a@x.com", "alice").id


@pytest.fixture()
def owner_b(db_session) -> str:
    return make_user(db_session, "b@x.com", "bob").id


# =============================================================================
# HTTP
# =============================================================================


@pytest.fixture()
def image_host() -> FakeImageHost:
    return FakeImageHost()


@pytest.fixture()
def scraper() -> FakeScraper:
    return FakeScraper()


@pytest.fixture()
def client(session_factory, image_host, scraper) -> Iterator[TestClient]:
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_image_host] = lambda: image_host
    app.dependency_overrides[get_profile_scraper] = lambda: scraper
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def register(client: TestClient, email: str, username: str, password: str = "secret1") -> Dict:
    response = client.post("/auth/register", json={"email": email, "username": username, "password": password})
    assert response.status_code == 201, response.text
    return response.json()


def login_headers(client: TestClient, email: str, password: str = "secret1") -> Dict[str, str]:
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture()
def alice(client) -> Dict[str, str]:
    """Auth headers for a registered user alice."""
    register(client, "a@x.com", "alice")
    return login_headers(client, "a@x.com")


@pytest.fixture()
def bob(client) -> Dict[str, str]:
    """Auth headers for a registered user bob."""
    register(client, "b@x.com", "bob")
    return login_headers(client, "b@x.com")
