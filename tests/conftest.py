"""Pytest fixtures and configuration for showcase tests."""

import uuid
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from showcase.config import Settings
from showcase.database.database import Base, build_engine, build_session_factory, init_db
from showcase.database.project_repository import ProjectRepository
from showcase.database.user_repository import UserRepository
from showcase.models.project import Project


# Use in-memory SQLite database for tests
TEST_DATABASE_URL = "sqlite:///:memory:"

AUTH_HEADERS = {"Authorization": "Bearer test-token"}


@pytest.fixture(scope="function")
def engine():
    """Fresh in-memory database per test."""
    engine = build_engine(TEST_DATABASE_URL)
    init_db(engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def db_session(engine):
    session = build_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def user_repository(db_session: Session):
    return UserRepository(db_session)


@pytest.fixture
def project_repository(db_session: Session):
    return ProjectRepository(db_session)


@pytest.fixture
def author_uid():
    return "author-uid-1"


@pytest.fixture
def sample_project_base(author_uid):
    """Base project data; override fields per test."""
    now = datetime.utcnow()
    return {
        "id": str(uuid.uuid4()),
        "title": "Test Project",
        "description": "A project used in tests",
        "tags": ["python"],
        "github_repo": "https://github.com/example/test-project",
        "live_demo": None,
        "author_uid": author_uid,
        "likes": 0,
        "liked_by": [],
        "created_at": now,
        "updated_at": now,
    }


@pytest.fixture
def sample_project(sample_project_base):
    return Project(**sample_project_base)


@pytest.fixture
def app(engine):
    from showcase.api.app import create_app
    return create_app(settings=Settings(), engine=engine)


@pytest.fixture
def test_client(app):
    """FastAPI test client bound to the per-test database."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def create_project(test_client, author_uid):
    """Create a project through the API and return its JSON."""
    def _create(**overrides):
        body = {
            "title": "Showcase",
            "description": "A showcased project",
            "githubRepo": "https://github.com/example/showcase",
            "firebaseUID": author_uid,
        }
        body.update(overrides)
        response = test_client.post("/api/projects", json=body, headers=AUTH_HEADERS)
        assert response.status_code == 201, response.text
        return response.json()["project"]
    return _create
