"""Pytest bootstrap: project imports, an in-memory database and a client."""

from pathlib import Path
import sys

# Ensure project root is on sys.path so `import mentorhub` works
PROJECT_ROOT = Path(__file__).resolve().parents[1]
project_root_str = str(PROJECT_ROOT)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from mentorhub import models  # noqa: F401 - register every table
from mentorhub.crud import availability as availability_crud
from mentorhub.crud import user as user_crud
from mentorhub.database import Base, get_db
from mentorhub.main import app

DEFAULT_PASSWORD = "pw"


@pytest.fixture
def engine():
    # One shared connection so the app and the test see the same database.
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_user(session_factory):
    """Create a user through the repository and return its id."""

    def _make(email, role, *, password=DEFAULT_PASSWORD, name=None, skills=(), goals=()):
        with session_factory() as db:
            user = user_crud.register_user(db, email, password, role)
            if name:
                user_crud.update_user_profile(db, user.id, name=name, skills=skills, goals=goals)
            return user.id

    return _make


@pytest.fixture
def add_availability(session_factory):
    def _add(mentor_id, day="Monday", start="09:00", end="11:00"):
        with session_factory() as db:
            return availability_crud.create_availability(db, mentor_id, day, start, end).id

    return _add


@pytest.fixture
def login():
    def _login(client, email, password=DEFAULT_PASSWORD):
        response = client.post(
            "/auth/login",
            data={"email": email, "password": password},
            follow_redirects=False,
        )
        assert response.status_code == 303, response.text
        return response

    return _login
