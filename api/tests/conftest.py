import os

# Settings require DATABASE_URL at import time; tests use their own in-memory engine
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from app import models  # noqa: F401
from app.core.database import get_session
from app.main import app
from app.services import language_service, translation_service


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture()
def client(engine):
    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def languages(session):
    """English, French and German, listed in that (name) order."""
    return [
        language_service.create_language(session, name="English", code="en"),
        language_service.create_language(session, name="French", code="fr"),
        language_service.create_language(session, name="German", code="de"),
    ]


@pytest.fixture()
def add_translation(session):
    def _add(group: str, key: str, language: str, value: str = "value"):
        return translation_service.create_translation(session, group, key, language, value)
    return _add
