"""Test fixtures — in-memory SQLite + FastAPI test client.

Every test gets a fresh database; get_db is overridden so that the
request-scoped sessions and the test's own session share one connection.
"""

import os

# Keep tests off any real PostgreSQL configured through .env files
os.environ["DATABASE__URL"] = "sqlite://"
os.environ["DATABASE__CREATE_SCHEMA"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from msstudy.core.database_sync import get_db, init_db
from msstudy.features.demo.models import Demo
from msstudy.features.demo.repository import DemoRepository
from msstudy.features.demo.service import DemoService
from msstudy.main import app

DEFAULT_DEMOFIELD = "AAAAAAAAAA"
UPDATED_DEMOFIELD = "BBBBBBBBBB"


@pytest.fixture
def test_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    return sessionmaker(
        bind=test_engine, class_=Session, autoflush=False, expire_on_commit=False,
    )


@pytest.fixture
def test_db(test_session_factory):
    with test_session_factory() as session:
        yield session


@pytest.fixture
def repository(test_db):
    return DemoRepository(test_db)


@pytest.fixture
def service(repository):
    return DemoService(repository)


@pytest.fixture
def demo():
    return Demo(demofield=DEFAULT_DEMOFIELD)


@pytest.fixture
def client(test_session_factory):
    """FastAPI test client with the DB dependency overridden."""

    def override_get_db():
        with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
