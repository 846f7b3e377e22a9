"""
Pytest configuration for the Automobile API.

Provides fixtures for:
- An in-memory SQLite store shared by every connection of a test
- A Domain Service bound to that store
- A TestClient whose request sessions point at the same store
"""

from __future__ import annotations

import os

# Keep the application engine off PostgreSQL while modules are imported
os.environ.setdefault("DATABASE_URL", "sqlite://")

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from automobile_api.core.database import Base, get_db
from automobile_api.main import app
from automobile_api.models import automobile_model  # noqa: F401
from automobile_api.services.automobile_service import AutomobileService, get_automobile_service


@pytest.fixture(scope="function")
def engine() -> Generator[Engine, None, None]:
    """
    Fresh in-memory database per test with the automobiles table created.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session(session_factory: sessionmaker) -> Generator[Session, None, None]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def service(db_session: Session) -> AutomobileService:
    return AutomobileService(db_session)


@pytest.fixture(scope="function")
def client(session_factory: sessionmaker) -> Generator[TestClient, None, None]:
    """
    TestClient with get_db overridden, so REST and GraphQL share one store.

    Startup hooks are not run; the engine fixture already created the table.
    """

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


class FailingService:
    """Stands in for a service whose store connection is gone."""

    def _fail(self, *args, **kwargs):
        raise OperationalError("SELECT * FROM automobiles", {}, Exception("connection refused"))

    list_all = get_by_id = create = update = delete_by_id = _fail


@pytest.fixture(scope="function")
def failing_client(client: TestClient) -> TestClient:
    """Client whose every store call raises OperationalError('connection refused')."""
    app.dependency_overrides[get_automobile_service] = FailingService
    return client
