"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("STORAGE_BACKEND", "sql")

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from plot451 import models  # noqa: E402, F401
from plot451.core import container  # noqa: E402
from plot451.database import Base, get_db  # noqa: E402
from plot451.infrastructure.column.repositories import (  # noqa: E402
    ColumnRepository,
    InMemoryColumnRepository,
)
from plot451.infrastructure.table.repositories import (  # noqa: E402
    InMemoryTableRepository,
    TableRepository,
)
from plot451.main import app  # noqa: E402

# Test database URL (in-memory SQLite shared across threads)
TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client backed by the SQL repositories."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def memory_client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client backed by fresh in-memory repositories."""

    def override_get_db() -> Generator[Session, None, None]:
        yield db_session

    container.in_memory_column_repository.reset()
    container.in_memory_table_repository.reset()
    container.config.storage_backend.from_value("memory")
    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    container.config.storage_backend.from_value("sql")
    container.in_memory_column_repository.reset()
    container.in_memory_table_repository.reset()


@pytest.fixture
def sql_column_repository(db_session: Session) -> ColumnRepository:
    return ColumnRepository(db_session)


@pytest.fixture
def sql_table_repository(db_session: Session) -> TableRepository:
    return TableRepository(db_session)


@pytest.fixture
def memory_column_repository() -> InMemoryColumnRepository:
    return InMemoryColumnRepository()


@pytest.fixture
def memory_table_repository() -> InMemoryTableRepository:
    return InMemoryTableRepository()


@pytest.fixture(params=["memory", "sql"])
def column_repository(
    request: pytest.FixtureRequest, db_session: Session
) -> ColumnRepository | InMemoryColumnRepository:
    """Both column repository implementations, for behaviour they must share."""
    if request.param == "memory":
        return InMemoryColumnRepository()
    return ColumnRepository(db_session)


@pytest.fixture
def table_repository(
    column_repository: ColumnRepository | InMemoryColumnRepository, db_session: Session
) -> TableRepository | InMemoryTableRepository:
    """Table repository matching the backend of the column_repository fixture."""
    if isinstance(column_repository, InMemoryColumnRepository):
        return InMemoryTableRepository()
    return TableRepository(db_session)


def create_test_directory(client: TestClient, name: str, parent_id: str | None = None) -> dict:
    response = client.post("/api/v1/directories", json={"name": name, "parent_id": parent_id})
    assert response.status_code == 201, response.text
    return response.json()


def create_test_column(
    client: TestClient, name: str, directory_id: str, values: list[float | None] | None = None
) -> dict:
    response = client.post(
        "/api/v1/columns",
        json={"name": name, "directory_id": directory_id, "values": values or []},
    )
    assert response.status_code == 201, response.text
    return response.json()


def create_test_table(client: TestClient, name: str, column_ids: list[str]) -> dict:
    response = client.post("/api/v1/tables", json={"name": name, "column_ids": column_ids})
    assert response.status_code == 201, response.text
    return response.json()
