"""Shared fixtures for the leaderboard API tests."""

from __future__ import annotations

from typing import Iterator, List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from leaderboard_service.app import create_app
from leaderboard_service.core import Settings, create_database_engine
from leaderboard_service.models import UserScore
from leaderboard_service.services import (
    InMemoryLeaderboardRepository,
    SQLLeaderboardRepository,
    StorageError,
)

ALLOWED_ORIGIN = "http://localhost:3000"


class FailingRepository:
    """Repository whose every storage call fails."""

    def __init__(self, message: str = "connection refused") -> None:
        self.message = message

    def create_schema(self) -> None:
        return None

    def increment(self, username: str) -> None:
        raise StorageError(self.message)

    def list_ordered(self) -> List[UserScore]:
        raise StorageError(self.message)

    def get(self, username: str) -> Optional[UserScore]:
        raise StorageError(self.message)


@pytest.fixture()
def settings() -> Settings:
    return Settings(database_url="sqlite://", allowed_origins=[ALLOWED_ORIGIN])


@pytest.fixture()
def sqlite_engine() -> Iterator[Engine]:
    engine = create_database_engine("sqlite://", poolclass=StaticPool)
    yield engine
    engine.dispose()


@pytest.fixture(params=["memory", "sqlite"])
def repository(request: pytest.FixtureRequest, sqlite_engine: Engine):
    """Each API test runs against the in-memory and the SQL backend."""

    if request.param == "memory":
        return InMemoryLeaderboardRepository()
    return SQLLeaderboardRepository(sqlite_engine)


@pytest.fixture()
def client(settings: Settings, repository) -> Iterator[TestClient]:
    with TestClient(create_app(settings, repository)) as test_client:
        yield test_client


@pytest.fixture()
def failing_client(settings: Settings) -> Iterator[TestClient]:
    with TestClient(create_app(settings, FailingRepository())) as test_client:
        yield test_client


@pytest.fixture()
def anyio_backend() -> str:
    return "asyncio"
