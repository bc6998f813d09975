"""Leaderboard storage backends."""

from __future__ import annotations

import threading
from typing import Dict, List, Optional, Protocol

from pydantic import ValidationError
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, select

from ..core.database import WRITE_TRANSACTION
from ..models import LeaderboardUser, UserScore

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class StorageError(Exception):
    """Raised when the backing store fails to complete an operation."""


class LeaderboardRepository(Protocol):
    """Operations the HTTP handlers need from storage."""

    def create_schema(self) -> None: ...

    def increment(self, username: str) -> None: ...

    def list_ordered(self) -> List[UserScore]: ...

    def get(self, username: str) -> Optional[UserScore]: ...


def _to_score(row: LeaderboardUser) -> UserScore:
    try:
        return UserScore(username=row.username, points=row.points)
    except ValidationError as exc:
        raise StorageError(f"cannot decode leaderboard row: {exc}") from exc


class SQLLeaderboardRepository:
    """Leaderboard stored in the ``leaderboard`` table of a SQL database."""

    def __init__(self, engine: Engine) -> None:
        insert = _UPSERT_DIALECTS.get(engine.dialect.name)
        if insert is None:
            raise RuntimeError(
                f"Unsupported database dialect for upserts: {engine.dialect.name}"
            )
        self._engine = engine
        self._insert = insert

    @property
    def engine(self) -> Engine:
        return self._engine

    def _writer(self) -> Engine:
        return self._engine.execution_options(**{WRITE_TRANSACTION: True})

    def create_schema(self) -> None:
        """Create the leaderboard table if it does not exist yet."""

        SQLModel.metadata.create_all(
            self._writer(), tables=[LeaderboardUser.__table__]
        )

    def upsert_statement(self, username: str):
        """Build the ``INSERT ... ON CONFLICT DO UPDATE`` for ``username``."""

        table = LeaderboardUser.__table__
        return (
            self._insert(table)
            .values(username=username, points=1)
            .on_conflict_do_update(
                index_elements=[table.c.username],
                set_={"points": table.c.points + 1},
            )
        )

    def increment(self, username: str) -> None:
        """Insert ``username`` with one point or add one to its total.

        One atomic statement, so concurrent submissions for the same name
        never lose an increment.
        """

        statement = self.upsert_statement(username)
        try:
            with self._writer().begin() as connection:
                connection.execute(statement)
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc

    def list_ordered(self) -> List[UserScore]:
        query = select(LeaderboardUser).order_by(
            LeaderboardUser.points.desc(), LeaderboardUser.username.asc()
        )
        try:
            with Session(self._engine) as session:
                rows = session.exec(query).all()
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc
        return [_to_score(row) for row in rows]

    def get(self, username: str) -> Optional[UserScore]:
        try:
            with Session(self._engine) as session:
                row = session.get(LeaderboardUser, username)
        except SQLAlchemyError as exc:
            raise StorageError(str(exc)) from exc
        if row is None:
            return None
        return _to_score(row)


class InMemoryLeaderboardRepository:
    """Process-local leaderboard, used in place of a database in tests."""

    def __init__(self, initial: Optional[Dict[str, int]] = None) -> None:
        self._points: Dict[str, int] = dict(initial or {})
        self._lock = threading.Lock()

    def create_schema(self) -> None:
        return None

    def increment(self, username: str) -> None:
        with self._lock:
            self._points[username] = self._points.get(username, 0) + 1

    def list_ordered(self) -> List[UserScore]:
        with self._lock:
            items = sorted(self._points.items(), key=lambda item: (-item[1], item[0]))
        return [UserScore(username=name, points=points) for name, points in items]

    def get(self, username: str) -> Optional[UserScore]:
        with self._lock:
            points = self._points.get(username)
        if points is None:
            return None
        return UserScore(username=username, points=points)


__all__ = [
    "InMemoryLeaderboardRepository",
    "LeaderboardRepository",
    "SQLLeaderboardRepository",
    "StorageError",
]
