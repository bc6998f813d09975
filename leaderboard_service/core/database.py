"""Database engine helpers."""

from __future__ import annotations

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import create_engine

_LIBPQ_SCHEME = "postgres://"
SQLITE_BUSY_TIMEOUT_SECONDS = 30

# Execution option marking a connection whose transactions write.
WRITE_TRANSACTION = "leaderboard_write_transaction"


def normalize_database_url(url: str) -> str:
    """Accept libpq-style ``postgres://`` URLs alongside SQLAlchemy ones."""

    if url.startswith(_LIBPQ_SCHEME):
        return "postgresql://" + url[len(_LIBPQ_SCHEME):]
    return url


def _serialize_sqlite_writers(engine: Engine) -> None:
    # pysqlite opens deferred transactions, which fail with "database is
    # locked" when two writers race. Writers take the write lock up front;
    # readers keep a deferred BEGIN so they never queue behind a writer.
    @event.listens_for(engine, "connect")
    def _disable_pysqlite_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin(connection):
        if connection.get_execution_options().get(WRITE_TRANSACTION):
            connection.exec_driver_sql("BEGIN IMMEDIATE")
        else:
            connection.exec_driver_sql("BEGIN")


def create_database_engine(url: str, **kwargs) -> Engine:
    """Create the process-wide engine for ``url``."""

    url = normalize_database_url(url)
    if not url.startswith("sqlite"):
        kwargs.setdefault("pool_pre_ping", True)
        return create_engine(url, **kwargs)

    connect_args = dict(kwargs.pop("connect_args", {}))
    connect_args.setdefault("check_same_thread", False)
    connect_args.setdefault("timeout", SQLITE_BUSY_TIMEOUT_SECONDS)
    engine = create_engine(url, connect_args=connect_args, **kwargs)
    _serialize_sqlite_writers(engine)
    return engine


__all__ = ["WRITE_TRANSACTION", "create_database_engine", "normalize_database_url"]
