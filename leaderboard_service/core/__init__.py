"""Core configuration and infrastructure helpers."""

from .config import (
    DEFAULT_ALLOWED_ORIGINS,
    DEFAULT_ENV_FILE,
    DEFAULT_HOST,
    DEFAULT_PORT,
    Settings,
    load_settings,
)
from .database import WRITE_TRANSACTION, create_database_engine, normalize_database_url
from .log import configure_logging

__all__ = [
    "DEFAULT_ALLOWED_ORIGINS",
    "DEFAULT_ENV_FILE",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "Settings",
    "WRITE_TRANSACTION",
    "configure_logging",
    "create_database_engine",
    "load_settings",
    "normalize_database_url",
]
