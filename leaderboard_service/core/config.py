"""Application settings and environment helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_PORT = 8080
DEFAULT_HOST = "0.0.0.0"
DEFAULT_ENV_FILE = ".env"
DEFAULT_ALLOWED_ORIGINS = (
    "http://localhost:3000",
    "https://your-react-app.com",
)


def _database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if not url:
        raise RuntimeError("Missing required environment variable: DATABASE_URL")
    return url


def _port() -> int:
    raw = (os.getenv("PORT") or "").strip()
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError("PORT must be an integer") from exc


def _allowed_origins() -> List[str]:
    # ALLOWED_ORIGINS is a comma-separated list; repeats keep first position.
    raw = os.getenv("ALLOWED_ORIGINS") or ""
    origins = dict.fromkeys(item.strip() for item in raw.split(","))
    origins.pop("", None)
    return list(origins) or list(DEFAULT_ALLOWED_ORIGINS)


@dataclass(frozen=True)
class Settings:
    """Runtime configuration, resolved once at startup."""

    database_url: str
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    allowed_origins: List[str] = field(
        default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS)
    )
    log_level: str = "INFO"


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Build :class:`Settings` from the dotenv file and the process environment.

    The dotenv file is mandatory: if it cannot be loaded startup fails.
    Variables already exported take precedence over the file. Setting
    ``ENV_FILE`` to an empty string skips the file entirely, for deployments
    that export everything.
    """

    if env_file is None:
        env_file = os.getenv("ENV_FILE", DEFAULT_ENV_FILE)
    if env_file:
        if not Path(env_file).is_file():
            raise RuntimeError(f"Error loading .env file: {env_file}")
        load_dotenv(env_file, override=False)

    return Settings(
        database_url=_database_url(),
        port=_port(),
        host=os.getenv("HOST") or DEFAULT_HOST,
        allowed_origins=_allowed_origins(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )


__all__ = [
    "DEFAULT_ALLOWED_ORIGINS",
    "DEFAULT_ENV_FILE",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "Settings",
    "load_settings",
]
