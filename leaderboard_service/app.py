"""FastAPI application factory and process bootstrap."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import register_routes
from .core import Settings, configure_logging, create_database_engine, load_settings
from .services import LeaderboardRepository, SQLLeaderboardRepository

logger = logging.getLogger(__name__)

CORS_MAX_AGE_SECONDS = 12 * 60 * 60


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.repository.create_schema()
    logger.info("Leaderboard schema ready")
    yield


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[LeaderboardRepository] = None,
) -> FastAPI:
    """Build the application around a storage backend.

    Without arguments, settings come from the environment and the repository
    is a SQL repository over ``DATABASE_URL``.
    """

    if settings is None:
        settings = load_settings()
    if repository is None:
        repository = SQLLeaderboardRepository(
            create_database_engine(settings.database_url)
        )

    app = FastAPI(title="Leaderboard API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Origin", "Content-Type", "Authorization"],
        expose_headers=["Content-Length"],
        max_age=CORS_MAX_AGE_SECONDS,
    )

    register_routes(app)
    return app


def main() -> None:
    """Load configuration, open the database and serve until stopped."""

    import uvicorn

    settings = load_settings()
    configure_logging(settings.log_level)
    app = create_app(settings)
    logger.info("Listening on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
