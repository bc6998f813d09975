"""API assembly helpers."""

from __future__ import annotations

from fastapi import FastAPI

from .dependencies import get_repository
from .routers import ALL_ROUTERS


def register_routes(app: FastAPI) -> None:
    """Attach the system and leaderboard routers to the given app."""

    for router in ALL_ROUTERS:
        app.include_router(router)


__all__ = ["get_repository", "register_routes"]
