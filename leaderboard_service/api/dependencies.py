"""FastAPI dependencies shared by routers."""

from __future__ import annotations

from fastapi import Request

from ..services import LeaderboardRepository


def get_repository(request: Request) -> LeaderboardRepository:
    """Return the repository the application was built with."""

    return request.app.state.repository


__all__ = ["get_repository"]
