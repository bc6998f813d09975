"""Leaderboard endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from ...models import submission_body
from ...services import LeaderboardRepository, StorageError
from ..dependencies import get_repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["leaderboard"])


def _storage_failure(exc: StorageError) -> JSONResponse:
    logger.exception("Leaderboard storage operation failed")
    return JSONResponse(status_code=500, content={"error": str(exc)})


@router.post("/leaderboard")
async def submit_score(
    request: Request, repository: LeaderboardRepository = Depends(get_repository)
):
    """Add one point to the submitted username, creating it if needed."""

    try:
        submission = submission_body.validate_json(await request.body())
    except ValidationError as exc:
        return JSONResponse(status_code=400, content={"error": str(exc)})

    username = ""
    if submission is not None and submission.username is not None:
        username = submission.username

    try:
        await run_in_threadpool(repository.increment, username)
    except StorageError as exc:
        return _storage_failure(exc)

    return {"message": "Score updated successfully"}


@router.get("/leaderboard")
def get_leaderboard(repository: LeaderboardRepository = Depends(get_repository)):
    """List every user, highest score first."""

    try:
        scores = repository.list_ordered()
    except StorageError as exc:
        return _storage_failure(exc)
    return [score.model_dump() for score in scores]


@router.get("/leaderboard/{username}")
def get_user_score(
    username: str, repository: LeaderboardRepository = Depends(get_repository)
):
    """Get the score of a single user."""

    logger.info("Fetching score for user: %s", username)
    try:
        score = repository.get(username)
    except StorageError as exc:
        return _storage_failure(exc)
    if score is None:
        return JSONResponse(status_code=404, content={"message": "User not found"})
    return score.model_dump()


__all__ = ["router"]
