"""Request and response payloads."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, StrictInt, StrictStr, TypeAdapter


class ScoreSubmission(BaseModel):
    """Body of a score submission.

    ``points`` is decoded for type checking only; every submission counts as
    exactly one point.
    """

    username: Optional[StrictStr] = None
    points: Optional[StrictInt] = None


# A JSON ``null`` body binds to no fields at all, like an empty object.
submission_body = TypeAdapter(Optional[ScoreSubmission])


class UserScore(BaseModel):
    username: str
    points: int


__all__ = ["ScoreSubmission", "UserScore", "submission_body"]
