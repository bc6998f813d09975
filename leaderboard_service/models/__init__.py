"""Database model and payload exports."""

from .leaderboard import USERNAME_MAX_LENGTH, LeaderboardUser
from .schemas import ScoreSubmission, UserScore, submission_body

__all__ = [
    "LeaderboardUser",
    "ScoreSubmission",
    "USERNAME_MAX_LENGTH",
    "UserScore",
    "submission_body",
]
