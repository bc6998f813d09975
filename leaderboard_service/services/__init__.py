"""Service layer helpers."""

from .leaderboard import (
    InMemoryLeaderboardRepository,
    LeaderboardRepository,
    SQLLeaderboardRepository,
    StorageError,
)

__all__ = [
    "InMemoryLeaderboardRepository",
    "LeaderboardRepository",
    "SQLLeaderboardRepository",
    "StorageError",
]
