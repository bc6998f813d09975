"""Database model for leaderboard scores."""

from __future__ import annotations

from sqlmodel import Field as ORMField, SQLModel

USERNAME_MAX_LENGTH = 50


class LeaderboardUser(SQLModel, table=True):
    """One row per username with its running point total."""

    __tablename__ = "leaderboard"

    username: str = ORMField(primary_key=True, max_length=USERNAME_MAX_LENGTH)
    points: int = ORMField(default=0, sa_column_kwargs={"server_default": "0"})


__all__ = ["LeaderboardUser", "USERNAME_MAX_LENGTH"]
