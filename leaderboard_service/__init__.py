"""HTTP leaderboard of usernames and point totals."""

__version__ = "1.0.0"
