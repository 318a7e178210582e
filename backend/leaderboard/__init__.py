"""Run Store Leaderboard API."""

__version__ = "0.1.0"
