"""Service layer exports."""

from .runs import LEADERBOARD_SIZE, RunService

__all__ = ["RunService", "LEADERBOARD_SIZE"]
