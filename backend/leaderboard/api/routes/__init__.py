"""Route exports for the API layer."""

from .board import router as leaderboard_router
from .run import router as run_router

__all__ = ["run_router", "leaderboard_router"]
