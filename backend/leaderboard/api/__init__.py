"""API router composition for the backend.

The module assembles individual route groups into a single `api_router` that can be mounted on the app.
"""

from fastapi import APIRouter

from leaderboard.api.routes import leaderboard_router, run_router

api_router = APIRouter()
api_router.include_router(run_router)
api_router.include_router(leaderboard_router)

__all__ = ["api_router"]
