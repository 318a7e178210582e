"""Leaderboard endpoint: top runs by score, earliest first on ties."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from leaderboard.db.session import get_session
from leaderboard.schemas import LeaderboardEntry
from leaderboard.services.runs import RunService

router = APIRouter(prefix="/leaderboard", tags=["leaderboard"])


@router.get("", response_model=list[LeaderboardEntry])
@router.get("/", response_model=list[LeaderboardEntry], include_in_schema=False)
async def get_leaderboard(session: AsyncSession = Depends(get_session)) -> list[LeaderboardEntry]:
    runs = await RunService().leaderboard(session)
    return [LeaderboardEntry.model_validate(run) for run in runs]
