"""Run endpoints called by the game client.

Endpoints:
    create_run(payload, session): Persist a finished run and echo its runId.
    patch_display_name(run_id, payload, session): Lenient rename, reports the match count and never fails.
    put_display_name(run_id, payload, session): Strict rename, 404 when no run matches.

The two rename verbs share one service call and differ only in how a zero
match count is reported. Both are part of the public contract.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlmodel.ext.asyncio.session import AsyncSession

from leaderboard.db.session import get_session
from leaderboard.schemas import (
    DisplayNameUpdateRequest,
    DisplayNameUpdateResponse,
    ErrorResponse,
    RunCreateRequest,
    RunCreatedResponse,
)
from leaderboard.services.runs import RunService

router = APIRouter(prefix="/runs", tags=["runs"])


@router.post("", response_model=RunCreatedResponse, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=RunCreatedResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_run(
    payload: RunCreateRequest,
    session: AsyncSession = Depends(get_session),
) -> RunCreatedResponse:
    service = RunService()
    run = await service.create_run(session, payload)
    return RunCreatedResponse(run_id=run.run_id)


@router.patch(
    "/{run_id}",
    response_model=DisplayNameUpdateResponse,
    description="Update the display name. Always succeeds; `matched` is 0 when no run has this runId.",
)
@router.patch("/{run_id}/", response_model=DisplayNameUpdateResponse, include_in_schema=False)
async def patch_display_name(
    run_id: str,
    payload: DisplayNameUpdateRequest,
    session: AsyncSession = Depends(get_session),
) -> DisplayNameUpdateResponse:
    service = RunService()
    matched = await service.update_display_name(session, run_id=run_id, display_name=payload.display_name)
    return DisplayNameUpdateResponse(run_id=run_id, matched=matched)


@router.put(
    "/{run_id}",
    response_model=DisplayNameUpdateResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
    description="Update the display name. Responds 404 when no run has this runId.",
)
@router.put("/{run_id}/", response_model=DisplayNameUpdateResponse, include_in_schema=False)
async def put_display_name(
    run_id: str,
    payload: DisplayNameUpdateRequest,
    session: AsyncSession = Depends(get_session),
):
    service = RunService()
    matched = await service.update_display_name(session, run_id=run_id, display_name=payload.display_name)
    if matched == 0:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=ErrorResponse(error="Run not found").model_dump(),
        )
    return DisplayNameUpdateResponse(run_id=run_id, matched=matched)
