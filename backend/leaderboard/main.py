"""Application bootstrap for the Run Store Leaderboard API.

This module wires the FastAPI application, attaches middleware, and owns the store lifecycle.

Functions:
    lifespan(app: FastAPI): Connect to the store once on startup; refuse to serve if that fails.
    health_check(): Liveness probe polled by the game client and the hosting platform.
    store_error_handler(request, exc): Map store failures to a generic 500 body.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from leaderboard.api import api_router
from leaderboard.core.config import get_settings
from leaderboard.db.session import open_store, redact_url
from leaderboard.schemas import ErrorResponse, HealthResponse

_LOGGER = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    current = get_settings()
    try:
        _LOGGER.info("Connecting to store at %s", redact_url(current.database_url))
        app.state.store = await open_store(current.database_url)
    except Exception:
        _LOGGER.exception("Failed to start")
        raise
    try:
        yield
    finally:
        await app.state.store.close()


app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    _LOGGER.error("Store operation failed for %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error="Internal server error").model_dump(),
    )


@app.get("/", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(ok=True)
