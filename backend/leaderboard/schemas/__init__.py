"""Convenience exports for API schemas.

Re-exports the pydantic models used across the backend so consumers can import from one module.
"""

from .run import (
    DisplayNameUpdateRequest,
    DisplayNameUpdateResponse,
    ErrorResponse,
    HealthResponse,
    LeaderboardEntry,
    RunCreateRequest,
    RunCreatedResponse,
)

__all__ = [
    "RunCreateRequest",
    "RunCreatedResponse",
    "DisplayNameUpdateRequest",
    "DisplayNameUpdateResponse",
    "LeaderboardEntry",
    "ErrorResponse",
    "HealthResponse",
]
