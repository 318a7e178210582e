"""Pydantic schemas for run records and leaderboard payloads.

Wire names are camelCase (``runId``, ``displayName`` ...) because the game
client speaks that dialect; Python attributes stay snake_case.

Classes:
    RunCreateRequest, RunCreatedResponse: Create-run contract.
    DisplayNameUpdateRequest, DisplayNameUpdateResponse: Rename contract shared by PATCH and PUT.
    LeaderboardEntry: Public projection of a Run (no internal identity).
    ErrorResponse, HealthResponse: Small fixed bodies.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RunCreateRequest(CamelModel):
    run_id: str = Field(min_length=1)
    display_name: str = Field(min_length=1)
    score: int | float
    enemies_killed: int
    time_survived: int | float


class RunCreatedResponse(CamelModel):
    status: Literal["ok"] = "ok"
    run_id: str


class DisplayNameUpdateRequest(CamelModel):
    display_name: str = Field(min_length=1)


class DisplayNameUpdateResponse(CamelModel):
    status: Literal["updated"] = "updated"
    run_id: str
    matched: int = Field(ge=0, le=1)


class LeaderboardEntry(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    run_id: str
    display_name: str
    score: int | float
    enemies_killed: int
    time_survived: int | float
    created_at: datetime

    @field_validator("score", "time_survived", mode="after")
    @classmethod
    def _restore_integral_numbers(cls, value: int | float) -> int | float:
        # Float columns read 100 back as 100.0.
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value

    @field_serializer("created_at")
    def _serialise_created_at(self, value: datetime) -> str:
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value.isoformat(timespec="milliseconds") + "Z"


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    ok: bool = True
