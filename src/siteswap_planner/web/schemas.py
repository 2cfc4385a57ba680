"""Pydantic request/response schemas for the Web API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ValidateRequest(BaseModel):
    pattern: str


class PlanRequest(BaseModel):
    pattern: str
    repetitions: int | None = Field(default=None, ge=1)


class HealthResponse(BaseModel):
    status: str
    version: str


class PatternResponse(BaseModel):
    notation: str
    pattern: list[int]
    period: int
    ball_count: int
    max_throw_height: int
    summary: str


class FlightRecord(BaseModel):
    id: str
    ball_id: int
    throw_height: int
    start_beat: int
    end_beat: int
    from_hand: str
    to_hand: str


class PlanResponse(BaseModel):
    pattern: PatternResponse
    total_beats: int
    flights: list[FlightRecord]
