"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from bouba.config import settings


class CircleModel(BaseModel):
    x: float
    y: float
    r: float


class GenerateRequest(BaseModel):
    seed: int | str = Field(..., description="Seed; the same seed reproduces the same shape")
    circle_count: int | None = Field(
        default=None,
        ge=3,
        le=settings.max_circle_count,
        description="Number of circles; drawn from the seed when omitted",
    )
    min_radius: float | None = Field(default=None, gt=0, description="Smallest circle radius")
    max_radius: float | None = Field(default=None, gt=0, description="Largest circle radius")
    max_tries: int | None = Field(
        default=None,
        ge=1,
        le=settings.max_retry_budget,
        description="Whole-chain retry budget",
    )
    convention: Literal["a", "b"] = Field(default="a", description="Outline traversal convention")
    n_points: int = Field(
        default=50, ge=2, le=settings.max_n_points, description="Contour vertices per circle"
    )
    color: str = Field(default="#fb4885", description="Fill colour passed through to the renderer")


class TraceRequest(BaseModel):
    circles: list[CircleModel] = Field(
        ..., max_length=settings.max_circle_count, description="Closed, validated chain"
    )
    angles: list[float] = Field(..., description="Connecting angles, one per circle")
    convention: Literal["a", "b"] = Field(default="a", description="Outline traversal convention")
    n_points: int = Field(
        default=50, ge=2, le=settings.max_n_points, description="Contour vertices per circle"
    )
