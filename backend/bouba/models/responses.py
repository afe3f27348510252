"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from bouba.models.requests import CircleModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class BoundingBoxModel(BaseModel):
    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    width: float = 0.0
    height: float = 0.0


class ShapeResponse(BaseModel):
    status: str
    tries: int = 0
    attempts: int = 0
    seed: int | str | None = None
    circle_count: int = 0
    convention: str = "a"
    color: str = ""
    circles: list[CircleModel] = Field(default_factory=list)
    angles: list[float] = Field(default_factory=list)
    contour: list[tuple[float, float]] = Field(default_factory=list)
    bbox: BoundingBoxModel = Field(default_factory=BoundingBoxModel)
    contour_is_simple: bool = False
    processing_time_ms: float = 0.0


class TraceResponse(BaseModel):
    convention: str
    contour: list[tuple[float, float]] = Field(default_factory=list)
    contour_is_simple: bool = False
