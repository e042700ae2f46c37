"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class LabelResponse(BaseModel):
    position: list[float]
    distance: float
    probes: int = 0
    processing_time_ms: float = 0.0


class BatchLabelResponse(BaseModel):
    results: list[LabelResponse] = Field(default_factory=list)
    processing_time_ms: float = 0.0
