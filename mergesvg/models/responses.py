"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    sources_registered: int = 0


class MergeResponse(BaseModel):
    svg: str
    elements_total: int = 0
    elements_merged: int = 0
    warnings: list[str] = Field(default_factory=list)
    processing_time_ms: float = 0.0
