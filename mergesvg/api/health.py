"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from mergesvg import __version__
from mergesvg.engine.registry import get_registry
from mergesvg.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        sources_registered=get_registry().count,
    )
