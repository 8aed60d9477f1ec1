"""POST /api/merge — compose a posted layout into one SVG.

Layouts arriving over HTTP never read the server's filesystem: the local-file
and cache sources are disabled, and remote fetching is opt-in through
``MERGESVG_API_FETCH_REMOTE``.
"""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response

from mergesvg.config import Settings
from mergesvg.dependencies import get_settings
from mergesvg.engine.config import MergeConfig
from mergesvg.engine.context import CompositeDocument, MergeContext
from mergesvg.engine.pipeline import create_pipeline
from mergesvg.models.requests import MergeRequest
from mergesvg.models.responses import MergeResponse

router = APIRouter()

_SERVER_ONLY_SOURCES = {"local_file", "cache"}


def _api_config(s: Settings) -> MergeConfig:
    disabled = set(_SERVER_ONLY_SOURCES)
    if not s.mergesvg_api_fetch_remote:
        disabled.add("http")
    return MergeConfig.from_settings(s, disabled_sources=frozenset(disabled))


async def _merge(request: MergeRequest, s: Settings) -> CompositeDocument:
    pipeline = create_pipeline(_api_config(s))
    # Remote fetches block, so keep them off the event loop
    return await run_in_threadpool(pipeline.run, MergeContext(layout=request))


@router.post("/merge", response_model=MergeResponse)
async def merge(request: MergeRequest, s: Settings = Depends(get_settings)) -> MergeResponse:
    start = time.perf_counter()
    document = await _merge(request, s)
    elapsed = (time.perf_counter() - start) * 1000
    return MergeResponse(
        svg=document.svg,
        elements_total=len(request.elements),
        elements_merged=document.fragment_count,
        warnings=list(document.warnings),
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/merge.svg")
async def merge_svg(request: MergeRequest, s: Settings = Depends(get_settings)) -> Response:
    document = await _merge(request, s)
    return Response(content=document.svg, media_type="image/svg+xml")
