"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mergesvg import __version__
from mergesvg.config import settings
from mergesvg.engine.resolver import register_sources

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.mergesvg_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="mergesvg",
        description="Compose positioned SVG fragments onto a single canvas",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all source strategy modules to trigger registration
    register_sources()

    from mergesvg.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
