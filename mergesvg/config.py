"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    mergesvg_env: str = "development"
    mergesvg_log_level: str = "info"

    # Filesystem defaults (overridable per run from the command line)
    mergesvg_cache_dir: str = "out/remotes"
    mergesvg_output: str = "out/merged.svg"

    # Remote fetch deadlines in seconds
    mergesvg_fetch_timeout: float = 10.0
    mergesvg_prefetch_timeout: float = 12.0

    # HTTP service
    mergesvg_api_fetch_remote: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
