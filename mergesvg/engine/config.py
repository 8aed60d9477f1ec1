"""Merge configuration — the explicit settings one pipeline run works with."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from mergesvg.config import Settings, settings


@dataclass
class MergeConfig:
    """Everything a run needs to know, passed into the pipeline explicitly."""

    layout_path: Path | None = None
    output_path: Path = Path("out/merged.svg")

    # Where the prefetch step leaves <sha1(url)>.svg copies of remote sources
    cache_dir: Path = Path("out/remotes")

    # Local file sources are resolved against this directory
    working_dir: Path = field(default_factory=Path.cwd)

    # Remote fetch deadline in seconds (per element, per request phase)
    fetch_timeout: float = 10.0

    # Source strategy ids to skip for this run (e.g. {"local_file"})
    disabled_sources: frozenset[str] = frozenset()

    @classmethod
    def from_settings(cls, s: Settings | None = None, **overrides) -> MergeConfig:
        s = s or settings
        values = {
            "output_path": Path(s.mergesvg_output),
            "cache_dir": Path(s.mergesvg_cache_dir),
            "fetch_timeout": s.mergesvg_fetch_timeout,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
