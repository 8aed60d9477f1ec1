"""S3: Explicit local file path, relative to the run's working directory."""

from __future__ import annotations

import logging
from pathlib import Path

from mergesvg.engine.registry import SourceEnv, source_strategy
from mergesvg.models.layout import ElementSpec
from mergesvg.utils.encoding import has_svg_root

logger = logging.getLogger(__name__)


@source_strategy(id="local_file", order=30, description="Read localPath from disk")
def local_file(element: ElementSpec, env: SourceEnv) -> str | None:
    if not element.local_path:
        return None

    path = Path(element.local_path).expanduser()
    if not path.is_absolute():
        path = env.working_dir / path

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("%s: cannot read %s: %s", element.label, path, e)
        return None
    if not has_svg_root(text):
        logger.debug("%s: %s does not contain SVG", element.label, path)
        return None
    return text
