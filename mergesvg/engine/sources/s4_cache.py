"""S4: Previously prefetched copy of the element's remote reference."""

from __future__ import annotations

import logging

from mergesvg.engine.registry import SourceEnv, source_strategy
from mergesvg.models.layout import ElementSpec
from mergesvg.utils.encoding import has_svg_root

logger = logging.getLogger(__name__)


@source_strategy(id="cache", order=40, description="Cached copy of remoteUrl")
def cache(element: ElementSpec, env: SourceEnv) -> str | None:
    if not element.remote_url or env.cache is None:
        return None

    text = env.cache.get(element.remote_url)
    if text is None or not has_svg_root(text):
        return None
    logger.info("%s: using cached copy of %s", element.label, element.remote_url)
    return text
