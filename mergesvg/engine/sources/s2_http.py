"""S2: Remote reference given as an ``http(s)://`` URL.

One bounded-timeout GET per element; a timeout, transport error or non-2xx
status simply hands over to the next strategy.
"""

from __future__ import annotations

import logging

from mergesvg.engine.registry import SourceEnv, source_strategy
from mergesvg.models.layout import ElementSpec
from mergesvg.utils.encoding import has_svg_root, is_data_uri, is_http_url
from mergesvg.utils.http import fetch_text

logger = logging.getLogger(__name__)


@source_strategy(id="http", order=20, description="Fetch remoteUrl over HTTP(S)")
def http(element: ElementSpec, env: SourceEnv) -> str | None:
    ref = element.remote_url
    if not ref or is_data_uri(ref):
        return None
    if not is_http_url(ref):
        logger.warning("%s: skipping unsupported remoteUrl (not http(s)/data): %s", element.label, ref)
        return None
    if env.client is None:
        logger.debug("%s: remote fetching disabled for this run", element.label)
        return None

    text = fetch_text(env.client, ref, timeout=env.fetch_timeout)
    if text is None:
        return None
    if not has_svg_root(text):
        logger.warning("%s: content fetched from %s is not SVG text", element.label, ref)
        return None
    return text
