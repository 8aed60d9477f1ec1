"""S1: Remote reference given as a ``data:`` URI.

Decodes base64 or percent-encoded payloads. No I/O.
"""

from __future__ import annotations

import logging

from mergesvg.engine.registry import SourceEnv, source_strategy
from mergesvg.models.layout import ElementSpec
from mergesvg.utils.encoding import decode_data_uri, has_svg_root, is_data_uri

logger = logging.getLogger(__name__)


@source_strategy(id="data_uri", order=10, description="Inline data: URI in remoteUrl")
def data_uri(element: ElementSpec, env: SourceEnv) -> str | None:
    ref = element.remote_url
    if not ref or not is_data_uri(ref):
        return None

    text = decode_data_uri(ref)
    if text is None:
        logger.debug("%s: could not decode data URI", element.label)
        return None
    if not has_svg_root(text):
        logger.debug("%s: data URI payload is not SVG", element.label)
        return None
    return text
