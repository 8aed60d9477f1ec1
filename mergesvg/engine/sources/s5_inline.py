"""S5: Inline ``content`` — base64 (standard or URL-safe) or literal SVG text."""

from __future__ import annotations

from mergesvg.engine.registry import SourceEnv, source_strategy
from mergesvg.models.layout import ElementSpec
from mergesvg.utils.encoding import decode_base64_text, has_svg_root


@source_strategy(id="inline", order=50, description="Inline content, base64 or plain")
def inline(element: ElementSpec, env: SourceEnv) -> str | None:
    content = element.content
    if not content:
        return None

    decoded = decode_base64_text(content)
    if decoded is not None and has_svg_root(decoded):
        return decoded
    return content
