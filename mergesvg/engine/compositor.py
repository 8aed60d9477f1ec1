"""Canvas compositor — background plus nested fragments in one document."""

from __future__ import annotations

import logging

from mergesvg.engine.context import PlacedFragment
from mergesvg.models.layout import CanvasConfig
from mergesvg.svg.serializer import serialize_composite
from mergesvg.utils.color import hex_to_rgb
from mergesvg.utils.numbers import format_number, round_half_up

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 200
DEFAULT_BACKGROUND = "#ffffff"


def canvas_size(canvas: CanvasConfig) -> tuple[int, int]:
    """Canvas dimensions in whole pixels (800x200 when unset)."""
    width = round_half_up(canvas.width) if canvas.width else DEFAULT_WIDTH
    height = round_half_up(canvas.height) if canvas.height else DEFAULT_HEIGHT
    return width, height


def background_fill(canvas: CanvasConfig) -> str:
    """Solid colour, or ``rgba(r,g,b,a)`` when a transparency fraction is set."""
    color = canvas.background_color or DEFAULT_BACKGROUND
    if canvas.transparency is None:
        return color

    alpha = format_number(min(max(canvas.transparency, 0.0), 1.0))
    rgb = hex_to_rgb(color)
    if rgb is None:
        logger.warning("Background colour %r is not hex; using white at alpha %s", color, alpha)
        rgb = (255, 255, 255)
    return f"rgba({rgb[0]},{rgb[1]},{rgb[2]},{alpha})"


def compose(canvas: CanvasConfig, placed: list[PlacedFragment]) -> str:
    """Assemble the composite document. Fragment order is paint order."""
    width, height = canvas_size(canvas)
    fill = background_fill(canvas)
    logger.debug("Composing %d fragment(s) on %dx%d canvas, fill %s", len(placed), width, height, fill)
    return serialize_composite(width, height, fill, [(p.placement, p.fragment.inner) for p in placed])
