"""Geometry resolver — where a fragment goes and which coordinate system it keeps.

Fragments are sized through the nested ``<svg>``'s own width/height/viewBox,
never through a ``scale()`` transform, so animations that compute relative to
the fragment's own box behave exactly as they do standalone.
"""

from __future__ import annotations

import logging

from mergesvg.engine.context import Placement
from mergesvg.models.layout import Dimensions, Position
from mergesvg.utils.numbers import format_number, parse_length, parse_viewbox

logger = logging.getLogger(__name__)

FALLBACK_SIZE = 100.0
FALLBACK_VIEWBOX = "0 0 100 100"


def resolve_geometry(
    attributes: dict[str, str],
    target: Dimensions | None = None,
    position: Position | None = None,
) -> Placement:
    """Compute the placement of one fragment from its root attributes and layout entry."""
    target = target or Dimensions()
    position = position or Position()

    own_w = parse_length(attributes.get("width"))
    own_h = parse_length(attributes.get("height"))
    own_w = own_w if own_w and own_w > 0 else None
    own_h = own_h if own_h and own_h > 0 else None

    viewbox = effective_viewbox(attributes, own_w, own_h, target)

    # Per axis: layout target, then viewBox extent, then intrinsic size, then 100.
    # width="1em" on an icon with a viewBox must not shrink it to one pixel.
    vb = parse_viewbox(attributes.get("viewBox"))
    vb_w = vb[2] if vb and vb[2] > 0 else None
    vb_h = vb[3] if vb and vb[3] > 0 else None
    width = target.width or vb_w or own_w or FALLBACK_SIZE
    height = target.height or vb_h or own_h or FALLBACK_SIZE

    par = attributes.get("preserveAspectRatio")

    return Placement(
        x=position.x,
        y=position.y,
        width=width,
        height=height,
        viewbox=viewbox,
        preserve_aspect_ratio=par if par else None,
        namespaces=namespace_declarations(attributes),
    )


def effective_viewbox(
    attributes: dict[str, str],
    own_w: float | None,
    own_h: float | None,
    target: Dimensions,
) -> str:
    """The fragment's declared viewBox verbatim, else one derived from its size."""
    declared = (attributes.get("viewBox") or "").strip()
    if declared:
        return declared
    if own_w and own_h:
        return f"0 0 {format_number(own_w)} {format_number(own_h)}"
    if target.width and target.height:
        return f"0 0 {format_number(target.width)} {format_number(target.height)}"
    return FALLBACK_VIEWBOX


def namespace_declarations(attributes: dict[str, str]) -> dict[str, str]:
    """``xmlns:prefix`` declarations of the fragment root (the default xmlns excluded)."""
    return {k: v for k, v in attributes.items() if k.startswith("xmlns:")}
