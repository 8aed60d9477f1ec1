"""Write the composite SVG markup: root, background rectangle, nested fragments."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mergesvg.utils.numbers import format_number

if TYPE_CHECKING:
    from mergesvg.engine.context import Placement

SVG_NS = "http://www.w3.org/2000/svg"


def _attr(name: str, value: str | float) -> str:
    if isinstance(value, (int, float)):
        value = format_number(value)
    return f'{name}="{str(value).replace(chr(34), "&quot;")}"'


def serialize_composite(
    canvas_w: int,
    canvas_h: int,
    fill: str,
    fragments: list[tuple[Placement, str]],
) -> str:
    """Generate the merged document from placed fragments, in paint order."""
    lines = [
        '<?xml version="1.0" encoding="utf-8"?>',
        f'<svg xmlns="{SVG_NS}" {_attr("width", canvas_w)} {_attr("height", canvas_h)}'
        f' viewBox="0 0 {canvas_w} {canvas_h}">',
        f'<rect {_attr("width", canvas_w)} {_attr("height", canvas_h)} {_attr("fill", fill)}/>',
    ]
    pieces = [serialize_nested(placement, inner) for placement, inner in fragments]
    return "\n".join(lines) + "\n" + "\n".join(pieces) + "</svg>\n"


def serialize_nested(placement: Placement, inner: str) -> str:
    """One fragment as its own ``<svg>`` node; the inner markup is embedded unmodified."""
    attrs = [
        _attr("x", placement.x),
        _attr("y", placement.y),
        _attr("width", placement.width),
        _attr("height", placement.height),
        _attr("viewBox", placement.viewbox),
    ]
    if placement.preserve_aspect_ratio:
        attrs.append(_attr("preserveAspectRatio", placement.preserve_aspect_ratio))
    for prefix, uri in placement.namespaces.items():
        attrs.append(_attr(prefix, uri))
    return f"  <svg {' '.join(attrs)}>\n{inner}\n  </svg>\n"
