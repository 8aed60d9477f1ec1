"""Tests for the canvas compositor."""

import xml.etree.ElementTree as ET

from tests.conftest import SPINNER_SVG

from mergesvg.engine.compositor import background_fill, canvas_size, compose
from mergesvg.engine.context import PlacedFragment, ResolvedFragment
from mergesvg.engine.geometry import resolve_geometry
from mergesvg.models.layout import CanvasConfig, ElementSpec, Position
from mergesvg.svg.parser import parse_svg_fragment

SVG = "{http://www.w3.org/2000/svg}"


def _canvas(**kwargs) -> CanvasConfig:
    return CanvasConfig.model_validate(kwargs)


def _placed(svg: str, x: float = 0, y: float = 0) -> PlacedFragment:
    parsed = parse_svg_fragment(svg)
    element = ElementSpec(content=svg, position=Position(x=x, y=y))
    fragment = ResolvedFragment(element=element, inner=parsed.inner, attributes=parsed.attributes)
    return PlacedFragment(fragment=fragment, placement=resolve_geometry(parsed.attributes, position=element.position))


def test_transparent_white_background():
    canvas = _canvas(width=800, height=400, backgroundColor="#ffffff", transparency=0.5)
    assert background_fill(canvas) == "rgba(255,255,255,0.5)"


def test_solid_background_is_verbatim():
    assert background_fill(_canvas(backgroundColor="#1e1e2e")) == "#1e1e2e"
    assert background_fill(_canvas()) == "#ffffff"


def test_short_hex_with_transparency():
    assert background_fill(_canvas(backgroundColor="#0f0", transparency=0.25)) == "rgba(0,255,0,0.25)"


def test_unparseable_colour_falls_back_to_white():
    assert background_fill(_canvas(backgroundColor="tomato", transparency=0.3)) == "rgba(255,255,255,0.3)"


def test_transparency_is_clamped():
    assert background_fill(_canvas(backgroundColor="#000000", transparency=1.5)) == "rgba(0,0,0,1)"


def test_canvas_size_defaults_and_rounding():
    assert canvas_size(_canvas()) == (800, 200)
    assert canvas_size(_canvas(width=799.5, height=100.4)) == (800, 100)


def test_compose_is_well_formed_and_ordered():
    circle = '<svg viewBox="0 0 10 10"><circle cx="5" cy="5" r="5"/></svg>'
    out = compose(_canvas(width=400, height=100), [_placed(circle, 10, 20), _placed(SPINNER_SVG, 200, 0)])

    assert out.startswith('<?xml version="1.0" encoding="utf-8"?>')
    root = ET.fromstring(out.encode("utf-8"))
    assert root.tag == f"{SVG}svg"
    assert root.get("viewBox") == "0 0 400 100"

    children = list(root)
    assert children[0].tag == f"{SVG}rect"
    assert children[0].get("fill") == "#ffffff"
    nested = children[1:]
    assert [n.get("x") for n in nested] == ["10", "200"]
    assert nested[1].get("viewBox") == "-10 -10 120 40"
    assert nested[1].get("preserveAspectRatio") == "xMidYMid meet"
    assert nested[0].get("preserveAspectRatio") is None


def test_compose_without_fragments():
    out = compose(_canvas(), [])
    root = ET.fromstring(out.encode("utf-8"))
    assert len(root) == 1
    assert root.get("width") == "800"


def test_inner_markup_embedded_unmodified():
    inner = '<g><text x="1">a &amp; b</text></g>'
    out = compose(_canvas(), [_placed(f'<svg width="5" height="5">{inner}</svg>')])
    assert f"\n{inner}\n" in out


def test_quote_in_attribute_is_escaped():
    out = compose(_canvas(), [_placed("<svg viewBox='0 0 1 1' preserveAspectRatio='a\"b'></svg>")])
    assert 'preserveAspectRatio="a&quot;b"' in out
    ET.fromstring(out.encode("utf-8"))
