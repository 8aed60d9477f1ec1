"""Tests for the animation sanitizer."""

import pytest

from tests.conftest import CIRCLE_SVG, SPINNER_SVG

from mergesvg.svg.parser import parse_svg_fragment
from mergesvg.svg.sanitizer import sanitize_animations

FREEZE_RULE = "<style>* { animation-duration: 0s !important; animation-delay: 0s !important; }</style>"
SPIN_RULE = ".spin { animation: spin 2s linear infinite; }"


def test_freeze_block_removed_adjacent_block_kept():
    markup = FREEZE_RULE + f"<style>{SPIN_RULE}</style>"
    assert sanitize_animations(markup) == f"<style>{SPIN_RULE}</style>"


def test_freeze_rule_removed_from_shared_block():
    markup = f"<style>* {{ animation-duration: 0s !important; animation-delay: 0s !important; }}\n{SPIN_RULE}</style>"
    result = sanitize_animations(markup)
    assert result == f"<style>\n{SPIN_RULE}</style>"


def test_spinner_fragment():
    inner = parse_svg_fragment(SPINNER_SVG).inner
    result = sanitize_animations(inner)
    assert "animation-duration" not in result
    assert "animation-delay" not in result
    assert ".spin { animation: spin 2s linear infinite; transform-origin: 50px 10px; }" in result
    assert "@keyframes spin" in result


def test_universal_rule_without_zero_times_kept():
    markup = "<style>* { animation-duration: 1s; box-sizing: border-box; }</style>"
    assert sanitize_animations(markup) == markup


def test_descendant_universal_selector_not_removed_whole():
    markup = "<style>.icon * { animation-duration: 0s; }</style>"
    result = sanitize_animations(markup)
    assert ".icon *" in result
    assert "animation-duration" not in result


def test_cdata_block_emptied_is_removed():
    markup = "<style><![CDATA[\n* { animation-delay: 0s !important }\n]]></style><g/>"
    assert sanitize_animations(markup) == "<g/>"


def test_standalone_longhand_removed_nonzero_kept():
    markup = "<style>.a { animation-duration: 0s; color: red; } .b { animation-duration: 1.5s; }</style>"
    result = sanitize_animations(markup)
    assert result == "<style>.a {  color: red; } .b { animation-duration: 1.5s; }</style>"


def test_zero_milliseconds_and_decimal_zero():
    markup = "<style>.a { animation-delay: 0ms; } .b { animation-delay: 0.0s; }</style>"
    assert sanitize_animations(markup) == "<style>.a {  } .b {  }</style>"


def test_mixed_list_with_nonzero_kept():
    markup = "<style>.a { animation-duration: 0s, 2s; }</style>"
    assert sanitize_animations(markup) == markup


def test_inline_style_attribute():
    markup = '<rect style="fill: red; animation-delay: 0s"/>'
    assert sanitize_animations(markup) == '<rect style="fill: red; "/>'


def test_zero_shorthand_removed():
    markup = "<style>.x { animation: pulse 0s ease; }</style>"
    assert sanitize_animations(markup) == "<style>.x {  }</style>"


@pytest.mark.parametrize(
    "markup",
    [
        "<style>.y { animation: pulse 3s ease 0.25s; }</style>",
        "<style>.y { animation: pulse 10s; }</style>",
        "<style>.y { animation-delay: 0.5s; }</style>",
        "<style>.y { transition: opacity 0s; }</style>",
        CIRCLE_SVG,
    ],
)
def test_untouched(markup):
    assert sanitize_animations(markup) == markup


@pytest.mark.parametrize(
    "markup",
    [
        FREEZE_RULE + f"<style>{SPIN_RULE}</style>",
        "<style>* { animation-duration: 0s } * { animation-delay: 0s }</style><g/>",
        "<style>* { animation: none 0s; }</style>",
        '<g style="animation: a 0s; animation-delay: 0s"/>',
        SPINNER_SVG,
    ],
)
def test_idempotent(markup):
    once = sanitize_animations(markup)
    assert sanitize_animations(once) == once
