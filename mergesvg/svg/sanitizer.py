"""Animation sanitizer — undoes "static preview" CSS injected by SVG generators.

Some generators freeze their output for thumbnails by forcing every animation
to run for zero seconds. This module strips exactly those overrides, in three
passes:

- universal-selector rules (``* { animation-duration: 0s … }``) inside
  ``<style>`` blocks; a block emptied by this is dropped entirely;
- ``animation-duration`` / ``animation-delay`` declarations whose every time
  value is zero, wherever they appear (stylesheets and ``style="…"``);
- ``animation:`` shorthands whose value list contains a zero-second token.

Everything else, including non-zero durations, is left byte-for-byte intact.
Running it twice gives the same result as running it once.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

# A zero time value: 0s, 0ms, 0.0s, .0s (not 0.5s, not 10s)
_ZERO_TIME_RE = re.compile(r"(?<![\w.])(?:0+(?:\.0*)?|\.0+)m?s(?![\w.])", re.IGNORECASE)
_TIME_TOKEN_RE = re.compile(r"(?<![\w.-])[+-]?(?:\d+\.?\d*|\.\d+)m?s(?![\w.])", re.IGNORECASE)

_STYLE_BLOCK_RE = re.compile(r"(<style\b[^>]*>)(.*?)(</style\s*>)", re.DOTALL | re.IGNORECASE)
# "* { … }" standing as a whole rule: at the start of the stylesheet or right
# after a previous rule, an at-rule brace, a CDATA opener or a comment
_UNIVERSAL_RULE_RE = re.compile(r"(?:^|(?<=[{};\[])|(?<=\*/))(\s*)\*\s*\{([^{}]*)\}")
_EMPTY_BODY_RE = re.compile(r"^\s*(?:<!\[CDATA\[\s*\]\]>)?\s*$")

# Longhand declarations: property, then value up to ";" or the end of the rule/attribute
_LONGHAND_RE = re.compile(
    r"(?<![\w-])animation-(?:duration|delay)\s*:\s*([^;{}\"'<>]*)(;|(?=[}\"'<]|$))",
    re.IGNORECASE,
)
_SHORTHAND_RE = re.compile(
    r"(?<![\w-])animation\s*:\s*([^;{}\"'<>]*)(;|(?=[}\"'<]|$))",
    re.IGNORECASE,
)


def sanitize_animations(markup: str) -> str:
    """Remove zero-duration / zero-delay animation overrides from SVG markup."""
    result = _STYLE_BLOCK_RE.sub(_strip_universal_rules, markup)
    result = _LONGHAND_RE.sub(_drop_all_zero_longhand, result)
    result = _SHORTHAND_RE.sub(_drop_zero_shorthand, result)
    if result != markup:
        logger.debug("Stripped zero-time animation overrides (%d chars removed)", len(markup) - len(result))
    return result


def _all_times_zero(value: str) -> bool:
    tokens = [t.strip() for t in value.split(",")]
    return bool(tokens) and all(_ZERO_TIME_RE.fullmatch(t) for t in tokens)


def _freezes_animation(rule_body: str) -> bool:
    return any(_all_times_zero(m.group(1).replace("!important", "").strip()) for m in _LONGHAND_RE.finditer(rule_body))


def _strip_universal_rules(block: re.Match) -> str:
    open_tag, body, close_tag = block.group(1), block.group(2), block.group(3)

    def _drop(rule: re.Match) -> str:
        return "" if _freezes_animation(rule.group(2)) else rule.group(0)

    new_body = _UNIVERSAL_RULE_RE.sub(_drop, body)
    if new_body == body:
        return block.group(0)
    if _EMPTY_BODY_RE.match(new_body):
        return ""
    return open_tag + new_body + close_tag


def _drop_all_zero_longhand(decl: re.Match) -> str:
    value = decl.group(1).replace("!important", "").strip()
    return "" if _all_times_zero(value) else decl.group(0)


def _drop_zero_shorthand(decl: re.Match) -> str:
    value = decl.group(1)
    for token in _TIME_TOKEN_RE.findall(value):
        if _ZERO_TIME_RE.fullmatch(token.lstrip("+-")):
            return ""
    return decl.group(0)
