"""Numeric helpers for SVG length attributes. No engine imports."""

from __future__ import annotations

import math
import re

# Leading number of a length such as "128", "12.5px", "-3e2", ".5em"
_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*([a-zA-Z%]*)\s*$")


def parse_length(value: str | float | int | None) -> float | None:
    """Parse an SVG length into a number, dropping any unit suffix.

    Percentages are relative to a viewport we do not know about, so they are
    treated as absent.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else None
    match = _NUMBER_RE.match(value)
    if not match or match.group(2) == "%":
        return None
    number = float(match.group(1))
    return number if math.isfinite(number) else None


def parse_viewbox(value: str | None) -> tuple[float, float, float, float] | None:
    """Split a viewBox string into four floats, or None when malformed."""
    if not value:
        return None
    parts = re.split(r"[\s,]+", value.strip())
    if len(parts) != 4:
        return None
    try:
        nums = tuple(float(p) for p in parts)
    except ValueError:
        return None
    if not all(math.isfinite(n) for n in nums):
        return None
    return nums  # type: ignore[return-value]


def format_number(value: float) -> str:
    """Render a number the way it reads in SVG: 128.0 -> "128", 12.5 -> "12.5"."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def round_half_up(value: float) -> int:
    """Round to the nearest whole pixel, halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))
