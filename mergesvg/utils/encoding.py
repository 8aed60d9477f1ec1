"""Text decoding helpers shared by the source strategies and the prefetch step."""

from __future__ import annotations

import base64
import binascii
import logging
import re
from urllib.parse import unquote

logger = logging.getLogger(__name__)

# "<svg" or a namespace-prefixed "<svg:svg", followed by whitespace, ">" or "/"
_SVG_MARKER_RE = re.compile(r"<(?:[A-Za-z_][\w.-]*:)?svg[\s>/]")
_DATA_URI_RE = re.compile(r"^data:([^,]*?),(.*)$", re.IGNORECASE | re.DOTALL)
_WHITESPACE_RE = re.compile(r"\s+")


def has_svg_root(text: str | None) -> bool:
    """True when the text contains something that looks like an SVG root tag."""
    return bool(text) and _SVG_MARKER_RE.search(text) is not None


def is_data_uri(ref: str) -> bool:
    return ref[:5].lower() == "data:"


def is_http_url(ref: str) -> bool:
    lowered = ref[:8].lower()
    return lowered.startswith("http://") or lowered.startswith("https://")


def _b64decode(payload: str, altchars: bytes | None = None) -> str | None:
    compact = _WHITESPACE_RE.sub("", payload)
    if not compact:
        return None
    compact += "=" * (-len(compact) % 4)
    try:
        raw = base64.b64decode(compact, altchars=altchars, validate=True)
        return raw.decode("utf-8")
    except (binascii.Error, ValueError, UnicodeDecodeError):
        return None


def decode_base64_text(payload: str) -> str | None:
    """Decode base64 text, trying the standard then the URL-safe alphabet."""
    text = _b64decode(payload)
    if text is None:
        text = _b64decode(payload, altchars=b"-_")
    return text


def decode_data_uri(uri: str) -> str | None:
    """Decode ``data:[<mediatype>][;base64],<data>`` into text."""
    match = _DATA_URI_RE.match(uri.strip())
    if not match:
        return None
    meta, data = match.group(1), match.group(2)
    if ";base64" in meta.lower():
        return decode_base64_text(data)
    try:
        return unquote(data, errors="strict")
    except UnicodeDecodeError:
        logger.debug("Data URI payload is not valid percent-encoded UTF-8")
        return None
