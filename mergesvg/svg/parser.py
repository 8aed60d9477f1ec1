"""SVG fragment parser — locates the root ``<svg>`` element of raw SVG text.

Only the root open tag is tokenized; everything between it and the final
root close tag is kept byte-for-byte as the fragment's inner markup. The
scanner understands quoting, comments, processing instructions, DOCTYPE
(with internal subset) and CDATA, so a ``>`` or ``<svg`` inside any of those
does not confuse it.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from mergesvg.errors import MalformedSvgError

logger = logging.getLogger(__name__)

_PROLOG_RE = re.compile(r"^\s*<\?xml.*?\?>\s*", re.IGNORECASE | re.DOTALL)
_NAME_RE = re.compile(r"[A-Za-z_:][-A-Za-z0-9_:.]*")
_SPACE_RE = re.compile(r"\s*")
_UNQUOTED_VALUE_RE = re.compile(r"[^\s>\"'=<`]+")


@dataclass
class SvgFragment:
    """Root attributes and inner markup of one SVG document."""

    attributes: dict[str, str] = field(default_factory=dict)
    inner: str = ""
    # Qualified name of the root element ("svg" or e.g. "svg:svg")
    root_name: str = "svg"


def strip_prolog(text: str) -> str:
    """Remove a leading BOM and ``<?xml …?>`` declaration."""
    text = text.lstrip("\ufeff")
    return _PROLOG_RE.sub("", text, count=1)


def parse_svg_fragment(svg_text: str) -> SvgFragment:
    """Parse raw SVG text into root attributes + inner markup.

    Raises MalformedSvgError when no root ``<svg`` open tag exists. A missing
    close tag is tolerated: the rest of the document becomes the inner markup.
    """
    text = strip_prolog(svg_text)

    start = _find_root_start(text)
    if start is None:
        raise MalformedSvgError("No <svg> root element found")

    name_match = _NAME_RE.match(text, start + 1)
    root_name = name_match.group(0)
    attrs, tag_end, self_closing = _scan_attributes(text, name_match.end())

    if self_closing:
        inner = ""
    else:
        close_start = _find_root_close(text, root_name, tag_end)
        inner = text[tag_end:close_start] if close_start is not None else text[tag_end:]

    logger.debug("Parsed <%s> root: %d attributes, %d chars inner", root_name, len(attrs), len(inner))
    return SvgFragment(attributes=attrs, inner=inner, root_name=root_name)


def _is_svg_name(name: str) -> bool:
    return name == "svg" or name.endswith(":svg")


def _find_root_start(text: str) -> int | None:
    """Index of the ``<`` opening the first element whose local name is svg."""
    pos = 0
    n = len(text)
    while pos < n:
        lt = text.find("<", pos)
        if lt == -1:
            return None
        if text.startswith("<!--", lt):
            end = text.find("-->", lt + 4)
            pos = n if end == -1 else end + 3
        elif text.startswith("<![CDATA[", lt):
            end = text.find("]]>", lt + 9)
            pos = n if end == -1 else end + 3
        elif text.startswith("<?", lt):
            end = text.find("?>", lt + 2)
            pos = n if end == -1 else end + 2
        elif text.startswith("<!", lt):
            pos = _skip_declaration(text, lt)
        else:
            match = _NAME_RE.match(text, lt + 1)
            if match and _is_svg_name(match.group(0)):
                return lt
            pos = lt + 1
    return None


def _skip_declaration(text: str, start: int) -> int:
    """Skip ``<!DOCTYPE …>`` including a bracketed internal subset."""
    depth = 0
    quote = ""
    for i in range(start + 2, len(text)):
        c = text[i]
        if quote:
            if c == quote:
                quote = ""
        elif c in "\"'":
            quote = c
        elif c == "[":
            depth += 1
        elif c == "]":
            depth = max(depth - 1, 0)
        elif c == ">" and depth == 0:
            return i + 1
    return len(text)


def _scan_attributes(text: str, pos: int) -> tuple[dict[str, str], int, bool]:
    """Tokenize the attribute list of an open tag starting at ``pos``.

    Returns (attributes, index just past the closing ``>``, self_closing).
    Duplicate names keep the last value.
    """
    attrs: dict[str, str] = {}
    n = len(text)
    while pos < n:
        pos = _SPACE_RE.match(text, pos).end()
        if pos >= n:
            break
        c = text[pos]
        if c == ">":
            return attrs, pos + 1, False
        if text.startswith("/>", pos):
            return attrs, pos + 2, True

        name_match = _NAME_RE.match(text, pos)
        if not name_match:
            # Stray character; skip it rather than failing the whole fragment
            pos += 1
            continue
        name = name_match.group(0)
        pos = _SPACE_RE.match(text, name_match.end()).end()

        if pos < n and text[pos] == "=":
            pos = _SPACE_RE.match(text, pos + 1).end()
            if pos < n and text[pos] in "\"'":
                quote = text[pos]
                end = text.find(quote, pos + 1)
                if end == -1:
                    end = n
                attrs[name] = text[pos + 1:end]
                pos = end + 1
            else:
                value_match = _UNQUOTED_VALUE_RE.match(text, pos)
                value = value_match.group(0) if value_match else ""
                attrs[name] = value
                pos += len(value)
        else:
            # Bare attribute (HTML style); keep it with an empty value
            attrs[name] = ""

    logger.debug("Root open tag is not terminated; treating rest of document as inner markup")
    return attrs, n, False


def _find_root_close(text: str, root_name: str, after: int) -> int | None:
    """Start index of the final ``</svg>`` close tag located after ``after``."""
    close_re = re.compile(r"</\s*" + re.escape(root_name) + r"\s*>")
    last = None
    for match in close_re.finditer(text, after):
        last = match.start()
    return last
