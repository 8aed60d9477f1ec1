"""Exception hierarchy.

Fatal errors (``LayoutError``, ``OutputError``) abort a run. Per-element
errors (``MalformedSvgError``, ``SourceUnavailableError``) are caught by the
pipeline, logged as warnings and the element is left out of the composite.
"""

from __future__ import annotations


class MergeError(Exception):
    """Base class for all mergesvg errors."""


class LayoutError(MergeError):
    """Layout file missing, unreadable, not JSON, or not a valid layout."""


class OutputError(MergeError):
    """The composite document could not be written."""


class MalformedSvgError(MergeError):
    """No root ``<svg>`` open tag could be located."""


class SourceUnavailableError(MergeError):
    """None of the source strategies produced SVG text for an element."""
