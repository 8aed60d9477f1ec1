"""API request models."""

from __future__ import annotations

from mergesvg.models.layout import Layout


class MergeRequest(Layout):
    """A layout posted to the merge endpoint; same shape as the layout file."""
