"""Bounded-timeout text fetch.

A failed fetch is an ordinary outcome here, not an exception: timeouts,
transport errors and non-2xx responses all come back as ``None`` so callers
can fall through to their next option.
"""

from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


def create_client(timeout: float = DEFAULT_TIMEOUT) -> httpx.Client:
    """HTTP client used for one run: redirects followed, every phase bounded."""
    return httpx.Client(timeout=timeout, follow_redirects=True)


def fetch_text(client: httpx.Client, url: str, timeout: float | None = None) -> str | None:
    """GET ``url`` and return the body text, or None on any failure."""
    try:
        if timeout is None:
            response = client.get(url)
        else:
            response = client.get(url, timeout=timeout)
    except httpx.TimeoutException:
        logger.warning("Timed out fetching %s", url)
        return None
    except httpx.HTTPError as e:
        logger.warning("Failed to fetch %s: %s", url, e)
        return None

    if not response.is_success:
        logger.warning("Failed to fetch %s: HTTP %d", url, response.status_code)
        return None
    return response.text
