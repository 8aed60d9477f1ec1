"""Prefetch — download every element's remote SVG into the remote cache.

Runs ahead of a merge so that a later merge can still place elements whose
remote host is down. Each remote reference is fetched and written on its
own; a failure only affects that element.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import httpx

from mergesvg.cache import RemoteCache
from mergesvg.models.layout import Layout
from mergesvg.utils.encoding import decode_data_uri, has_svg_root, is_data_uri, is_http_url
from mergesvg.utils.http import create_client, fetch_text

logger = logging.getLogger(__name__)

DEFAULT_PREFETCH_TIMEOUT = 12.0


@dataclass
class PrefetchReport:
    saved: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def fetched(self) -> int:
        return len(self.saved)


def prefetch_remotes(
    layout: Layout,
    cache: RemoteCache,
    client: httpx.Client | None = None,
    timeout: float = DEFAULT_PREFETCH_TIMEOUT,
) -> PrefetchReport:
    """Fetch each element's ``remoteUrl`` and store it as ``<sha1(url)>.svg``."""
    report = PrefetchReport()
    remotes = [e.remote_url for e in layout.elements if e.remote_url]
    if not remotes:
        logger.info("No remote elements found in layout; nothing to fetch")
        return report

    owns_client = client is None
    if owns_client:
        client = create_client(timeout)
    try:
        for url in remotes:
            if is_data_uri(url):
                text = decode_data_uri(url)
                if text is None:
                    _fail(report, url, "failed to decode data URI")
                    continue
            elif is_http_url(url):
                text = fetch_text(client, url, timeout=timeout)
                if text is None:
                    _fail(report, url, "fetch failed")
                    continue
            else:
                logger.warning("Skipping unsupported remoteUrl (not http(s)/data): %s", url)
                report.skipped.append(url)
                continue

            if not has_svg_root(text):
                _fail(report, url, "fetched content is not SVG text")
                continue

            try:
                path = cache.put(url, text)
            except OSError as e:
                _fail(report, url, f"cannot write cache entry: {e}")
                continue
            report.saved.append(url)
            logger.info("Saved %s -> %s", _short(url), path)
    finally:
        if owns_client:
            client.close()

    logger.info("Done. Fetched %d remote SVG(s) to %s", report.fetched, cache.directory)
    return report


def _fail(report: PrefetchReport, url: str, reason: str) -> None:
    report.failed[url] = reason
    logger.warning("Warn: failed to fetch %s: %s", _short(url), reason)


def _short(url: str, limit: int = 80) -> str:
    """Keep data: URIs from flooding the log."""
    return url if len(url) <= limit else url[: limit - 3] + "..."
