"""Remote cache — one ``<sha1(url)>.svg`` file per remote reference.

The prefetch step writes entries; the merge step only reads them. Reads are
best effort: a missing or unreadable entry is a miss, never an error.
"""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class RemoteCache:
    """Key-value store of fetched SVG text keyed by the remote reference string."""

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    @staticmethod
    def key(remote_ref: str) -> str:
        """Stable cache key: SHA-1 hex digest of the exact reference string."""
        return hashlib.sha1(remote_ref.encode("utf-8")).hexdigest()

    def path_for(self, remote_ref: str) -> Path:
        return self.directory / f"{self.key(remote_ref)}.svg"

    def get(self, remote_ref: str) -> str | None:
        path = self.path_for(remote_ref)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("Cache miss for %s (%s)", remote_ref, path.name)
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Unreadable cache entry %s: %s", path, e)
            return None

    def put(self, remote_ref: str, svg_text: str) -> Path:
        """Write (or overwrite) the entry for ``remote_ref``. Raises OSError on failure."""
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.path_for(remote_ref)
        path.write_text(svg_text, encoding="utf-8")
        return path

    def __contains__(self, remote_ref: str) -> bool:
        return self.path_for(remote_ref).is_file()
