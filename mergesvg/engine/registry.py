"""Source strategy registry — every way of obtaining an element's SVG text is a
standalone function registered via decorator.

Usage:
    @source_strategy(id="local_file", order=30, description="Local file path")
    def local_file(element: ElementSpec, env: SourceEnv) -> str | None:
        ...

A strategy returns the raw SVG text, or None to let the next strategy try.
Adding a new source = creating one file with the decorator. Nothing else changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    import httpx

    from mergesvg.cache import RemoteCache
    from mergesvg.models.layout import ElementSpec

logger = logging.getLogger(__name__)


@dataclass
class SourceEnv:
    """Run-wide collaborators handed to every strategy."""

    working_dir: Path = field(default_factory=Path.cwd)
    cache: RemoteCache | None = None
    client: httpx.Client | None = None
    fetch_timeout: float = 10.0


StrategyFn = Callable[["ElementSpec", SourceEnv], "str | None"]


@dataclass
class StrategySpec:
    id: str
    order: int
    fn: StrategyFn
    description: str = ""


class StrategyRegistry:
    """Ordered table of source strategies."""

    def __init__(self) -> None:
        self._strategies: dict[str, StrategySpec] = {}

    def register(self, spec: StrategySpec) -> None:
        if spec.id in self._strategies:
            raise ValueError(f"Duplicate source strategy ID: {spec.id}")
        self._strategies[spec.id] = spec
        logger.debug("Registered source strategy %s (order %d)", spec.id, spec.order)

    def get(self, strategy_id: str) -> StrategySpec:
        return self._strategies[strategy_id]

    def all(self) -> list[StrategySpec]:
        return sorted(self._strategies.values(), key=lambda s: (s.order, s.id))

    def ordered(self, skip: set[str] | frozenset[str] | None = None) -> list[StrategySpec]:
        """Strategies in resolution order, minus the skipped ids."""
        skip = skip or set()
        return [s for s in self.all() if s.id not in skip]

    @property
    def count(self) -> int:
        return len(self._strategies)


# Module-level singleton
_registry = StrategyRegistry()


def get_registry() -> StrategyRegistry:
    return _registry


def source_strategy(*, id: str, order: int, description: str = ""):
    """Decorator to register a source strategy function."""

    def decorator(fn: StrategyFn):
        _registry.register(StrategySpec(id=id, order=order, fn=fn, description=description))
        return fn

    return decorator
