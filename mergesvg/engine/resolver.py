"""Source resolver — walks the strategy table until one yields SVG text."""

from __future__ import annotations

import importlib
import logging
import pkgutil
from dataclasses import replace
from pathlib import Path

from mergesvg.engine.registry import SourceEnv, StrategyRegistry, get_registry
from mergesvg.models.layout import ElementSpec

logger = logging.getLogger(__name__)


def register_sources() -> None:
    """Import all strategy modules so @source_strategy decorators fire."""
    package_name = "mergesvg.engine.sources"
    package = importlib.import_module(package_name)
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package_name}.{module_name}")


def resolve_source(
    element: ElementSpec,
    working_dir: Path | None = None,
    env: SourceEnv | None = None,
    registry: StrategyRegistry | None = None,
    skip: set[str] | frozenset[str] | None = None,
) -> tuple[str, str] | None:
    """Return (strategy id, raw SVG text) from the first strategy that succeeds.

    Strategies never raise here: a strategy that blows up is logged and
    treated like one that found nothing.
    """
    if registry is None:
        register_sources()
        registry = get_registry()
    env = env or SourceEnv()
    if working_dir is not None:
        env = replace(env, working_dir=working_dir)

    for spec in registry.ordered(skip):
        try:
            text = spec.fn(element, env)
        except Exception as e:
            logger.warning("%s: source %s failed: %s", element.label, spec.id, e)
            continue
        if text:
            logger.debug("%s: resolved via %s (%d chars)", element.label, spec.id, len(text))
            return spec.id, text
    return None
