"""Pipeline orchestrator — resolve, parse, sanitize, place and compose every element."""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path

from pydantic import ValidationError

from mergesvg.cache import RemoteCache
from mergesvg.engine.compositor import compose
from mergesvg.engine.config import MergeConfig
from mergesvg.engine.context import CompositeDocument, MergeContext, PlacedFragment, ResolvedFragment
from mergesvg.engine.geometry import resolve_geometry
from mergesvg.engine.registry import SourceEnv, StrategyRegistry, get_registry
from mergesvg.engine.resolver import register_sources, resolve_source
from mergesvg.errors import LayoutError, MergeError, OutputError, SourceUnavailableError
from mergesvg.models.layout import ElementSpec, Layout
from mergesvg.svg.parser import parse_svg_fragment
from mergesvg.svg.sanitizer import sanitize_animations
from mergesvg.utils.http import create_client

logger = logging.getLogger(__name__)


class MergePipeline:
    """Turns a layout into one composite SVG document."""

    def __init__(
        self,
        registry: StrategyRegistry | None = None,
        config: MergeConfig | None = None,
    ) -> None:
        if registry is None:
            register_sources()
            registry = get_registry()
        self.registry = registry
        self.config = config or MergeConfig()

    def run(self, ctx: MergeContext, env: SourceEnv | None = None) -> CompositeDocument:
        """Merge every element of ``ctx.layout``; bad elements are skipped, never fatal."""
        start = time.perf_counter()
        skip = self._gate()

        owns_client = False
        if env is None:
            env = SourceEnv(
                working_dir=self.config.working_dir,
                cache=None if "cache" in skip else RemoteCache(self.config.cache_dir),
                fetch_timeout=self.config.fetch_timeout,
            )
            if "http" not in skip and any(e.remote_url for e in ctx.layout.elements):
                env.client = create_client(self.config.fetch_timeout)
                owns_client = True

        logger.info("Pipeline: %d element(s) queued", ctx.num_elements)
        try:
            for element in ctx.layout.elements:
                t0 = time.perf_counter()
                try:
                    placed = self.process_element(element, env, skip)
                except MergeError as e:
                    ctx.warn(element, str(e))
                    logger.warning("Warning: failed to process element %s: %s", element.label, e)
                    continue
                except Exception as e:
                    ctx.warn(element, f"unexpected error: {e}")
                    logger.warning("Warning: failed to process element %s: %s", element.label, e, exc_info=True)
                    continue
                ctx.placed.append(placed)
                elapsed = (time.perf_counter() - t0) * 1000
                logger.debug("  %s placed via %s in %.1fms", element.label, placed.fragment.source, elapsed)
        finally:
            if owns_client:
                env.client.close()

        svg = compose(ctx.layout.canvas, ctx.placed)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d element(s) merged, %d skipped in %.0fms",
            len(ctx.placed),
            ctx.num_elements,
            len(ctx.skipped),
            total,
        )
        return CompositeDocument(
            svg=svg,
            merged=tuple(p.label for p in ctx.placed),
            warnings=tuple(ctx.warnings),
        )

    def process_element(
        self,
        element: ElementSpec,
        env: SourceEnv,
        skip: frozenset[str] | set[str] = frozenset(),
    ) -> PlacedFragment:
        """Resolve, parse, sanitize and place one element. Raises MergeError subclasses."""
        if not element.has_source:
            raise SourceUnavailableError("no remoteUrl, localPath or content")

        resolved = resolve_source(element, env=env, registry=self.registry, skip=skip)
        if resolved is None:
            raise SourceUnavailableError("no usable SVG source")
        source_id, raw = resolved

        parsed = parse_svg_fragment(raw)
        fragment = ResolvedFragment(
            element=element,
            inner=sanitize_animations(parsed.inner),
            attributes=parsed.attributes,
            source=source_id,
        )
        placement = resolve_geometry(parsed.attributes, element.dimensions, element.position)
        return PlacedFragment(fragment=fragment, placement=placement)

    def _gate(self) -> frozenset[str]:
        """Source strategies switched off for this run."""
        skip = set(self.config.disabled_sources)
        unknown = skip - {s.id for s in self.registry.all()}
        if unknown:
            logger.warning("Ignoring unknown source strategies: %s", ", ".join(sorted(unknown)))
        return frozenset(skip)


def create_pipeline(config: MergeConfig | None = None) -> MergePipeline:
    """Factory function for creating a pipeline instance."""
    return MergePipeline(config=config)


def load_layout(path: Path) -> Layout:
    """Read and validate the layout JSON. Any failure is fatal (LayoutError)."""
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LayoutError(f"Cannot read layout {path}: {e}") from e
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise LayoutError(f"Layout {path} is not valid JSON: {e}") from e
    return parse_layout(data, source=str(path))


def parse_layout(data: object, source: str = "layout") -> Layout:
    if not isinstance(data, dict):
        raise LayoutError(f"{source}: expected a JSON object with 'canvas' and 'elements'")
    try:
        return Layout.model_validate(data)
    except ValidationError as e:
        raise LayoutError(f"{source}: invalid layout: {e}") from e


def write_document(document: CompositeDocument, path: Path) -> Path:
    """Write the composite, creating parent directories. Failure is fatal (OutputError)."""
    path = path.resolve()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(document.svg, encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Cannot write {path}: {e}") from e
    return path


def merge_layout_file(config: MergeConfig) -> CompositeDocument:
    """Full run: load layout, merge, write output. Returns the written document."""
    if config.layout_path is None:
        raise LayoutError("No layout path given")
    layout = load_layout(config.layout_path)
    pipeline = create_pipeline(config)
    document = pipeline.run(MergeContext(layout=layout))
    write_document(document, config.output_path)
    return document
