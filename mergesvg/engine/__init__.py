"""mergesvg compositing engine."""

from mergesvg.engine.registry import source_strategy, get_registry, SourceEnv
from mergesvg.engine.context import MergeContext, CompositeDocument
from mergesvg.engine.pipeline import MergePipeline, merge_layout_file

__all__ = [
    "source_strategy",
    "get_registry",
    "SourceEnv",
    "MergeContext",
    "CompositeDocument",
    "MergePipeline",
    "merge_layout_file",
]
