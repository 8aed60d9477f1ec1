"""MergeContext — the mutable state object flowing through one merge run.

Per-element results -> ResolvedFragment / Placement
Run-level results   -> MergeContext.fragments, MergeContext.warnings
The finished output -> CompositeDocument (immutable)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mergesvg.models.layout import ElementSpec, Layout


@dataclass
class ResolvedFragment:
    """One element's SVG after source resolution and parsing."""

    element: ElementSpec
    inner: str
    attributes: dict[str, str] = field(default_factory=dict)
    # Id of the source strategy that produced the text
    source: str = ""


@dataclass
class Placement:
    """Where and how big a fragment is drawn on the canvas."""

    x: float = 0.0
    y: float = 0.0
    width: float = 100.0
    height: float = 100.0
    viewbox: str = "0 0 100 100"
    preserve_aspect_ratio: str | None = None
    # xmlns:prefix declarations carried over from the fragment root
    namespaces: dict[str, str] = field(default_factory=dict)


@dataclass
class PlacedFragment:
    fragment: ResolvedFragment
    placement: Placement

    @property
    def label(self) -> str:
        return self.fragment.element.label


@dataclass
class MergeContext:
    """Everything accumulated while merging one layout."""

    layout: Layout = field(default_factory=Layout)
    placed: list[PlacedFragment] = field(default_factory=list)
    # Element index -> reason it was left out
    skipped: dict[int, str] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    def warn(self, element: ElementSpec, message: str) -> None:
        self.skipped[element.index] = message
        self.warnings.append(f"{element.label}: {message}")

    @property
    def num_elements(self) -> int:
        return len(self.layout.elements)


@dataclass(frozen=True)
class CompositeDocument:
    """The merged SVG. Built once, never modified."""

    svg: str
    merged: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def fragment_count(self) -> int:
        return len(self.merged)
