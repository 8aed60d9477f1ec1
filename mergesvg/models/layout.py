"""Layout document model — the JSON file that drives a merge."""

from __future__ import annotations

import math
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, PrivateAttr, field_validator


def _finite_or_none(value: Any) -> Any:
    """Lenient numeric field: non-numeric and non-finite values become None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


class CanvasConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    width: float | None = None
    height: float | None = None
    background_color: str = Field(
        default="#ffffff",
        validation_alias=AliasChoices("backgroundColor", "background_color"),
    )
    # Opacity of the background in 0..1; None means a solid fill
    transparency: float | None = None

    @field_validator("width", "height", "transparency", mode="before")
    @classmethod
    def _lenient_number(cls, v: Any) -> Any:
        return _finite_or_none(v)

    @field_validator("background_color", mode="before")
    @classmethod
    def _default_color(cls, v: Any) -> Any:
        return v if isinstance(v, str) and v.strip() else "#ffffff"


class Position(BaseModel):
    model_config = ConfigDict(extra="ignore")

    x: float = 0.0
    y: float = 0.0

    @field_validator("x", "y", mode="before")
    @classmethod
    def _default_zero(cls, v: Any) -> Any:
        v = _finite_or_none(v)
        return 0.0 if v is None else v


class Dimensions(BaseModel):
    model_config = ConfigDict(extra="ignore")

    width: float | None = None
    height: float | None = None

    @field_validator("width", "height", mode="before")
    @classmethod
    def _positive_or_none(cls, v: Any) -> Any:
        v = _finite_or_none(v)
        return v if v is not None and v > 0 else None


class ElementSpec(BaseModel):
    """One fragment of the composite: where it goes and where its SVG comes from."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = None
    id: str | None = None

    # Source references, tried in resolver order
    remote_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("remoteUrl", "remote_url"),
    )
    local_path: str | None = Field(
        default=None,
        validation_alias=AliasChoices("localPath", "local_path", "path"),
    )
    content: str | None = None

    position: Position = Field(default_factory=Position)
    dimensions: Dimensions = Field(default_factory=Dimensions)

    # Position in the layout's element list, assigned by Layout; never read from input
    _index: int = PrivateAttr(default=0)

    @field_validator("name", "id", mode="before")
    @classmethod
    def _stringify(cls, v: Any) -> Any:
        return None if v is None else str(v)

    @field_validator("remote_url", "local_path", "content", mode="before")
    @classmethod
    def _blank_to_none(cls, v: Any) -> Any:
        if not isinstance(v, str) or not v.strip():
            return None
        return v

    @field_validator("position", "dimensions", mode="before")
    @classmethod
    def _mapping_or_empty(cls, v: Any) -> Any:
        return v if isinstance(v, (dict, BaseModel)) else {}

    @property
    def index(self) -> int:
        return self._index

    @property
    def label(self) -> str:
        """Human-readable name for diagnostics."""
        return self.name or self.id or f"element[{self.index}]"

    @property
    def has_source(self) -> bool:
        return any((self.remote_url, self.local_path, self.content))


class Layout(BaseModel):
    """Top-level layout: a canvas and the ordered elements painted onto it."""

    model_config = ConfigDict(extra="ignore")

    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    elements: list[ElementSpec] = Field(default_factory=list)

    @field_validator("canvas", mode="before")
    @classmethod
    def _canvas_mapping(cls, v: Any) -> Any:
        return v if isinstance(v, (dict, BaseModel)) else {}

    @field_validator("elements", mode="before")
    @classmethod
    def _element_list(cls, v: Any) -> Any:
        if not isinstance(v, list):
            return []
        return [e if isinstance(e, (dict, BaseModel)) else {} for e in v]

    def model_post_init(self, __context: Any) -> None:
        for i, element in enumerate(self.elements):
            element._index = i
