"""
GridSpec IR types for declarative grid configuration.

Defines the structure of gridspec.yaml. A GridConfig is immutable: it is
handed to a Grid, which builds its own layout registry from it.
"""

from __future__ import annotations

import re
from enum import StrEnum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_serializer,
    model_validator,
)

# =============================================================================
# Enums
# =============================================================================


class GridMode(StrEnum):
    """How the grid container reacts to the viewport."""

    FIXED = "fixed"
    FLUID = "fluid"
    SNAPPY = "snappy"


class LegacySupport(StrEnum):
    """Where legacy (IE8) fallback rules are written."""

    INLINE = "inline"
    ONLY = "only"
    NONE = "none"


# =============================================================================
# Lengths
# =============================================================================

_LENGTH_RE = re.compile(r"^\s*(-?\d+(?:\.\d+)?|-?\.\d+)\s*(px|rem|em|%|vw)?\s*$")


class Length(BaseModel):
    """A CSS length such as ``24px`` or ``1.5rem``.

    Accepts a string, a bare number (pixels) or a mapping when validated.
    Serializes back to its CSS text.
    """

    model_config = ConfigDict(frozen=True)

    value: float
    unit: str = "px"

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: Any) -> Any:
        if isinstance(data, bool):
            raise ValueError(f"Invalid length: {data!r}")
        if isinstance(data, int | float):
            return {"value": float(data), "unit": "px"}
        if isinstance(data, str):
            match = _LENGTH_RE.match(data)
            if not match:
                raise ValueError(f"Invalid length: {data!r}")
            return {"value": float(match.group(1)), "unit": match.group(2) or "px"}
        return data

    @classmethod
    def px(cls, value: float) -> Length:
        return cls(value=float(value), unit="px")

    @model_serializer
    def _serialize(self) -> str:
        return str(self)

    def __str__(self) -> str:
        if self.value == int(self.value):
            number = str(int(self.value))
        else:
            number = f"{self.value:g}"
        if number == "0":
            return "0"
        return f"{number}{self.unit}"

    def half(self) -> Length:
        return Length(value=self.value / 2, unit=self.unit)

    def negate(self) -> Length:
        return Length(value=-self.value, unit=self.unit)


# =============================================================================
# Root Model
# =============================================================================

DEFAULT_LAYOUTS: dict[str, int] = {
    "XS": 0,
    "S": 400,
    "M": 600,
    "L": 840,
    "XL": 1280,
}


class GridConfig(BaseModel):
    """Root grid configuration.

    Layout widths are pixel values; their order in the mapping does not
    matter, the registry sorts them.
    """

    model_config = ConfigDict(frozen=True)

    columns: int = Field(default=12, ge=1, description="Default total column count")
    gutter_width: Length = Field(
        default_factory=lambda: Length.px(24),
        description="Horizontal space between columns",
    )
    min_width: Length = Field(
        default_factory=lambda: Length.px(320),
        description="Minimum width of the grid container",
    )
    max_width: Length = Field(
        default_factory=lambda: Length.px(1440),
        description="Design ceiling: container width of the largest layout",
    )
    mode: GridMode = Field(default=GridMode.FLUID, description="Fixed, fluid or snappy grid")
    fixed_layout_name: str = Field(
        default="L",
        description="Layout used for fixed mode and legacy fallback output",
    )
    legacy_support: LegacySupport = Field(
        default=LegacySupport.NONE,
        description="Emit legacy fallback rules inline, exclusively, or not at all",
    )
    snappy_start_layout: str = Field(
        default="M",
        description="First layout whose container snaps to its own width in snappy mode",
    )
    layouts: dict[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_LAYOUTS),
        description="Layout name to pixel width",
    )
    class_prefix: str = Field(default="grid", description="Prefix for generated class names")
    legacy_class: str = Field(
        default="lt-ie9",
        description=(
            "Class that a conditional comment sets on <html> in legacy browsers; "
            "scopes inline fallback rules"
        ),
    )

    @field_validator("layouts")
    @classmethod
    def _check_layouts(cls, value: dict[str, int]) -> dict[str, int]:
        if not value:
            raise ValueError("at least one layout is required")
        for name, width in value.items():
            if not name:
                raise ValueError("layout names must not be empty")
            if width < 0:
                raise ValueError(f"layout '{name}' has negative width {width}")
        return value

    @field_validator("class_prefix", "legacy_class")
    @classmethod
    def _check_class_name(cls, value: str) -> str:
        if not re.fullmatch(r"[A-Za-z][A-Za-z0-9_-]*", value):
            raise ValueError(f"invalid class name {value!r}")
        return value
