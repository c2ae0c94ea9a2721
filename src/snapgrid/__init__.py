"""
snapgrid - responsive CSS grid generator.

Computes column widths, breakpoint-scoped layout rules and legacy (IE8)
fallbacks from a small grid configuration, and renders them to static CSS.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import (
    ConfigurationError,
    DuplicateLayoutError,
    GridError,
    InvalidSpanError,
    UnknownLayoutError,
)
from .core.grid import Grid
from .core.grid_generators import build_stylesheet, render_css
from .core.ir import GridConfig, GridMode, LegacySupport, Length
from .core.spans import colspan, format_percentage, parse_span

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "ConfigurationError",
    "DuplicateLayoutError",
    "Grid",
    "GridConfig",
    "GridError",
    "GridMode",
    "InvalidSpanError",
    "LegacySupport",
    "Length",
    "UnknownLayoutError",
    "build_stylesheet",
    "colspan",
    "format_percentage",
    "parse_span",
    "render_css",
]
