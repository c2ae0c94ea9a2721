"""Core snapgrid functionality: IR, layout registry, width and span calculations, rule dispatch."""

from . import ir
from .dispatcher import Dispatcher, Scope
from .errors import (
    ConfigurationError,
    DuplicateLayoutError,
    GridError,
    InvalidSpanError,
    UnknownLayoutError,
)
from .grid import Grid
from .grid_generators import build_stylesheet, render_css
from .gridspec_loader import GridSpecError, load_gridspec, load_gridspec_file, save_gridspec
from .registry import Layout, LayoutRegistry
from .spans import (
    ColumnCount,
    FractionalSpan,
    FullWidth,
    Hide,
    NamedPortion,
    Span,
    colspan,
    format_percentage,
    parse_span,
)
from .stylesheet import Block, Rule, Stylesheet
from .widths import max_width_for_layout

__all__ = [
    "ir",
    "Block",
    "ColumnCount",
    "ConfigurationError",
    "Dispatcher",
    "DuplicateLayoutError",
    "FractionalSpan",
    "FullWidth",
    "Grid",
    "GridError",
    "GridSpecError",
    "Hide",
    "InvalidSpanError",
    "Layout",
    "LayoutRegistry",
    "NamedPortion",
    "Rule",
    "Scope",
    "Span",
    "Stylesheet",
    "UnknownLayoutError",
    "build_stylesheet",
    "colspan",
    "format_percentage",
    "load_gridspec",
    "load_gridspec_file",
    "max_width_for_layout",
    "parse_span",
    "render_css",
    "save_gridspec",
]
