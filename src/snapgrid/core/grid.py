"""
Grid facade.

A Grid is built from an immutable GridConfig. It owns the layout registry,
the stylesheet being generated and the dispatcher that writes into it.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Generator
from contextlib import AbstractContextManager
from typing import Any

from .dispatcher import Dispatcher, Scope
from .ir.gridspec import GridConfig, GridMode, Length
from .registry import Layout, LayoutRegistry
from .spans import colspan
from .stylesheet import Block, Rule, Stylesheet
from .widths import max_width_for_layout

logger = logging.getLogger(__name__)


def _deprecated(old: str, new: str) -> None:
    logger.warning("%s is deprecated, use %s", old, new)
    warnings.warn(
        f"Grid.{old}() is deprecated. Use Grid.{new}().",
        DeprecationWarning,
        stacklevel=3,
    )


class Grid:
    """Responsive grid built from a GridConfig."""

    def __init__(self, config: GridConfig | None = None):
        self.config = config or GridConfig()
        self.registry = LayoutRegistry(self.config.layouts)
        # Both raise UnknownLayoutError when the names are not registered
        self.registry.get(self.config.fixed_layout_name)
        self.registry.get(self.config.snappy_start_layout)

        self.stylesheet = Stylesheet()
        self.dispatcher = Dispatcher(
            self.registry,
            self.stylesheet,
            legacy_support=self.config.legacy_support,
            fixed_layout_name=self.config.fixed_layout_name,
        )

    # -------------------------------------------------------------------------
    # Registry
    # -------------------------------------------------------------------------

    def add_layout(self, name: str, width: int) -> Layout:
        return self.registry.add_layout(name, width)

    def layout_names(self) -> tuple[str, ...]:
        return self.registry.layout_names()

    @property
    def layouts(self) -> list[Layout]:
        return list(self.registry)

    # -------------------------------------------------------------------------
    # Calculations
    # -------------------------------------------------------------------------

    def max_width_for_layout(self, layout_name: str, mode: GridMode | None = None) -> Length:
        """Container width for a layout; ``mode`` defaults to the configured one."""
        return max_width_for_layout(
            self.registry,
            layout_name,
            mode or self.config.mode,
            self.config.max_width,
        )

    def colspan(self, span: Any, total_columns: int | None = None) -> float:
        """Percentage width of ``span``; totals default to the configured columns."""
        if total_columns is None:
            total_columns = self.config.columns
        return colspan(span, total_columns)

    # -------------------------------------------------------------------------
    # Targeting
    # -------------------------------------------------------------------------

    @property
    def scope(self) -> Scope:
        return self.dispatcher.scope

    def respond_to(
        self, from_: str | None = None, until: str | None = None
    ) -> AbstractContextManager[Block]:
        return self.dispatcher.respond_to(from_, until)

    def target_legacy_browser(self) -> AbstractContextManager[Block]:
        return self.dispatcher.target_legacy_browser()

    def target_modern_browsers(self) -> AbstractContextManager[Block]:
        return self.dispatcher.target_modern_browsers()

    def emit(self, rule: Rule) -> Rule:
        return self.dispatcher.emit(rule)

    def render(self) -> str:
        return self.stylesheet.render()

    # -------------------------------------------------------------------------
    # Deprecated entry points
    # -------------------------------------------------------------------------

    def columns(self, span: Any, total_columns: int | None = None) -> float:
        _deprecated("columns", "colspan")
        return self.colspan(span, total_columns)

    def breakpoint(
        self, from_: str | None = None, until: str | None = None
    ) -> AbstractContextManager[Block]:
        _deprecated("breakpoint", "respond_to")
        return self.respond_to(from_, until)

    def target_ie8(self) -> AbstractContextManager[Block]:
        _deprecated("target_ie8", "target_legacy_browser")
        return self.target_legacy_browser()

    def max_width(self, layout_name: str, mode: GridMode | None = None) -> Length:
        _deprecated("max_width", "max_width_for_layout")
        return self.max_width_for_layout(layout_name, mode)


def iter_layout_ranges(grid: Grid) -> Generator[tuple[Layout, Layout | None], None, None]:
    """Each layout paired with the next larger one (None for the largest)."""
    layouts = grid.layouts
    for index, layout in enumerate(layouts):
        following = layouts[index + 1] if index + 1 < len(layouts) else None
        yield layout, following
