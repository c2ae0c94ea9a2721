"""
Grid rule generators.

Walks the layout registry and writes container, row, column and visibility
rules through the dispatcher. Output order matters: legacy fallback rules
come before the breakpoint blocks so that modern browsers override them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial
from typing import Any

from .grid import Grid, iter_layout_ranges
from .ir.gridspec import GridConfig, GridMode, LegacySupport
from .spans import FULL_WIDTH_KEYWORD, NAMED_PORTIONS, Hide, format_percentage, parse_span
from .stylesheet import Block, Stylesheet

logger = logging.getLogger(__name__)

# =============================================================================
# Selectors
# =============================================================================


def container_selector(prefix: str) -> str:
    return f".{prefix}-container"


def row_selector(prefix: str) -> str:
    return f".{prefix}-row"


def column_selector(prefix: str, layout_name: str, count: int) -> str:
    return f".{prefix}-col-{layout_name.lower()}-{count}"


def portion_selector(prefix: str, layout_name: str, keyword: str) -> str:
    return f".{prefix}-{layout_name.lower()}-{keyword}"


def hide_selector(prefix: str, layout_name: str) -> str:
    return f".{prefix}-hide-{layout_name.lower()}"


# =============================================================================
# Declarations
# =============================================================================


def span_declarations(grid: Grid, span: Any) -> dict[str, str]:
    """Declarations for an element spanning ``span``.

    Hidden spans have no width and are turned into ``display: none``
    before any width is computed.
    """
    resolved = parse_span(span)
    if isinstance(resolved, Hide):
        return {"display": "none"}
    return {"width": format_percentage(grid.colspan(resolved))}


def container_declarations(grid: Grid, layout_name: str) -> dict[str, str]:
    """Container sizing for one layout in fluid and snappy modes."""
    config = grid.config
    if config.mode == GridMode.SNAPPY:
        start = grid.registry.index_of(config.snappy_start_layout)
        if grid.registry.index_of(layout_name) >= start:
            return {"width": str(grid.max_width_for_layout(layout_name, GridMode.FIXED))}
    return {"max-width": str(grid.max_width_for_layout(layout_name, GridMode.FLUID))}


def _column_rules(
    grid: Grid,
    block: Block,
    layout_name: str,
    scope: Callable[[str], str] = str,
) -> None:
    prefix = grid.config.class_prefix
    for count in range(1, grid.config.columns + 1):
        selector = scope(column_selector(prefix, layout_name, count))
        block.rule(selector, **span_declarations(grid, count))
    for keyword in (*NAMED_PORTIONS, FULL_WIDTH_KEYWORD):
        selector = scope(portion_selector(prefix, layout_name, keyword))
        block.rule(selector, **span_declarations(grid, keyword))
    block.rule(scope(hide_selector(prefix, layout_name)), **span_declarations(grid, "hide"))


# =============================================================================
# Generators
# =============================================================================


def generate_base_rules(grid: Grid) -> None:
    """Rules shared by every layout and every browser."""
    config = grid.config
    prefix = config.class_prefix
    half_gutter = config.gutter_width.half()
    block = grid.dispatcher.current_block

    container = block.rule(
        container_selector(prefix),
        margin_left="auto",
        margin_right="auto",
        min_width=str(config.min_width),
    )
    if config.mode == GridMode.FIXED:
        fixed = grid.max_width_for_layout(config.fixed_layout_name, GridMode.FIXED)
        container.declarations["width"] = str(fixed)

    block.rule(
        row_selector(prefix),
        margin_left=str(half_gutter.negate()),
        margin_right=str(half_gutter.negate()),
    )
    # Single colon keeps the clearfix working in IE8
    block.rule(f"{row_selector(prefix)}:after", content='""', display="table", clear="both")
    block.rule(
        f'[class*="{prefix}-col-"]',
        float="left",
        box_sizing="border-box",
        min_height="1px",
        padding_left=str(half_gutter),
        padding_right=str(half_gutter),
    )


def legacy_selector(config: GridConfig, selector: str) -> str:
    """Scope a fallback selector to legacy browsers.

    Inline fallback rules sit next to the breakpoint blocks, so they hang off
    ``config.legacy_class`` on an ancestor to stay invisible to modern
    browsers. A legacy-only stylesheet is never served to those, and its
    selectors are left as they are.
    """
    if config.legacy_support == LegacySupport.INLINE:
        return f".{config.legacy_class} {selector}"
    return selector


def generate_legacy_fallback(grid: Grid) -> None:
    """Fixed-width rules for browsers without media query support."""
    config = grid.config
    prefix = config.class_prefix
    layout_name = config.fixed_layout_name
    scope = partial(legacy_selector, config)
    with grid.target_legacy_browser() as block:
        # Fixed mode already sets the container width in the base rules
        if config.mode != GridMode.FIXED:
            fixed = grid.max_width_for_layout(layout_name, GridMode.FIXED)
            block.rule(scope(container_selector(prefix)), width=str(fixed))
        _column_rules(grid, block, layout_name, scope)


def generate_layout_rules(grid: Grid) -> None:
    """Breakpoint-scoped rules for every registered layout.

    Legacy-only stylesheets get none: the fallback already covers the fixed
    layout and no other layout is reachable without media queries.
    """
    config = grid.config
    if config.legacy_support == LegacySupport.ONLY:
        logger.debug("Legacy-only output, skipping breakpoint rules")
        return
    prefix = config.class_prefix
    for layout, following in iter_layout_ranges(grid):
        until = following.name if following is not None else None
        with grid.respond_to(layout.name, until) as block:
            if config.mode != GridMode.FIXED:
                block.rule(container_selector(prefix), **container_declarations(grid, layout.name))
            _column_rules(grid, block, layout.name)


def build_stylesheet(source: Grid | GridConfig | None = None) -> Stylesheet:
    """Generate the full grid stylesheet.

    Args:
        source: A Grid (its stylesheet is filled in place) or a GridConfig
            (a fresh Grid is built). Defaults to the default configuration.

    Returns:
        The populated Stylesheet.
    """
    grid = source if isinstance(source, Grid) else Grid(source)
    generate_base_rules(grid)
    generate_legacy_fallback(grid)
    generate_layout_rules(grid)
    return grid.stylesheet


def render_css(source: Grid | GridConfig | None = None) -> str:
    return build_stylesheet(source).render()
