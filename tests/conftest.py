"""Shared pytest fixtures for snapgrid tests."""

from __future__ import annotations

import pytest

from snapgrid.core.grid import Grid
from snapgrid.core.ir.gridspec import GridConfig, GridMode, LegacySupport
from snapgrid.core.registry import LayoutRegistry

STANDARD_LAYOUTS = {"XS": 0, "S": 400, "M": 600, "L": 840, "XL": 1280}


@pytest.fixture
def registry() -> LayoutRegistry:
    """Registry with the standard XS..XL layouts."""
    return LayoutRegistry(STANDARD_LAYOUTS)


@pytest.fixture
def config() -> GridConfig:
    return GridConfig(layouts=dict(STANDARD_LAYOUTS), max_width="1440px")


@pytest.fixture
def grid(config: GridConfig) -> Grid:
    return Grid(config)


@pytest.fixture
def legacy_grid() -> Grid:
    """Grid that writes legacy fallbacks inline with modern rules."""
    return Grid(
        GridConfig(
            layouts=dict(STANDARD_LAYOUTS),
            legacy_support=LegacySupport.INLINE,
            fixed_layout_name="L",
        )
    )


@pytest.fixture
def legacy_only_grid() -> Grid:
    return Grid(
        GridConfig(
            layouts=dict(STANDARD_LAYOUTS),
            legacy_support=LegacySupport.ONLY,
            fixed_layout_name="L",
            mode=GridMode.FIXED,
        )
    )
