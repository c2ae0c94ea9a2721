"""
snapgrid Intermediate Representation (IR) types.

All types are re-exported from this package.
"""

from .gridspec import (
    DEFAULT_LAYOUTS,
    GridConfig,
    GridMode,
    LegacySupport,
    Length,
)

__all__ = [
    "DEFAULT_LAYOUTS",
    "GridConfig",
    "GridMode",
    "LegacySupport",
    "Length",
]
