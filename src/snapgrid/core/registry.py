"""
Layout registry.

Keeps named layouts ordered by ascending pixel width. Every insertion
preserves the ordering, so iteration order is always breakpoint order.
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from .errors import ConfigurationError, DuplicateLayoutError, UnknownLayoutError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Layout:
    """A named breakpoint and its pixel width."""

    name: str
    width: int


class LayoutRegistry:
    """Ordered collection of layouts with unique names and widths."""

    def __init__(self, layouts: Mapping[str, int] | None = None):
        self._layouts: list[Layout] = []
        for name, width in (layouts or {}).items():
            self.add_layout(name, width)

    def add_layout(self, name: str, width: int) -> Layout:
        """Insert a layout at its rank.

        The new layout goes immediately before the first registered layout
        whose width is not less than its own. Existing entries keep their
        relative order.

        Raises:
            DuplicateLayoutError: If the name or the width is already taken.
            ConfigurationError: If the width is negative or not a whole
                number of pixels.
        """
        if isinstance(width, bool) or not isinstance(width, numbers.Real):
            raise ConfigurationError(f"Layout '{name}' width must be a number, got {width!r}")
        if not float(width).is_integer():
            raise ConfigurationError(f"Layout '{name}' width must be whole pixels, got {width}")
        if width < 0:
            raise ConfigurationError(f"Layout '{name}' has negative width {width}")
        if name in self:
            raise DuplicateLayoutError(f"Layout '{name}' is already registered")

        layout = Layout(name=name, width=int(width))
        position = len(self._layouts)
        for index, existing in enumerate(self._layouts):
            if existing.width == layout.width:
                raise DuplicateLayoutError(
                    f"Layout '{name}' has the same width ({width}px) as '{existing.name}'"
                )
            if existing.width > layout.width:
                position = index
                break

        self._layouts.insert(position, layout)
        logger.debug("Registered layout %s (%spx) at rank %d", name, width, position)
        return layout

    def layout_names(self) -> tuple[str, ...]:
        """Layout names in ascending width order."""
        return tuple(layout.name for layout in self._layouts)

    def get(self, name: str) -> Layout:
        for layout in self._layouts:
            if layout.name == name:
                return layout
        raise UnknownLayoutError(name, self.layout_names())

    def width_of(self, name: str) -> int:
        return self.get(name).width

    def index_of(self, name: str) -> int:
        for index, layout in enumerate(self._layouts):
            if layout.name == name:
                return index
        raise UnknownLayoutError(name, self.layout_names())

    def next_larger(self, name: str) -> Layout | None:
        """The layout ranked right after ``name``, or None for the largest."""
        index = self.index_of(name)
        if index + 1 < len(self._layouts):
            return self._layouts[index + 1]
        return None

    def largest(self) -> Layout:
        if not self._layouts:
            raise ConfigurationError("No layouts registered")
        return self._layouts[-1]

    def __contains__(self, name: object) -> bool:
        return any(layout.name == name for layout in self._layouts)

    def __iter__(self) -> Iterator[Layout]:
        return iter(tuple(self._layouts))

    def __len__(self) -> int:
        return len(self._layouts)

    def __repr__(self) -> str:
        entries = ", ".join(f"{layout.name}={layout.width}" for layout in self._layouts)
        return f"LayoutRegistry({entries})"
