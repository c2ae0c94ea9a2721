"""
Container width resolution per layout and grid mode.
"""

from __future__ import annotations

from .ir.gridspec import GridMode, Length
from .registry import LayoutRegistry


def max_width_for_layout(
    registry: LayoutRegistry,
    layout_name: str,
    mode: GridMode,
    ceiling: Length,
) -> Length:
    """Effective maximum container width for a layout.

    The largest layout always resolves to ``ceiling``. Responsive modes cap
    a layout at the width where the next breakpoint begins; fixed mode uses
    the layout's own width.

    Args:
        registry: Registered layouts.
        layout_name: Layout to resolve.
        mode: Grid mode.
        ceiling: Design ceiling used for the largest layout.

    Returns:
        Container width as a Length.

    Raises:
        UnknownLayoutError: If ``layout_name`` is not registered.
    """
    following = registry.next_larger(layout_name)
    if following is None:
        return ceiling
    if mode != GridMode.FIXED:
        return Length.px(following.width)
    return Length.px(registry.width_of(layout_name))
