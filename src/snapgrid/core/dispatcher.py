"""
Mode/target dispatcher.

Decides whether generated rules land in a legacy fallback, a
breakpoint-scoped ``@media`` block, or a modern-browser block, and tracks
whether generation is currently inside a breakpoint.

Usage::

    with dispatcher.respond_to("M", "L") as block:
        block.rule(".grid-row", max_width="840px")
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from enum import StrEnum

from .errors import ConfigurationError
from .ir.gridspec import LegacySupport
from .registry import LayoutRegistry
from .stylesheet import Block, Rule, Stylesheet

logger = logging.getLogger(__name__)

# IE8 does not understand media features, so it skips this block entirely.
MODERN_BROWSER_CONDITION = "all and (min-width: 0px)"


class Scope(StrEnum):
    """Where rule generation currently is."""

    GLOBAL = "global"
    INSIDE_BREAKPOINT = "inside_breakpoint"


def media_condition(lower: int | None, upper: int | None) -> str:
    """Media query for ``lower <= viewport < upper`` (pixel widths)."""
    parts = []
    if lower is not None:
        parts.append(f"(min-width: {lower}px)")
    if upper is not None:
        parts.append(f"(max-width: {upper - 1}px)")
    return " and ".join(parts)


class Dispatcher:
    """Routes generated rules according to scope and legacy settings."""

    def __init__(
        self,
        registry: LayoutRegistry,
        stylesheet: Stylesheet,
        legacy_support: LegacySupport = LegacySupport.NONE,
        fixed_layout_name: str | None = None,
    ):
        self.registry = registry
        self.stylesheet = stylesheet
        self.legacy_support = legacy_support
        self.fixed_layout_name = fixed_layout_name
        self._scopes: list[Scope] = [Scope.GLOBAL]
        self._blocks: list[Block] = [stylesheet.root]

    @property
    def scope(self) -> Scope:
        return self._scopes[-1]

    @property
    def current_block(self) -> Block:
        return self._blocks[-1]

    def emit(self, rule: Rule) -> Rule:
        return self.current_block.add(rule)

    @contextmanager
    def _entered(self, block: Block, scope: Scope) -> Generator[Block, None, None]:
        self._scopes.append(scope)
        self._blocks.append(block)
        try:
            yield block
        finally:
            self._blocks.pop()
            self._scopes.pop()

    @contextmanager
    def respond_to(
        self, from_: str | None = None, until: str | None = None
    ) -> Generator[Block, None, None]:
        """Scope the body to viewports from ``from_`` (inclusive) up to
        ``until`` (exclusive).

        When only legacy output is requested there are no media queries:
        the body is written unwrapped if the range covers the fixed layout,
        and discarded otherwise.

        Raises:
            ConfigurationError: If no bound is given, a bound is not a
                registered layout, or the range is empty.
        """
        if from_ is None and until is None:
            raise ConfigurationError("respond_to needs at least one of 'from_' or 'until'")
        lower = self.registry.width_of(from_) if from_ is not None else None
        upper = self.registry.width_of(until) if until is not None else None
        if upper is not None and upper <= (lower or 0):
            raise ConfigurationError(
                f"Empty breakpoint range: from {from_!r} ({lower}px) until {until!r} ({upper}px)"
            )

        if self.legacy_support == LegacySupport.ONLY:
            if self._covers_fixed_layout(lower, upper):
                block = self.current_block
            else:
                block = Block(detached=True)
        else:
            block = self.current_block.open(media_condition(lower, upper))

        previous = self.scope
        logger.debug("Entering breakpoint %s..%s (scope was %s)", from_, until, previous)
        with self._entered(block, Scope.INSIDE_BREAKPOINT):
            yield block
        logger.debug("Left breakpoint %s..%s (scope restored to %s)", from_, until, self.scope)

    @contextmanager
    def target_legacy_browser(self) -> Generator[Block, None, None]:
        """Body is kept only when legacy output is enabled and generation is
        not inside a breakpoint."""
        if self.legacy_support != LegacySupport.NONE and self.scope == Scope.GLOBAL:
            block = self.current_block
        else:
            block = Block(detached=True)
        with self._entered(block, self.scope):
            yield block

    @contextmanager
    def target_modern_browsers(self) -> Generator[Block, None, None]:
        """Body is hidden from legacy browsers unless it is already scoped
        or only legacy output is being generated."""
        if self.scope == Scope.INSIDE_BREAKPOINT or self.legacy_support == LegacySupport.ONLY:
            block = self.current_block
        else:
            block = self.current_block.open(MODERN_BROWSER_CONDITION)
        with self._entered(block, self.scope):
            yield block

    def _covers_fixed_layout(self, lower: int | None, upper: int | None) -> bool:
        if self.fixed_layout_name is None:
            return False
        width = self.registry.width_of(self.fixed_layout_name)
        if lower is not None and width < lower:
            return False
        if upper is not None and width >= upper:
            return False
        return True
