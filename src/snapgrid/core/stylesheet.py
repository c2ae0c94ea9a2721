"""
Minimal rule/block model that generated CSS is written into.

This is not a CSS object model: it only holds what the grid generators
emit (plain rules and ``@media`` blocks) and renders it to text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

_INDENT = "  "


@dataclass
class Rule:
    """A selector with its declarations, in insertion order."""

    selector: str
    declarations: dict[str, Any] = field(default_factory=dict)

    def render(self, depth: int = 0) -> str:
        pad = _INDENT * depth
        lines = [f"{pad}{self.selector} {{"]
        for prop, value in self.declarations.items():
            lines.append(f"{pad}{_INDENT}{prop}: {value};")
        lines.append(f"{pad}}}")
        return "\n".join(lines)


@dataclass
class Block:
    """A group of rules, optionally wrapped in an ``@media`` condition.

    A detached block is never rendered; rules added to it are discarded.
    """

    condition: str | None = None
    items: list[Rule | Block] = field(default_factory=list)
    detached: bool = False

    def add(self, rule: Rule) -> Rule:
        self.items.append(rule)
        return rule

    def rule(self, selector: str, **declarations: Any) -> Rule:
        """Add a rule; underscores in keyword names become hyphens."""
        props = {name.replace("_", "-"): value for name, value in declarations.items()}
        return self.add(Rule(selector, props))

    def open(self, condition: str | None) -> Block:
        child = Block(condition=condition, detached=self.detached)
        self.items.append(child)
        return child

    @property
    def rules(self) -> list[Rule]:
        """All rules in this block and its children, in document order."""
        found: list[Rule] = []
        for item in self.items:
            if isinstance(item, Block):
                found.extend(item.rules)
            else:
                found.append(item)
        return found

    def is_empty(self) -> bool:
        return not self.rules

    def render(self, depth: int = 0) -> str:
        if self.detached or self.is_empty():
            return ""
        inner_depth = depth if self.condition is None else depth + 1
        parts = [
            text
            for text in (item.render(inner_depth) for item in self.items)
            if text
        ]
        body = "\n".join(parts)
        if self.condition is None:
            return body
        pad = _INDENT * depth
        return f"{pad}@media {self.condition} {{\n{body}\n{pad}}}"


class Stylesheet:
    """Top-level container for generated rules."""

    def __init__(self) -> None:
        self.root = Block()

    @property
    def rules(self) -> list[Rule]:
        return self.root.rules

    @property
    def media_blocks(self) -> list[Block]:
        return [item for item in self.root.items if isinstance(item, Block) and item.condition]

    def render(self) -> str:
        text = self.root.render()
        return f"{text}\n" if text else ""
