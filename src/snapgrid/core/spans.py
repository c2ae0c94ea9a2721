"""
Column spans and their percentage widths.

Raw span values (column counts, fractions, keywords) are resolved once into
a Span variant by ``parse_span``; everything downstream works on the
variant.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from fractions import Fraction
from typing import Any

from .errors import ConfigurationError, InvalidSpanError

DEFAULT_COLUMNS = 12

# Keyword spans and the fraction of the row they cover
NAMED_PORTIONS: dict[str, float] = {
    "one-half": 1 / 2,
    "one-quarter": 1 / 4,
    "one-third": 1 / 3,
    "two-thirds": 2 / 3,
    "three-quarters": 3 / 4,
}

FULL_WIDTH_KEYWORD = "full-width"
HIDE_KEYWORD = "hide"


@dataclass(frozen=True)
class ColumnCount:
    """``count`` columns out of the row's total."""

    count: int


@dataclass(frozen=True)
class FractionalSpan:
    """An already-fractional width, strictly between 0 and 1."""

    value: float


@dataclass(frozen=True)
class NamedPortion:
    keyword: str

    @property
    def fraction(self) -> float:
        return NAMED_PORTIONS[self.keyword]


@dataclass(frozen=True)
class FullWidth:
    pass


@dataclass(frozen=True)
class Hide:
    """No width; the element is not displayed."""

    pass


Span = ColumnCount | FractionalSpan | NamedPortion | FullWidth | Hide


def parse_span(value: Any) -> Span:
    """Resolve a raw span value into a Span.

    Accepts Span instances (returned unchanged), numbers, numeric strings
    (``"5"``, ``"0.5"``, ``"2/3"``) and the keywords ``one-half``,
    ``one-quarter``, ``one-third``, ``two-thirds``, ``three-quarters``,
    ``full-width`` and ``hide``.

    Raises:
        InvalidSpanError: If the value is not a recognised keyword or a
            usable number.
    """
    if isinstance(value, ColumnCount | FractionalSpan | NamedPortion | FullWidth | Hide):
        return value

    if isinstance(value, str):
        keyword = value.strip().lower()
        if keyword in NAMED_PORTIONS:
            return NamedPortion(keyword)
        if keyword == FULL_WIDTH_KEYWORD:
            return FullWidth()
        if keyword == HIDE_KEYWORD:
            return Hide()
        try:
            number: Any = Fraction(keyword)
        except (ValueError, ZeroDivisionError):
            raise InvalidSpanError(value, "not a span keyword or a number") from None
        return _parse_number(float(number), original=value)

    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidSpanError(value, "not a span keyword or a number")

    return _parse_number(float(value), original=value)


def _parse_number(number: float, original: Any) -> Span:
    if not math.isfinite(number) or number <= 0:
        raise InvalidSpanError(original, "span must be positive")
    if number < 1:
        return FractionalSpan(number)
    if not number.is_integer():
        raise InvalidSpanError(original, "column counts must be whole numbers")
    return ColumnCount(int(number))


def colspan(span: Any, total_columns: int = DEFAULT_COLUMNS) -> float:
    """Percentage of the row covered by ``span``.

    Numbers of one or more are column counts out of ``total_columns``;
    numbers below one are fractions of the row.

    Examples:
        >>> colspan("one-half")
        50.0
        >>> format_percentage(colspan(5, 12))
        '41.66667%'

    Raises:
        InvalidSpanError: For unrecognised values and for ``hide``, which
            has no width.
        ConfigurationError: If ``total_columns`` is below one.
    """
    if isinstance(total_columns, bool) or not isinstance(total_columns, int) or total_columns < 1:
        raise ConfigurationError(
            f"Total column count must be a positive integer, got {total_columns!r}"
        )

    resolved = parse_span(span)
    match resolved:
        case ColumnCount(count=count):
            return count / total_columns * 100
        case FractionalSpan(value=fraction):
            return fraction * 100
        case NamedPortion():
            return resolved.fraction * 100
        case FullWidth():
            return 100.0
        case Hide():
            raise InvalidSpanError(span, "hidden spans have no width")
    raise InvalidSpanError(span)


def format_percentage(value: float, precision: int = 5) -> str:
    """Render a percent number as CSS, e.g. ``41.66667%`` or ``50%``."""
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text}%"
