"""
Error types for snapgrid configuration and rule generation.
"""

from typing import Any


class GridError(Exception):
    """Base exception for all snapgrid errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(GridError):
    """
    Raised when the grid configuration is inconsistent.

    Examples:
    - Column count below one
    - Breakpoint bounds in the wrong order
    - Negative layout width
    """

    pass


class DuplicateLayoutError(ConfigurationError):
    """
    Raised when a layout cannot be registered because it collides with an
    existing entry.

    Examples:
    - Layout name already registered
    - Layout width already taken by another layout
    """

    pass


class UnknownLayoutError(ConfigurationError):
    """Raised when a layout name is not present in the registry."""

    def __init__(self, name: str, known: tuple[str, ...] = ()):
        self.name = name
        self.known = known
        message = f"Unknown layout '{name}'"
        if known:
            message += f" (registered: {', '.join(known)})"
        super().__init__(message)


class InvalidSpanError(ConfigurationError):
    """
    Raised when a span value cannot be turned into a column width.

    Examples:
    - Unrecognised keyword ("one-fifth")
    - Non-numeric value
    - Zero, negative or non-integral column counts
    - ``hide`` passed where a width is required
    """

    def __init__(self, value: Any, reason: str | None = None):
        self.value = value
        message = f"Invalid span {value!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
