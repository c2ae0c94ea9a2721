"""
GridSpec persistence layer.

Handles reading and writing GridConfig to gridspec.yaml in the project
root, plus semantic validation of a loaded configuration.

Default location: {project_root}/gridspec.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import GridError
from .ir.gridspec import GridConfig, GridMode, LegacySupport

logger = logging.getLogger(__name__)

GRIDSPEC_FILE = "gridspec.yaml"


class GridSpecError(GridError):
    """Error loading or validating a GridSpec file."""

    pass


# =============================================================================
# Path helpers
# =============================================================================


def get_gridspec_path(project_root: Path) -> Path:
    """Get the gridspec.yaml file path."""
    return project_root / GRIDSPEC_FILE


def gridspec_exists(project_root: Path) -> bool:
    return get_gridspec_path(project_root).exists()


# =============================================================================
# Loading
# =============================================================================


def create_default_gridspec() -> GridConfig:
    return GridConfig()


def _parse_gridspec_data(data: dict[str, Any], source: Path) -> GridConfig:
    if not isinstance(data, dict):
        raise GridSpecError(f"Expected a mapping at the top of {source}, got {type(data).__name__}")
    try:
        return GridConfig(**data)
    except ValidationError as e:
        raise GridSpecError(f"Invalid GridSpec schema in {source}: {e}") from e
    except TypeError as e:
        raise GridSpecError(f"Failed to parse GridSpec in {source}: {e}") from e


def load_gridspec_file(path: Path, *, use_defaults: bool = True) -> GridConfig:
    """Load a GridConfig from an explicit YAML file.

    Args:
        path: YAML file to read.
        use_defaults: If True, return the default config when the file is
            missing or empty.

    Raises:
        GridSpecError: If the file is missing (when use_defaults=False),
            not valid YAML, or does not match the schema.
    """
    if not path.exists():
        if use_defaults:
            logger.debug("No %s found, using defaults", path)
            return create_default_gridspec()
        raise GridSpecError(f"GridSpec not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise GridSpecError(f"Invalid YAML in {path}: {e}") from e

    if not data:
        if use_defaults:
            logger.warning("Empty %s, using defaults", path)
            return create_default_gridspec()
        raise GridSpecError(f"Empty or invalid YAML in {path}")

    return _parse_gridspec_data(data, path)


def load_gridspec(project_root: Path, *, use_defaults: bool = True) -> GridConfig:
    """Load GridConfig from {project_root}/gridspec.yaml."""
    return load_gridspec_file(get_gridspec_path(project_root), use_defaults=use_defaults)


def save_gridspec(project_root: Path, config: GridConfig) -> Path:
    """Save GridConfig to gridspec.yaml.

    Returns:
        Path to the saved file.
    """
    gridspec_path = get_gridspec_path(project_root)
    data = config.model_dump(mode="json")

    gridspec_path.write_text(
        yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )

    logger.info("Saved GridSpec to %s", gridspec_path)
    return gridspec_path


# =============================================================================
# Validation
# =============================================================================


class GridSpecValidationResult:
    """Result of GridSpec validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def __repr__(self) -> str:
        return f"GridSpecValidationResult(errors={len(self.errors)}, warnings={len(self.warnings)})"


def validate_gridspec(config: GridConfig) -> GridSpecValidationResult:
    """Check a GridConfig for problems the schema cannot express."""
    result = GridSpecValidationResult()
    layouts = config.layouts

    for field_name in ("fixed_layout_name", "snappy_start_layout"):
        name = getattr(config, field_name)
        if name not in layouts:
            result.add_error(f"{field_name} '{name}' is not a configured layout")

    seen: dict[int, str] = {}
    for name, width in layouts.items():
        if width in seen:
            result.add_error(f"Layouts '{seen[width]}' and '{name}' share the width {width}px")
        seen[width] = name

    largest = max(layouts.values())
    if config.max_width.unit == "px" and config.max_width.value < largest:
        result.add_warning(
            f"max_width {config.max_width} is narrower than the largest layout ({largest}px)"
        )

    if config.mode != GridMode.SNAPPY and "snappy_start_layout" in config.model_fields_set:
        result.add_warning("snappy_start_layout has no effect unless mode is 'snappy'")

    fixed_unused = config.legacy_support == LegacySupport.NONE and config.mode != GridMode.FIXED
    if fixed_unused and "fixed_layout_name" in config.model_fields_set:
        result.add_warning("fixed_layout_name has no effect without legacy support or fixed mode")

    return result
