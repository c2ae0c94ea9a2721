"""Tests for the GridSpec configuration models and YAML loader.

Covers: IR models, lengths, loader, saving, validation.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

# =============================================================================
# IR Models
# =============================================================================


class TestGridConfig:
    def test_default_construction(self):
        from snapgrid.core.ir.gridspec import GridConfig

        config = GridConfig()
        assert config.columns == 12
        assert str(config.gutter_width) == "24px"
        assert str(config.min_width) == "320px"
        assert str(config.max_width) == "1440px"
        assert config.mode == "fluid"
        assert config.fixed_layout_name == "L"
        assert config.legacy_support == "none"
        assert config.snappy_start_layout == "M"
        assert config.layouts == {"XS": 0, "S": 400, "M": 600, "L": 840, "XL": 1280}

    def test_frozen(self):
        from snapgrid.core.ir.gridspec import GridConfig

        config = GridConfig()
        with pytest.raises(ValidationError):
            config.columns = 16  # type: ignore[misc]

    def test_enum_strings_coerced(self):
        from snapgrid.core.ir.gridspec import GridConfig, GridMode, LegacySupport

        config = GridConfig(mode="snappy", legacy_support="inline")
        assert config.mode is GridMode.SNAPPY
        assert config.legacy_support is LegacySupport.INLINE

    def test_invalid_mode(self):
        from snapgrid.core.ir.gridspec import GridConfig

        with pytest.raises(ValidationError):
            GridConfig(mode="elastic")

    def test_columns_must_be_positive(self):
        from snapgrid.core.ir.gridspec import GridConfig

        with pytest.raises(ValidationError):
            GridConfig(columns=0)

    def test_layouts_validation(self):
        from snapgrid.core.ir.gridspec import GridConfig

        with pytest.raises(ValidationError):
            GridConfig(layouts={})
        with pytest.raises(ValidationError):
            GridConfig(layouts={"XS": -10, "L": 840})

    def test_class_prefix_validation(self):
        from snapgrid.core.ir.gridspec import GridConfig

        assert GridConfig(class_prefix="sg").class_prefix == "sg"
        with pytest.raises(ValidationError):
            GridConfig(class_prefix="1grid")

    def test_legacy_class_validation(self):
        from snapgrid.core.ir.gridspec import GridConfig

        assert GridConfig().legacy_class == "lt-ie9"
        assert GridConfig(legacy_class="oldie").legacy_class == "oldie"
        with pytest.raises(ValidationError):
            GridConfig(legacy_class=".lt-ie9")

    def test_json_dump_uses_css_lengths(self):
        from snapgrid.core.ir.gridspec import GridConfig

        data = GridConfig(gutter_width="1.5rem").model_dump(mode="json")
        assert data["gutter_width"] == "1.5rem"
        assert data["mode"] == "fluid"

    def test_ir_exports(self):
        from snapgrid.core.ir import GridConfig, GridMode, LegacySupport, Length

        assert GridConfig is not None
        assert GridMode is not None
        assert LegacySupport is not None
        assert Length is not None


class TestLength:
    @pytest.mark.parametrize(
        ("raw", "value", "unit"),
        [
            ("24px", 24.0, "px"),
            ("1.5rem", 1.5, "rem"),
            ("2%", 2.0, "%"),
            ("16", 16.0, "px"),
            (16, 16.0, "px"),
            (" 0.5em ", 0.5, "em"),
        ],
    )
    def test_parse(self, raw, value, unit):
        from snapgrid.core.ir.gridspec import Length

        length = Length.model_validate(raw)
        assert length.value == value
        assert length.unit == unit

    @pytest.mark.parametrize("raw", ["wide", "12pt", "px", True])
    def test_invalid(self, raw):
        from snapgrid.core.ir.gridspec import Length

        with pytest.raises(ValidationError):
            Length.model_validate(raw)

    def test_str(self):
        from snapgrid.core.ir.gridspec import Length

        assert str(Length.px(24)) == "24px"
        assert str(Length(value=1.5, unit="rem")) == "1.5rem"
        assert str(Length.px(0)) == "0"

    def test_half_and_negate(self):
        from snapgrid.core.ir.gridspec import Length

        assert str(Length.px(24).half()) == "12px"
        assert str(Length.px(25).half()) == "12.5px"
        assert str(Length.px(24).half().negate()) == "-12px"


# =============================================================================
# Loader
# =============================================================================


class TestGridSpecLoader:
    def test_missing_file_uses_defaults(self, tmp_path: Path):
        from snapgrid.core.gridspec_loader import load_gridspec
        from snapgrid.core.ir.gridspec import GridConfig

        assert load_gridspec(tmp_path) == GridConfig()

    def test_missing_file_without_defaults(self, tmp_path: Path):
        from snapgrid.core.gridspec_loader import GridSpecError, load_gridspec

        with pytest.raises(GridSpecError, match="not found"):
            load_gridspec(tmp_path, use_defaults=False)

    def test_load_yaml(self, tmp_path: Path):
        from snapgrid.core.gridspec_loader import load_gridspec

        (tmp_path / "gridspec.yaml").write_text(
            "columns: 16\n"
            "gutter_width: 2rem\n"
            "mode: snappy\n"
            "legacy_support: inline\n"
            "layouts:\n"
            "  XS: 0\n"
            "  S: 400\n"
            "  M: 600\n"
            "  L: 840\n"
        )
        config = load_gridspec(tmp_path)
        assert config.columns == 16
        assert str(config.gutter_width) == "2rem"
        assert config.mode == "snappy"
        assert list(config.layouts) == ["XS", "S", "M", "L"]

    def test_empty_file_uses_defaults(self, tmp_path: Path):
        from snapgrid.core.gridspec_loader import load_gridspec
        from snapgrid.core.ir.gridspec import GridConfig

        (tmp_path / "gridspec.yaml").write_text("")
        assert load_gridspec(tmp_path) == GridConfig()

    def test_empty_file_without_defaults(self, tmp_path: Path):
        from snapgrid.core.gridspec_loader import GridSpecError, load_gridspec

        (tmp_path / "gridspec.yaml").write_text("")
        with pytest.raises(GridSpecError, match="Empty"):
            load_gridspec(tmp_path, use_defaults=False)

    def test_invalid_yaml(self, tmp_path: Path):
        from snapgrid.core.gridspec_loader import GridSpecError, load_gridspec

        (tmp_path / "gridspec.yaml").write_text("layouts: [unclosed\n")
        with pytest.raises(GridSpecError, match="Invalid YAML"):
            load_gridspec(tmp_path)

    def test_schema_error(self, tmp_path: Path):
        from snapgrid.core.gridspec_loader import GridSpecError, load_gridspec

        (tmp_path / "gridspec.yaml").write_text("columns: zero\n")
        with pytest.raises(GridSpecError, match="Invalid GridSpec schema"):
            load_gridspec(tmp_path)

    def test_not_a_mapping(self, tmp_path: Path):
        from snapgrid.core.gridspec_loader import GridSpecError, load_gridspec_file

        path = tmp_path / "grid.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(GridSpecError, match="Expected a mapping"):
            load_gridspec_file(path)

    def test_grid_errors_are_catchable_together(self):
        from snapgrid.core.errors import GridError
        from snapgrid.core.gridspec_loader import GridSpecError

        assert issubclass(GridSpecError, GridError)

    def test_save_and_reload(self, tmp_path: Path):
        from snapgrid.core.gridspec_loader import load_gridspec, save_gridspec
        from snapgrid.core.ir.gridspec import GridConfig, GridMode

        config = GridConfig(mode=GridMode.FIXED, gutter_width="30px", columns=10)
        path = save_gridspec(tmp_path, config)
        assert path.name == "gridspec.yaml"
        assert "gutter_width: 30px" in path.read_text()
        assert load_gridspec(tmp_path) == config


# =============================================================================
# Validation
# =============================================================================


class TestValidateGridSpec:
    def test_default_is_valid(self):
        from snapgrid.core.gridspec_loader import validate_gridspec
        from snapgrid.core.ir.gridspec import GridConfig

        result = validate_gridspec(GridConfig())
        assert result.is_valid
        assert result.warnings == []

    def test_unknown_layout_references(self):
        from snapgrid.core.gridspec_loader import validate_gridspec
        from snapgrid.core.ir.gridspec import GridConfig

        result = validate_gridspec(
            GridConfig(fixed_layout_name="Desktop", snappy_start_layout="Tablet")
        )
        assert not result.is_valid
        assert len(result.errors) == 2

    def test_duplicate_widths(self):
        from snapgrid.core.gridspec_loader import validate_gridspec
        from snapgrid.core.ir.gridspec import GridConfig

        result = validate_gridspec(
            GridConfig(layouts={"XS": 0, "S": 400, "M": 600, "Tablet": 600, "L": 840})
        )
        assert any("share the width 600px" in error for error in result.errors)

    def test_narrow_ceiling_warns(self):
        from snapgrid.core.gridspec_loader import validate_gridspec
        from snapgrid.core.ir.gridspec import GridConfig

        result = validate_gridspec(GridConfig(max_width="1000px"))
        assert result.is_valid
        assert any("narrower" in warning for warning in result.warnings)

    def test_unused_snappy_start_warns(self):
        from snapgrid.core.gridspec_loader import validate_gridspec
        from snapgrid.core.ir.gridspec import GridConfig

        result = validate_gridspec(GridConfig(snappy_start_layout="L"))
        assert any("snappy_start_layout" in warning for warning in result.warnings)

    def test_repr(self):
        from snapgrid.core.gridspec_loader import GridSpecValidationResult

        assert repr(GridSpecValidationResult()) == "GridSpecValidationResult(errors=0, warnings=0)"
