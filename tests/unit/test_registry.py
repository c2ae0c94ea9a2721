"""Tests for the layout registry."""

from __future__ import annotations

import itertools

import pytest

from snapgrid.core.errors import ConfigurationError, DuplicateLayoutError, UnknownLayoutError
from snapgrid.core.registry import Layout, LayoutRegistry


class TestAddLayout:
    def test_insert_between_existing_layouts(self, registry: LayoutRegistry):
        registry.add_layout("P", 500)
        assert registry.layout_names() == ("XS", "S", "P", "M", "L", "XL")

    def test_insert_smallest_and_largest(self, registry: LayoutRegistry):
        registry.add_layout("XXL", 1920)
        assert registry.layout_names()[-1] == "XXL"

        tiny = LayoutRegistry({"S": 400, "M": 600})
        tiny.add_layout("XS", 0)
        assert tiny.layout_names() == ("XS", "S", "M")

    def test_returns_layout(self, registry: LayoutRegistry):
        layout = registry.add_layout("P", 500)
        assert layout == Layout(name="P", width=500)

    def test_unordered_mapping_is_sorted(self):
        registry = LayoutRegistry({"XL": 1280, "XS": 0, "M": 600, "S": 400, "L": 840})
        assert registry.layout_names() == ("XS", "S", "M", "L", "XL")

    def test_any_insertion_order_stays_sorted(self):
        widths = {"a": 0, "b": 320, "c": 480, "d": 768, "e": 1024}
        for order in itertools.permutations(widths):
            registry = LayoutRegistry()
            for name in order:
                registry.add_layout(name, widths[name])
                registered = [layout.width for layout in registry]
                assert registered == sorted(registered)
            assert registry.layout_names() == ("a", "b", "c", "d", "e")

    def test_existing_entries_keep_relative_order(self, registry: LayoutRegistry):
        before = registry.layout_names()
        registry.add_layout("P", 700)
        after = tuple(name for name in registry.layout_names() if name != "P")
        assert after == before

    def test_duplicate_name_rejected(self, registry: LayoutRegistry):
        with pytest.raises(DuplicateLayoutError, match="already registered"):
            registry.add_layout("M", 700)
        assert len(registry) == 5

    def test_duplicate_width_rejected(self, registry: LayoutRegistry):
        with pytest.raises(DuplicateLayoutError, match="same width"):
            registry.add_layout("Tablet", 600)
        assert "Tablet" not in registry

    def test_negative_width_rejected(self, registry: LayoutRegistry):
        with pytest.raises(ConfigurationError):
            registry.add_layout("Neg", -1)

    def test_fractional_width_rejected_before_width_check(self, registry: LayoutRegistry):
        with pytest.raises(ConfigurationError, match="whole pixels") as excinfo:
            registry.add_layout("Q", 400.7)
        assert not isinstance(excinfo.value, DuplicateLayoutError)
        assert "Q" not in registry

    def test_whole_float_width_accepted(self, registry: LayoutRegistry):
        layout = registry.add_layout("Q", 500.0)
        assert layout == Layout(name="Q", width=500)
        assert isinstance(registry.width_of("Q"), int)

    @pytest.mark.parametrize("width", [True, "500", None])
    def test_non_numeric_width_rejected(self, registry: LayoutRegistry, width):
        with pytest.raises(ConfigurationError, match="must be a number"):
            registry.add_layout("Q", width)

    def test_duplicate_is_a_configuration_error(self, registry: LayoutRegistry):
        with pytest.raises(ConfigurationError):
            registry.add_layout("XS", 10)


class TestLookups:
    def test_width_of(self, registry: LayoutRegistry):
        assert registry.width_of("L") == 840

    def test_next_larger(self, registry: LayoutRegistry):
        assert registry.next_larger("M") == Layout("L", 840)
        assert registry.next_larger("XL") is None

    def test_largest(self, registry: LayoutRegistry):
        assert registry.largest().name == "XL"

    def test_largest_on_empty_registry(self):
        with pytest.raises(ConfigurationError):
            LayoutRegistry().largest()

    def test_index_of(self, registry: LayoutRegistry):
        assert registry.index_of("XS") == 0
        assert registry.index_of("XL") == 4

    def test_unknown_layout(self, registry: LayoutRegistry):
        with pytest.raises(UnknownLayoutError) as exc_info:
            registry.width_of("Huge")
        assert exc_info.value.name == "Huge"
        assert "XS" in str(exc_info.value)

    def test_unknown_layout_in_next_larger(self, registry: LayoutRegistry):
        with pytest.raises(UnknownLayoutError):
            registry.next_larger("Huge")

    def test_container_protocol(self, registry: LayoutRegistry):
        assert "M" in registry
        assert "Huge" not in registry
        assert len(registry) == 5
        assert [layout.name for layout in registry] == list(registry.layout_names())

    def test_repr(self, registry: LayoutRegistry):
        assert repr(registry).startswith("LayoutRegistry(XS=0, S=400")
