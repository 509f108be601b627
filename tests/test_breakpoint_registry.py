"""BreakpointRegistry tests: registration, overwrite and config load."""

import pytest

from adunits.domain.breakpoints import (
    Breakpoint,
    BreakpointRegistry,
    SimpleIdentifier,
    StructuredIdentifier,
    resolve_identifier,
)
from adunits.domain.errors import InvalidIdentifier


class TestRegister:
    """register(): last write wins, bad input is a no-op."""

    def test_register_simple_identifier(self):
        registry = BreakpointRegistry()
        assert registry.register("mobile", 0, 767) is True
        assert registry.get("mobile") == Breakpoint("mobile", 0, 767)

    def test_duplicate_identifier_overwrites(self):
        registry = BreakpointRegistry()
        registry.register("mobile", 0, 767)
        registry.register("mobile", 0, 599)
        assert len(registry) == 1
        assert registry.get("mobile").max_width == 599

    def test_size_never_exceeds_distinct_identifiers(self):
        registry = BreakpointRegistry()
        for name in ["a", "b", "a", "c", "b", "a"]:
            registry.register(name, 0, 100)
        assert len(registry) == 3

    def test_structured_request_uses_identifier_field(self):
        registry = BreakpointRegistry()
        assert registry.register({"identifier": "tablet", "min-width": 768, "max-width": 1023}) is True
        bp = registry.get("tablet")
        assert bp.min_width == 768
        assert bp.max_width == 1023

    def test_explicit_widths_take_precedence_over_structured_fields(self):
        registry = BreakpointRegistry()
        registry.register({"identifier": "tablet", "min_width": 1, "max_width": 2}, 768, 1023)
        assert registry.get("tablet").width_range == [768, 1023]

    def test_missing_max_width_is_unbounded(self):
        registry = BreakpointRegistry()
        registry.register("desktop", 1024)
        assert registry.get("desktop").max_width is None

    @pytest.mark.parametrize("unbounded", ["unbounded", "", "none", None])
    def test_structured_request_accepts_unbounded_spellings(self, unbounded):
        registry = BreakpointRegistry()
        assert registry.register({"identifier": "desktop", "min-width": 1024, "max-width": unbounded}) is True
        assert registry.get("desktop").width_range == [1024, None]

    @pytest.mark.parametrize("bad", [None, "", "   ", 42, ["mobile"], {"min-width": 0}, {"identifier": ""}])
    def test_invalid_identifier_rejected_without_mutation(self, bad):
        registry = BreakpointRegistry()
        registry.register("mobile", 0, 767)
        revision = registry.revision
        assert registry.register(bad, 0, 100) is False
        assert len(registry) == 1
        assert registry.revision == revision

    def test_inverted_range_rejected(self):
        registry = BreakpointRegistry()
        assert registry.register("broken", 800, 400) is False
        assert "broken" not in registry

    def test_negative_min_width_rejected(self):
        registry = BreakpointRegistry()
        assert registry.register("broken", -1, 400) is False

    def test_iteration_keeps_insertion_order(self):
        registry = BreakpointRegistry()
        registry.register("desktop", 1024)
        registry.register("mobile", 0, 767)
        assert [bp.identifier for bp in registry] == ["desktop", "mobile"]


class TestBreakpointEquality:
    """from_config is bookkeeping only."""

    def test_from_config_ignored_by_equality(self):
        assert Breakpoint("mobile", 0, 767, from_config=True) == Breakpoint("mobile", 0, 767)

    def test_code_registration_replaces_config_entry(self):
        registry = BreakpointRegistry()
        registry.load_from_config([{"identifier": "mobile", "min-width": 0, "max-width": 767}])
        assert registry.get("mobile").from_config is True
        registry.register("mobile", 0, 640)
        assert registry.get("mobile").from_config is False
        assert registry.get("mobile").max_width == 640


class TestResolveIdentifier:
    def test_string_is_simple(self):
        assert resolve_identifier("mobile") == SimpleIdentifier("mobile")

    def test_mapping_is_structured(self):
        request = resolve_identifier({"identifier": "mobile", "min-width": 0})
        assert isinstance(request, StructuredIdentifier)
        assert request.value == "mobile"

    def test_other_shapes_raise(self):
        with pytest.raises(InvalidIdentifier):
            resolve_identifier(3.5)


class TestLoadFromConfig:
    """Malformed stored entries are skipped one at a time."""

    def test_entry_missing_min_width_is_skipped(self):
        registry = BreakpointRegistry()
        loaded = registry.load_from_config(
            [
                {"identifier": "mobile", "min-width": 0, "max-width": 767},
                {"identifier": "tablet", "max-width": 1023},
                {"identifier": "desktop", "min-width": 1024, "max-width": ""},
            ]
        )
        assert loaded == 2
        assert "tablet" not in registry
        assert registry.get("mobile").from_config is True
        assert registry.get("desktop").max_width is None

    def test_string_widths_are_coerced(self):
        registry = BreakpointRegistry()
        registry.load_from_config([{"identifier": "mobile", "min-width": "0", "max-width": "767"}])
        assert registry.get("mobile").width_range == [0, 767]

    @pytest.mark.parametrize(
        "entry",
        [
            "mobile",
            None,
            {"min-width": 0, "max-width": 767},
            {"identifier": "", "min-width": 0, "max-width": 767},
            {"identifier": "x", "min-width": "wide", "max-width": 767},
            {"identifier": "x", "min-width": 0},
            {"identifier": "x", "min-width": 900, "max-width": 300},
        ],
    )
    def test_malformed_entries_do_not_abort_load(self, entry):
        registry = BreakpointRegistry()
        loaded = registry.load_from_config([entry, {"identifier": "ok", "min-width": 0, "max-width": 10}])
        assert loaded == 1
        assert [bp.identifier for bp in registry] == ["ok"]

    def test_empty_or_missing_config_loads_nothing(self):
        registry = BreakpointRegistry()
        assert registry.load_from_config(None) == 0
        assert registry.load_from_config([]) == 0

    def test_non_list_config_is_ignored(self):
        registry = BreakpointRegistry()
        assert registry.load_from_config({"identifier": "mobile"}) == 0
        assert len(registry) == 0
