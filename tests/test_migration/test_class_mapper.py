"""Tests for Tailwind class mapping and compatibility reporting."""

import re

import pytest

from brisk.cache import PatternCache
from brisk.migration import (
    ClassMapper,
    ClassMapping,
    MappingRule,
    analyze_class_compatibility,
    extract_classes,
    generate_migration_suggestions,
    get_class_category,
    group_classes_by_category,
    map_class,
    map_classes,
)
from brisk.migration.mapper import UNKNOWN_WARNING, substitute_template


@pytest.fixture()
def mapper() -> ClassMapper:
    return ClassMapper()


# ---------------------------------------------------------------------------
# map_class
# ---------------------------------------------------------------------------


class TestMapClass:
    def test_compatible_class_unchanged(self, mapper: ClassMapper) -> None:
        mapping = mapper.map_class("p-4")
        assert mapping == ClassMapping(original="p-4", compatible=True)

    def test_deprecated_divide_width(self, mapper: ClassMapper) -> None:
        mapping = mapper.map_class("divide-x-2")
        assert mapping.mapped == "border-x-2"
        assert mapping.deprecated
        assert not mapping.compatible
        assert mapping.replacement == "border-x-2"
        assert "divide-*" in mapping.warning

    def test_deprecated_divide_style(self, mapper: ClassMapper) -> None:
        mapping = mapper.map_class("divide-dashed")
        assert mapping.mapped == "border-dashed"
        assert mapping.deprecated

    def test_tailwind_directive(self, mapper: ClassMapper) -> None:
        mapping = mapper.map_class("@tailwind utilities")
        assert mapping.mapped == "@layer utilities"
        assert not mapping.compatible
        assert mapping.warning == "Replace @tailwind directive with @layer"

    def test_unknown_utility_shape_warns(self, mapper: ClassMapper) -> None:
        mapping = mapper.map_class("foo-bar")
        assert mapping.compatible
        assert mapping.warning == UNKNOWN_WARNING

    def test_arbitrary_class_carries_over(self, mapper: ClassMapper) -> None:
        mapping = mapper.map_class("[mask-type:luminance]")
        assert mapping.compatible
        assert mapping.warning is None

    def test_custom_mapping_first(self, mapper: ClassMapper) -> None:
        mapping = mapper.map_class("divide-x-2", {"divide-x-2": "border-l-2"})
        assert mapping == ClassMapping(original="divide-x-2", mapped="border-l-2", compatible=True)

    def test_empty_custom_mapping_ignored(self, mapper: ClassMapper) -> None:
        assert mapper.map_class("divide-x-2", {"divide-x-2": ""}).deprecated

    def test_first_rule_wins(self) -> None:
        rules = [
            MappingRule(r"^old-(.+)$", "new-$1", True, name="first"),
            MappingRule(r"^old-(.+)$", "other-$1", False, name="second"),
        ]
        mapping = ClassMapper(rules=rules).map_class("old-thing")
        assert mapping.mapped == "new-thing"
        assert mapping.compatible

    def test_ring_offset_shadowed_by_colors(self, mapper: ClassMapper) -> None:
        # the earlier colors rule claims ring-* so the ring-offset warning never fires
        assert mapper.map_class("ring-offset-2") == ClassMapping(original="ring-offset-2", compatible=True)

    def test_callable_replacement(self) -> None:
        rules = [MappingRule(r"^size-(\d+)$", lambda m: f"w-{m.group(1)} h-{m.group(1)}", True, name="size")]
        assert ClassMapper(rules=rules).map_class("size-4").mapped == "w-4 h-4"

    def test_inputs_not_mutated(self, mapper: ClassMapper) -> None:
        tokens = ["p-4", "divide-x-2"]
        mapper.map_classes(tokens)
        assert tokens == ["p-4", "divide-x-2"]

    def test_patterns_compiled_through_cache(self) -> None:
        cache = PatternCache()
        ClassMapper(cache).map_class("p-4")
        assert "migration:spacing" in cache


class TestSubstituteTemplate:
    def test_groups_and_whole_match(self) -> None:
        match = re.match(r"divide-(x|y)-(.+)", "divide-x-2")
        assert substitute_template("border-$1-$2", match) == "border-x-2"
        assert substitute_template("[$&]", match) == "[divide-x-2]"

    def test_unmatched_group_is_empty(self) -> None:
        match = re.match(r"a(b)?", "a")
        assert substitute_template("x$1y", match) == "xy"

    def test_out_of_range_group_left(self) -> None:
        match = re.match(r"(a)", "a")
        assert substitute_template("$1$2", match) == "a$2"


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------


class TestCompatibilityReport:
    def test_mixed_list(self, mapper: ClassMapper) -> None:
        report = mapper.analyze_class_compatibility(["p-4", "divide-x-2", "bg-red-500"])
        assert report.total == 3
        assert report.compatible == 2
        assert [m.original for m in report.deprecated] == ["divide-x-2"]
        assert [m.original for m in report.incompatible] == ["divide-x-2"]
        assert report.warnings == ()
        assert report.compatibility_rate == 67

    def test_empty_list_is_fully_compatible(self, mapper: ClassMapper) -> None:
        report = mapper.analyze_class_compatibility([])
        assert report.total == 0
        assert report.compatibility_rate == 100

    def test_warnings_do_not_count_as_compatible(self, mapper: ClassMapper) -> None:
        report = mapper.analyze_class_compatibility(["p-4", "foo-bar"])
        assert report.compatible == 1
        assert [m.original for m in report.warnings] == ["foo-bar"]
        assert report.compatibility_rate == 50

    def test_half_rounds_up(self, mapper: ClassMapper) -> None:
        tokens = ["p-4"] + ["foo-bar"] * 7
        assert mapper.analyze_class_compatibility(tokens).compatibility_rate == 13

    def test_summary(self, mapper: ClassMapper) -> None:
        report = mapper.analyze_class_compatibility(["p-4", "divide-x-2", "bg-red-500"])
        assert report.summary() == (
            "2/3 compatible (67%), 1 deprecated, 1 incompatible, 0 with warnings"
        )


class TestCategories:
    @pytest.mark.parametrize(
        "token, category",
        [
            ("p-4", "spacing"),
            ("flex-col", "layout"),
            ("w-full", "sizing"),
            ("text-lg", "typography"),
            ("bg-red-500", "colors"),
            ("rounded-lg", "borders"),
            ("opacity-50", "effects"),
            ("-translate-x-4", "transforms"),
            ("duration-300", "transitions"),
            ("cursor-pointer", "interactivity"),
            ("z-10", "positioning"),
            ("wibble", "other"),
        ],
    )
    def test_get_class_category(self, mapper: ClassMapper, token: str, category: str) -> None:
        assert mapper.get_class_category(token) == category

    def test_group_by_category_keeps_order(self, mapper: ClassMapper) -> None:
        grouped = mapper.group_classes_by_category(["p-4", "bg-red-500", "m-2", "wibble"])
        assert grouped == {"spacing": ["p-4", "m-2"], "colors": ["bg-red-500"], "other": ["wibble"]}


class TestSuggestions:
    def test_deprecated_listed(self, mapper: ClassMapper) -> None:
        suggestions = mapper.generate_migration_suggestions(mapper.map_classes(["divide-x-2", "p-4"]))
        assert suggestions[0] == "Found 1 deprecated classes that should be updated:"
        assert suggestions[1] == "  - divide-x-2 -> border-x-2"

    def test_deprecated_truncated_after_five(self, mapper: ClassMapper) -> None:
        tokens = [f"divide-x-{n}" for n in range(7)]
        suggestions = mapper.generate_migration_suggestions(mapper.map_classes(tokens))
        assert "  ... and 2 more" in suggestions

    def test_unique_warnings(self, mapper: ClassMapper) -> None:
        suggestions = mapper.generate_migration_suggestions(mapper.map_classes(["foo-bar", "baz-qux"]))
        assert suggestions == ["\nFound 2 classes with suggestions:", f"  - {UNKNOWN_WARNING}"]

    def test_hover_tip(self, mapper: ClassMapper) -> None:
        tokens = ["hover:bg-red-500", "hover:text-white", "hover:p-4"]
        suggestions = mapper.generate_migration_suggestions(mapper.map_classes(tokens))
        assert "\nTip: Use variant groups for cleaner hover states:" in suggestions

    def test_nothing_to_suggest(self, mapper: ClassMapper) -> None:
        assert mapper.generate_migration_suggestions(mapper.map_classes(["p-4"])) == []


# ---------------------------------------------------------------------------
# Module-level helpers
# ---------------------------------------------------------------------------


class TestModuleHelpers:
    def test_helpers_match_mapper(self, mapper: ClassMapper) -> None:
        tokens = ["p-4", "divide-x-2"]
        assert map_class("p-4") == mapper.map_class("p-4")
        assert map_classes(tokens) == mapper.map_classes(tokens)
        assert analyze_class_compatibility(tokens) == mapper.analyze_class_compatibility(tokens)
        assert get_class_category("p-4") == "spacing"
        assert group_classes_by_category(tokens) == mapper.group_classes_by_category(tokens)
        assert generate_migration_suggestions(map_classes(tokens)) == mapper.generate_migration_suggestions(
            mapper.map_classes(tokens)
        )

    def test_extract_classes(self) -> None:
        assert extract_classes("  p-4\tflex\n bg-red-500 ") == ["p-4", "flex", "bg-red-500"]
        assert extract_classes("") == []
