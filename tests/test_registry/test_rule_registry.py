"""Tests for the rule registry: plugins, ordering, variants and theme."""

import pytest

from brisk.cache import PatternCache
from brisk.model.rule import DynamicRule, Regex, StaticRule, Variant, VariantKind
from brisk.registry import (
    FunctionPlugin,
    PluginInstallError,
    RegistryError,
    RegistryFrozenError,
    RuleRegistry,
    compile_pattern,
    deep_merge,
    plugin,
)


@pytest.fixture()
def registry() -> RuleRegistry:
    return RuleRegistry()


@pytest.fixture()
def cache() -> PatternCache:
    return PatternCache()


# ---------------------------------------------------------------------------
# Plugins
# ---------------------------------------------------------------------------


class TestPlugins:
    def test_decorator_builds_function_plugin(self) -> None:
        @plugin("display", version="2.0.0")
        def display(registry: RuleRegistry) -> None:
            registry.add_rule(StaticRule("flex", {"display": "flex"}))

        assert isinstance(display, FunctionPlugin)
        assert display.name == "display"
        assert display.version == "2.0.0"

    def test_install_runs_in_order(self, registry: RuleRegistry) -> None:
        @plugin("first")
        def first(reg: RuleRegistry) -> None:
            reg.add_rule(StaticRule("a", {"x": "1"}))

        @plugin("second")
        def second(reg: RuleRegistry) -> None:
            reg.add_rule(StaticRule("b", {"x": "2"}))

        registry.install_all([first, second])
        assert [entry.name for entry in registry.rules] == ["first:a", "second:b"]
        assert [entry.plugin for entry in registry.rules] == ["first", "second"]
        assert registry.plugins == (("first", "1.0.0"), ("second", "1.0.0"))

    def test_failing_plugin_raises_install_error(self, registry: RuleRegistry) -> None:
        @plugin("broken")
        def broken(reg: RuleRegistry) -> None:
            raise ValueError("bad theme")

        with pytest.raises(PluginInstallError) as exc_info:
            registry.install(broken)
        assert exc_info.value.plugin == "broken"
        assert "bad theme" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert registry.plugins == ()

    def test_trace_records_every_step(self, registry: RuleRegistry) -> None:
        @plugin("p")
        def p(reg: RuleRegistry) -> None:
            reg.extend_theme({"colors": {}})
            reg.add_rule(StaticRule("a", {"x": "1"}))
            reg.add_variant(Variant("hover", VariantKind.PSEUDO, ":hover"))

        registry.install(p)
        assert [(t.plugin, t.kind, t.name) for t in registry.trace] == [
            ("p", "plugin", "1.0.0"),
            ("p", "theme", "colors"),
            ("p", "rule", "p:a"),
            ("p", "variant", "hover"),
        ]


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


class TestRules:
    def test_direct_rule_name(self, registry: RuleRegistry) -> None:
        assert registry.add_rule(StaticRule("flex", {"display": "flex"})) == "<direct>:flex"

    def test_regex_rule_named_by_index(self, registry: RuleRegistry) -> None:
        registry.add_rule(StaticRule("flex", {"display": "flex"}))
        name = registry.add_rule(DynamicRule(Regex(r"p-(\d+)"), lambda m, t: {}))
        assert name == "<direct>#1"

    def test_explicit_name_kept(self, registry: RuleRegistry) -> None:
        assert registry.add_rule(StaticRule("flex", {}, name="display-flex")) == "display-flex"

    def test_duplicate_explicit_name_rejected(self, registry: RuleRegistry) -> None:
        registry.add_rule(StaticRule("flex", {}, name="dup"))
        with pytest.raises(RegistryError, match="Duplicate rule name"):
            registry.add_rule(StaticRule("grid", {}, name="dup"))

    def test_duplicate_generated_name_disambiguated(self, registry: RuleRegistry) -> None:
        registry.add_rule(StaticRule("flex", {"display": "flex"}))
        assert registry.add_rule(StaticRule("flex", {"display": "block"})) == "<direct>:flex#1"

    def test_unsupported_rule_type(self, registry: RuleRegistry) -> None:
        with pytest.raises(RegistryError):
            registry.add_rule("flex")  # type: ignore[arg-type]

    def test_sort_key_defaults_to_index(self, registry: RuleRegistry) -> None:
        registry.add_rule(StaticRule("a", {}))
        registry.add_rule(StaticRule("b", {}, order=-5))
        assert [entry.sort_key for entry in registry.rules] == [0, -5]

    def test_frozen_registry_rejects_changes(self, registry: RuleRegistry) -> None:
        registry.freeze()
        assert registry.frozen
        with pytest.raises(RegistryFrozenError):
            registry.add_rule(StaticRule("flex", {}))
        with pytest.raises(RegistryFrozenError):
            registry.extend_theme({"colors": {}})

    def test_frozen_error_not_wrapped(self, registry: RuleRegistry) -> None:
        registry.freeze()
        with pytest.raises(RegistryFrozenError):
            registry.install(FunctionPlugin("late", lambda reg: None))


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


class TestVariants:
    def test_static_variant(self, registry: RuleRegistry, cache: PatternCache) -> None:
        registry.add_variant(Variant("hover", VariantKind.PSEUDO, ":hover"))
        assert registry.resolve_variant("hover", cache) == Variant("hover", VariantKind.PSEUDO, ":hover")
        assert registry.is_variant("hover", cache)
        assert not registry.is_variant("focus", cache)

    def test_later_static_variant_replaces(self, registry: RuleRegistry, cache: PatternCache) -> None:
        registry.add_variant(Variant("dark", VariantKind.PARENT, ".dark"))
        registry.add_variant(Variant("dark", VariantKind.PARENT, ".night"))
        assert registry.resolve_variant("dark", cache).value == ".night"

    def test_dynamic_variant(self, registry: RuleRegistry, cache: PatternCache) -> None:
        def resolve(match):
            return Variant(match.group(0), VariantKind.AT_RULE, f"@media (min-width: {match.group(1)})")

        registry.add_dynamic_variant("min", Regex(r"min-\[(.+)\]"), resolve)
        variant = registry.resolve_variant("min-[600px]", cache)
        assert variant.value == "@media (min-width: 600px)"
        assert "variant:min" in cache

    def test_dynamic_variant_can_decline(self, registry: RuleRegistry, cache: PatternCache) -> None:
        registry.add_dynamic_variant("never", Regex(r".+"), lambda m: None)
        assert registry.resolve_variant("anything", cache) is None

    def test_arbitrary_selector_variant(self, registry: RuleRegistry, cache: PatternCache) -> None:
        variant = registry.resolve_variant("[&:nth-child(3)]", cache)
        assert variant.kind is VariantKind.SELECTOR
        assert variant.value == "&:nth-child(3)"

    def test_arbitrary_at_rule_variant(self, registry: RuleRegistry, cache: PatternCache) -> None:
        variant = registry.resolve_variant("[@media(min-width:900px)]", cache)
        assert variant.kind is VariantKind.AT_RULE
        assert variant.value == "@media (min-width:900px)"

    def test_arbitrary_without_ampersand_rejected(self, registry: RuleRegistry, cache: PatternCache) -> None:
        assert registry.resolve_variant("[.foo]", cache) is None

    @pytest.mark.parametrize("name", ["[@media]", "[@supports]", "[@container_]"])
    def test_arbitrary_at_rule_needs_condition(
        self, registry: RuleRegistry, cache: PatternCache, name: str
    ) -> None:
        assert registry.resolve_variant(name, cache) is None

    def test_duplicate_dynamic_variant_name(self, registry: RuleRegistry) -> None:
        registry.add_dynamic_variant("data", Regex(r"data-\[(.+)\]"), lambda m: None)
        with pytest.raises(RegistryError, match="Duplicate dynamic variant name"):
            registry.add_dynamic_variant("data", Regex(r"state-([a-z]+)"), lambda m: None)
        assert len(registry.dynamic_variants) == 1

    def test_distinct_dynamic_variants_keep_their_patterns(
        self, registry: RuleRegistry, cache: PatternCache
    ) -> None:
        registry.add_dynamic_variant(
            "data", Regex(r"data-\[(.+)\]"), lambda m: Variant(m.group(0), VariantKind.PSEUDO, f"[data-{m.group(1)}]")
        )
        registry.add_dynamic_variant(
            "state", Regex(r"state-([a-z]+)"), lambda m: Variant(m.group(0), VariantKind.PSEUDO, f"[data-state={m.group(1)}]")
        )
        assert registry.resolve_variant("state-open", cache).value == "[data-state=open]"
        assert registry.resolve_variant("data-[open]", cache).value == "[data-open]"

    def test_unsupported_variant_type(self, registry: RuleRegistry) -> None:
        with pytest.raises(RegistryError):
            registry.add_variant("hover")  # type: ignore[arg-type]


class TestVariantApply:
    def test_pseudo(self) -> None:
        assert Variant("hover", VariantKind.PSEUDO, ":hover").apply(".a", ()) == (".a:hover", ())

    def test_parent(self) -> None:
        assert Variant("dark", VariantKind.PARENT, ".dark").apply(".a", ()) == (".dark .a", ())

    def test_selector(self) -> None:
        variant = Variant("rtl", VariantKind.SELECTOR, '[dir="rtl"] &')
        assert variant.apply(".a", ()) == ('[dir="rtl"] .a', ())

    def test_at_rule_appends(self) -> None:
        variant = Variant("print", VariantKind.AT_RULE, "@media print")
        assert variant.apply(".a", ("@supports (x: y)",)) == (".a", ("@supports (x: y)", "@media print"))


# ---------------------------------------------------------------------------
# Theme and helpers
# ---------------------------------------------------------------------------


class TestTheme:
    def test_extend_theme_deep_merges(self, registry: RuleRegistry) -> None:
        registry.extend_theme({"colors": {"red": {"500": "#f00"}}})
        registry.extend_theme({"colors": {"red": {"600": "#d00"}, "brand": "#123"}})
        assert registry.theme["colors"] == {"red": {"500": "#f00", "600": "#d00"}, "brand": "#123"}

    def test_deep_merge_does_not_mutate(self) -> None:
        base = {"a": {"b": 1}}
        merged = deep_merge(base, {"a": {"c": 2}})
        assert merged == {"a": {"b": 1, "c": 2}}
        assert base == {"a": {"b": 1}}

    def test_deep_merge_replaces_non_mappings(self) -> None:
        assert deep_merge({"a": [1]}, {"a": [2]}) == {"a": [2]}


class TestCompilePattern:
    def test_literal_is_escaped(self, cache: PatternCache) -> None:
        pattern = compile_pattern(cache, "rule:dot", "a.b")
        assert pattern.fullmatch("a.b")
        assert not pattern.fullmatch("axb")

    def test_regex_source(self, cache: PatternCache) -> None:
        pattern = compile_pattern(cache, "rule:p", Regex(r"p-(?P<value>\d+)"))
        assert pattern.fullmatch("p-4").group("value") == "4"

    def test_keyed_by_name(self, cache: PatternCache) -> None:
        first = compile_pattern(cache, "rule:x", "flex")
        assert compile_pattern(cache, "rule:x", "grid") is first
