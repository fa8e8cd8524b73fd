"""Tests for the core plugins: theme, variants and value lookups."""

import pytest

from brisk.cache import PatternCache
from brisk.model.rule import VariantKind
from brisk.plugins import DEFAULT_THEME, UTILITY_PLUGINS, dark_variant, default_plugins, theme_plugin, variants_plugin
from brisk.plugins.values import bracket, color, fraction, length, looks_like_color, looks_like_length, plain
from brisk.registry import RegistryError, RuleRegistry


def _variants_registry(**kwargs) -> RuleRegistry:
    registry = RuleRegistry()
    registry.install_all([theme_plugin(kwargs.pop("theme", None)), variants_plugin(**kwargs)])
    return registry


# ---------------------------------------------------------------------------
# Theme
# ---------------------------------------------------------------------------


class TestTheme:
    def test_default_scale(self) -> None:
        assert DEFAULT_THEME["spacing"]["4"] == "1rem"
        assert DEFAULT_THEME["spacing"]["0.5"] == "0.125rem"
        assert DEFAULT_THEME["spacing"]["px"] == "1px"
        assert DEFAULT_THEME["colors"]["red"]["500"] == "#ef4444"
        assert DEFAULT_THEME["screens"]["md"] == "768px"

    def test_overrides_deep_merge(self) -> None:
        registry = RuleRegistry()
        registry.install(theme_plugin({"colors": {"brand": "#123456", "red": {"500": "#ff0000"}}}))
        colors = registry.theme["colors"]
        assert colors["brand"] == "#123456"
        assert colors["red"]["500"] == "#ff0000"
        assert colors["red"]["600"] == DEFAULT_THEME["colors"]["red"]["600"]

    def test_default_theme_not_mutated(self) -> None:
        RuleRegistry().install(theme_plugin({"colors": {"red": {"500": "#000000"}}}))
        assert DEFAULT_THEME["colors"]["red"]["500"] == "#ef4444"


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


class TestDarkMode:
    def test_class_mode(self) -> None:
        variant = dark_variant("class")
        assert variant.kind is VariantKind.PARENT
        assert variant.value == ".dark"

    def test_selector_mode(self) -> None:
        assert dark_variant("selector").value == '[data-theme="dark"]'

    def test_custom_selector(self) -> None:
        assert dark_variant("class", ".theme-dark").value == ".theme-dark"

    def test_media_mode(self) -> None:
        variant = dark_variant("media")
        assert variant.kind is VariantKind.AT_RULE
        assert variant.value == "@media (prefers-color-scheme: dark)"

    def test_unknown_mode(self) -> None:
        with pytest.raises(RegistryError):
            dark_variant("sometimes")


class TestVariantsPlugin:
    @pytest.fixture()
    def registry(self) -> RuleRegistry:
        return _variants_registry()

    def _resolve(self, registry: RuleRegistry, name: str):
        return registry.resolve_variant(name, PatternCache())

    def test_static_variants(self, registry: RuleRegistry) -> None:
        assert self._resolve(registry, "hover").value == ":hover"
        assert self._resolve(registry, "first").value == ":first-child"
        assert self._resolve(registry, "before").value == "::before"
        assert self._resolve(registry, "print").value == "@media print"
        assert self._resolve(registry, "rtl").value == '[dir="rtl"] &'

    def test_screens(self, registry: RuleRegistry) -> None:
        assert self._resolve(registry, "sm").value == "@media (min-width: 640px)"
        assert self._resolve(registry, "2xl").value == "@media (min-width: 1536px)"
        assert self._resolve(registry, "max-lg").value == "@media not all and (min-width: 1024px)"

    def test_only_on_largest_screen_has_no_upper_bound(self, registry: RuleRegistry) -> None:
        assert self._resolve(registry, "2xl-only").value == "@media (min-width: 1536px)"

    def test_unknown_screen(self, registry: RuleRegistry) -> None:
        assert self._resolve(registry, "huge") is None

    def test_theme_screens_used(self) -> None:
        registry = _variants_registry(theme={"screens": {"tablet": "900px"}})
        assert self._resolve(registry, "tablet").value == "@media (min-width: 900px)"

    def test_group_arbitrary(self, registry: RuleRegistry) -> None:
        variant = self._resolve(registry, "group-[.is-open]")
        assert variant.kind is VariantKind.PARENT
        assert variant.value == ".group.is-open"

    def test_group_unknown_state(self, registry: RuleRegistry) -> None:
        assert self._resolve(registry, "group-wobble") is None

    def test_aria_arbitrary(self, registry: RuleRegistry) -> None:
        assert self._resolve(registry, "aria-[sort=ascending]").value == "[aria-sort=ascending]"

    def test_aria_unknown_state(self, registry: RuleRegistry) -> None:
        assert self._resolve(registry, "aria-wobbly") is None

    def test_max_width(self, registry: RuleRegistry) -> None:
        assert self._resolve(registry, "max-[600px]").value == "@media (max-width: 600px)"

    def test_arbitrary_container(self, registry: RuleRegistry) -> None:
        assert self._resolve(registry, "@[400px]").value == "@container (min-width: 400px)"

    def test_dark_mode_argument(self) -> None:
        registry = _variants_registry(dark_mode="media")
        assert self._resolve(registry, "dark").kind is VariantKind.AT_RULE


# ---------------------------------------------------------------------------
# Plugin list
# ---------------------------------------------------------------------------


class TestDefaultPlugins:
    def test_order(self) -> None:
        names = [p.name for p in default_plugins()]
        assert names[:2] == ["theme", "variants"]
        assert names[2:] == [p.name for p in UTILITY_PLUGINS]

    def test_all_install_cleanly(self) -> None:
        registry = RuleRegistry()
        registry.install_all(default_plugins())
        assert len(registry) > 100
        assert registry.plugins[0] == ("theme", "1.0.0")


# ---------------------------------------------------------------------------
# Value lookups
# ---------------------------------------------------------------------------


class TestValueLookups:
    def test_bracket(self) -> None:
        assert bracket("[3px]") == "3px"
        assert bracket("[color:red]", hints=("color",)) == "red"
        assert bracket("[color:red]") is None
        assert bracket("[]") is None
        assert bracket("3px") is None

    def test_color(self) -> None:
        assert color(DEFAULT_THEME, "red-500") == "#ef4444"
        assert color(DEFAULT_THEME, "white") == "#ffffff"
        assert color(DEFAULT_THEME, "[#abc]") == "#abc"
        assert color(DEFAULT_THEME, "[color:var(--x)]") == "var(--x)"
        assert color(DEFAULT_THEME, "[3px]") is None
        assert color(DEFAULT_THEME, "red") is None

    def test_length(self) -> None:
        assert length(DEFAULT_THEME, "4") == "1rem"
        assert length(DEFAULT_THEME, "[3px]") == "3px"
        assert length(DEFAULT_THEME, "[length:var(--w)]") == "var(--w)"
        assert length(DEFAULT_THEME, "[red]") is None
        assert length(DEFAULT_THEME, "nope") is None

    def test_fraction(self) -> None:
        assert fraction("1/2") == "50%"
        assert fraction("1/3") == "33.3333%"
        assert fraction("1/0") is None
        assert fraction("half") is None

    def test_plain(self) -> None:
        assert plain(DEFAULT_THEME, "zIndex", "10") == "10"
        assert plain(DEFAULT_THEME, "zIndex", "[99]") == "99"
        assert plain(DEFAULT_THEME, "missing", "x") is None

    def test_shape_checks(self) -> None:
        assert looks_like_color("#fff")
        assert looks_like_color("rebeccapurple")
        assert not looks_like_color("3px")
        assert looks_like_length("-1.5rem")
        assert looks_like_length("calc(100% - 1rem)")
        assert not looks_like_length("red")
