"""Rule registry: the ordered set of rules and variants contributed by plugins.

Registration order is the only priority signal.  The matcher scans rules in
the order they were added and the first rule that resolves wins; there is no
specificity scoring.  Every registration is appended to :attr:`RuleRegistry.trace`
so that order can be inspected when debugging shadowed rules.
"""

from __future__ import annotations

import copy
import logging
import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from brisk.cache import PatternCache
from brisk.model.rule import (
    DynamicRule,
    DynamicVariant,
    NestedRule,
    Regex,
    Rule,
    StaticRule,
    Theme,
    Variant,
    VariantKind,
)
from brisk.parser.syntax import find_closing_bracket, normalize_arbitrary_value
from brisk.registry.errors import PluginInstallError, RegistryError, RegistryFrozenError
from brisk.registry.plugin import Plugin

logger = logging.getLogger(__name__)

_DIRECT = "<direct>"


@dataclass(frozen=True)
class TraceEntry:
    """One registration step, in the order it happened."""

    plugin: str
    kind: str  # "plugin", "rule", "variant", "dynamic_variant", "theme"
    name: str


@dataclass(frozen=True)
class RegisteredRule:
    """A rule together with its resolved name and registration index."""

    rule: Rule
    name: str
    index: int
    plugin: str

    @property
    def sort_key(self) -> int:
        return self.rule.order if self.rule.order is not None else self.index


def deep_merge(base: Mapping[str, Any], extra: Mapping[str, Any]) -> dict[str, Any]:
    """Return *base* updated recursively with *extra*; neither input is modified."""
    merged = copy.deepcopy(dict(base))
    for key, value in extra.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


class RuleRegistry:
    """Collects rules, variants and theme values from plugins."""

    def __init__(self) -> None:
        self._rules: list[RegisteredRule] = []
        self._rule_names: set[str] = set()
        self._variants: dict[str, Variant] = {}
        self._dynamic_variants: list[DynamicVariant] = []
        self._theme: Theme = {}
        self._plugins: list[tuple[str, str]] = []
        self._trace: list[TraceEntry] = []
        self._current_plugin = _DIRECT
        self._frozen = False

    # ---- plugin installation ---------------------------------------------

    def install(self, plugin: Plugin) -> None:
        """Run *plugin*'s install step against this registry.

        Failures propagate immediately as :class:`PluginInstallError`.
        """
        self._check_mutable()
        logger.info("Installing plugin %s %s", plugin.name, plugin.version)
        self._trace.append(TraceEntry(plugin=plugin.name, kind="plugin", name=plugin.version))
        previous = self._current_plugin
        self._current_plugin = plugin.name
        try:
            plugin.install(self)
        except RegistryFrozenError:
            raise
        except Exception as exc:
            raise PluginInstallError(plugin.name, str(exc)) from exc
        finally:
            self._current_plugin = previous
        self._plugins.append((plugin.name, plugin.version))

    def install_all(self, plugins: Iterable[Plugin]) -> None:
        for p in plugins:
            self.install(p)

    # ---- rules -----------------------------------------------------------

    def add_rule(self, rule: Rule) -> str:
        """Append *rule* after every rule registered so far; returns its name."""
        self._check_mutable()
        if not isinstance(rule, (StaticRule, NestedRule, DynamicRule)):
            raise RegistryError(f"Unsupported rule type: {type(rule).__name__}")
        index = len(self._rules)
        name = self._resolve_rule_name(rule, index)
        self._rules.append(
            RegisteredRule(rule=rule, name=name, index=index, plugin=self._current_plugin)
        )
        self._rule_names.add(name)
        self._trace.append(TraceEntry(plugin=self._current_plugin, kind="rule", name=name))
        return name

    def add_rules(self, rules: Iterable[Rule]) -> list[str]:
        return [self.add_rule(rule) for rule in rules]

    def _resolve_rule_name(self, rule: Rule, index: int) -> str:
        if rule.name:
            if rule.name in self._rule_names:
                raise RegistryError(f"Duplicate rule name: {rule.name!r}")
            return rule.name
        if isinstance(rule.pattern, str):
            name = f"{self._current_plugin}:{rule.pattern}"
        else:
            name = f"{self._current_plugin}#{index}"
        if name in self._rule_names:
            name = f"{name}#{index}"
        return name

    # ---- variants --------------------------------------------------------

    def add_variant(self, variant: Variant | DynamicVariant) -> None:
        """Register a variant.

        A later static variant replaces one of the same name; dynamic variant
        names must be unique because their patterns are cached by name.
        """
        self._check_mutable()
        if isinstance(variant, DynamicVariant):
            if any(d.name == variant.name for d in self._dynamic_variants):
                raise RegistryError(f"Duplicate dynamic variant name: {variant.name!r}")
            self._dynamic_variants.append(variant)
            kind = "dynamic_variant"
        elif isinstance(variant, Variant):
            self._variants[variant.name] = variant
            kind = "variant"
        else:
            raise RegistryError(f"Unsupported variant type: {type(variant).__name__}")
        self._trace.append(TraceEntry(plugin=self._current_plugin, kind=kind, name=variant.name))

    def add_variants(self, variants: Iterable[Variant | DynamicVariant]) -> None:
        for variant in variants:
            self.add_variant(variant)

    def add_dynamic_variant(self, name: str, pattern: str | Regex, resolve: Any) -> None:
        """Shorthand for ``add_variant(DynamicVariant(name, pattern, resolve))``."""
        self.add_variant(DynamicVariant(name=name, pattern=pattern, resolve=resolve))

    # ---- theme -----------------------------------------------------------

    def extend_theme(self, values: Mapping[str, Any]) -> None:
        """Deep-merge *values* into the theme."""
        self._check_mutable()
        self._theme = deep_merge(self._theme, values)
        for key in values:
            self._trace.append(TraceEntry(plugin=self._current_plugin, kind="theme", name=key))

    # ---- read access -----------------------------------------------------

    @property
    def rules(self) -> tuple[RegisteredRule, ...]:
        return tuple(self._rules)

    @property
    def variants(self) -> dict[str, Variant]:
        return dict(self._variants)

    @property
    def dynamic_variants(self) -> tuple[DynamicVariant, ...]:
        return tuple(self._dynamic_variants)

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def plugins(self) -> tuple[tuple[str, str], ...]:
        return tuple(self._plugins)

    @property
    def trace(self) -> tuple[TraceEntry, ...]:
        return tuple(self._trace)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True

    def __len__(self) -> int:
        return len(self._rules)

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RegistryFrozenError("Registry is frozen; build a new engine to change plugins")

    # ---- variant resolution ----------------------------------------------

    def resolve_variant(self, name: str, cache: PatternCache) -> Variant | None:
        """Resolve a variant name: static, then arbitrary ``[...]``, then dynamic in order."""
        static = self._variants.get(name)
        if static is not None:
            return static
        if name.startswith("[") and name.endswith("]"):
            return _arbitrary_variant(name)
        for dynamic in self._dynamic_variants:
            pattern = compile_pattern(cache, f"variant:{dynamic.name}", dynamic.pattern)
            match = pattern.fullmatch(name)
            if match is None:
                continue
            resolved = dynamic.resolve(match)
            if resolved is not None:
                return resolved
        return None

    def is_variant(self, name: str, cache: PatternCache) -> bool:
        return self.resolve_variant(name, cache) is not None


def compile_pattern(cache: PatternCache, key: str, pattern: str | Regex | re.Pattern[str]) -> re.Pattern[str]:
    """Compile a rule or variant pattern through *cache* under *key*.

    Exact literals are escaped; :class:`Regex` sources are compiled with their
    flags; precompiled patterns are cached as-is.
    """
    if isinstance(pattern, Regex):
        return cache.get_or_compile(key, pattern.source, pattern.flags)
    if isinstance(pattern, re.Pattern):
        return cache.get_or_compile(key, pattern, pattern.flags)
    return cache.get_or_compile(key, re.escape(pattern))


_BARE_AT_RULE = re.compile(r"@[\w-]+")


def _arbitrary_variant(name: str) -> Variant | None:
    """``[&:nth-child(3)]`` -> selector template; ``[@media(...)]`` -> at-rule."""
    if find_closing_bracket(name, 0) != len(name) - 1:
        return None
    inner = normalize_arbitrary_value(name[1:-1]).strip()
    if not inner:
        return None
    if inner.startswith("@"):
        if _BARE_AT_RULE.fullmatch(inner):
            return None
        return Variant(name=name, kind=VariantKind.AT_RULE, value=_space_at_rule(inner))
    if "&" in inner:
        return Variant(name=name, kind=VariantKind.SELECTOR, value=inner)
    return None


def _space_at_rule(text: str) -> str:
    """``@media(min-width:900px)`` -> ``@media (min-width:900px)``."""
    paren = text.find("(")
    if paren > 0 and text[paren - 1] != " ":
        return f"{text[:paren]} {text[paren:]}"
    return text
