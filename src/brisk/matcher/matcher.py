"""Rule matcher: resolves a parsed class against the registry.

Rules are scanned in registration order and the first rule whose pattern
fully matches the class body (and, for dynamic rules, whose compute step does
not return None) wins.  The winning properties are then rewritten in a fixed
order: variants, important, negative, opacity.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping

from brisk.cache import PatternCache
from brisk.generator.escape import class_selector
from brisk.matcher.values import apply_alpha, map_values, mark_important, negate_value
from brisk.model.parsed import ParsedClass
from brisk.model.result import MatchResult
from brisk.model.rule import DynamicRule, NestedRule, Properties, StaticRule
from brisk.registry.registry import RegisteredRule, RuleRegistry, compile_pattern

logger = logging.getLogger(__name__)

__all__ = ["Matcher", "Resolution"]


@dataclass(frozen=True)
class Resolution:
    """The rule that won for a body and the raw properties it produced."""

    entry: RegisteredRule
    properties: Properties
    nested: dict[str, Properties]


def _split_nested(mapping: Mapping[str, object]) -> tuple[Properties, dict[str, Properties]]:
    flat: Properties = {}
    nested: dict[str, Properties] = {}
    for key, value in mapping.items():
        if isinstance(value, Mapping):
            nested[key] = {str(k): str(v) for k, v in value.items()}
        else:
            flat[key] = str(value)
    return flat, nested


class Matcher:
    """Match parsed classes against a (frozen) :class:`RuleRegistry`.

    Args:
        registry: Source of rules, variants and theme.
        cache: Pattern cache shared with the owning engine.
        prefix: Class-name prefix every body must carry (``tw-``).
        important: Force ``!important`` on every declaration.
    """

    def __init__(
        self,
        registry: RuleRegistry,
        cache: PatternCache,
        prefix: str = "",
        important: bool = False,
    ) -> None:
        self._registry = registry
        self._cache = cache
        self._prefix = prefix
        self._important = important
        self._resolved: dict[str, Resolution | None] = {}

    # ---- resolution ------------------------------------------------------

    def resolve(self, body: str) -> Resolution | None:
        """Find the first rule that resolves *body*; memoized per body."""
        if body in self._resolved:
            return self._resolved[body]
        resolution = self._scan(body) if body else None
        self._resolved[body] = resolution
        return resolution

    def _scan(self, body: str) -> Resolution | None:
        theme = self._registry.theme
        for entry in self._registry.rules:
            rule = entry.rule
            pattern = compile_pattern(self._cache, f"rule:{entry.name}", rule.pattern)
            match = pattern.fullmatch(body)
            if match is None:
                continue
            if isinstance(rule, StaticRule):
                return Resolution(entry, dict(rule.properties), {})
            if isinstance(rule, NestedRule):
                flat, nested = _split_nested(rule.properties)
                return Resolution(entry, flat, nested)
            if isinstance(rule, DynamicRule):
                computed = rule.compute(match, theme)
                if computed is None:
                    continue
                flat, nested = _split_nested(computed)
                return Resolution(entry, flat, nested)
        return None

    # ---- matching --------------------------------------------------------

    def match(self, parsed: ParsedClass) -> MatchResult | None:
        """Resolve *parsed* into a :class:`MatchResult`, or None if nothing matches."""
        body = self._strip_prefix(parsed.body)
        if body is None:
            return None

        opacity = parsed.opacity
        resolution: Resolution | None = None
        if parsed.modifier is not None:
            # Fractions such as w-1/2 are whole bodies, not opacity modifiers.
            resolution = self.resolve(f"{body}/{parsed.modifier}")
            if resolution is not None:
                opacity = None
        if resolution is None:
            resolution = self.resolve(body)
        if resolution is None:
            logger.debug("No rule matches %r", parsed.raw)
            return None

        rule = resolution.entry.rule

        # (a) variants, outermost first
        selector, at_rules = class_selector(parsed.raw), ()
        for name in parsed.variants:
            variant = self._registry.resolve_variant(name, self._cache)
            if variant is None:
                logger.debug("Unknown variant %r in %r", name, parsed.raw)
                return None
            selector, at_rules = variant.apply(selector, at_rules)
        # Rewrites target descendants of the fully qualified class.
        if rule.selector is not None:
            selector = rule.selector(selector)

        blocks: dict[str, Properties] = {"&": dict(resolution.properties)}
        for template, props in resolution.nested.items():
            blocks[template] = dict(props)

        for key, props in blocks.items():
            # (b) important
            if parsed.important or self._important:
                props = mark_important(props)
            # (c) negative, only where the rule allows it
            if parsed.negative and rule.negative:
                props = map_values(props, negate_value)
            # (d) opacity on color values
            if opacity is not None:
                alpha = opacity
                props = map_values(props, lambda v: apply_alpha(v, alpha))
            blocks[key] = props

        nested = {
            template.replace("&", selector): props
            for template, props in blocks.items()
            if template != "&"
        }
        return MatchResult(
            parsed=parsed,
            properties=blocks["&"],
            rule_name=resolution.entry.name,
            layer=rule.layer,
            sort_key=resolution.entry.sort_key,
            selector=selector,
            at_rules=at_rules,
            nested=nested,
        )

    def match_all(self, parsed_classes: Iterable[ParsedClass]) -> list[MatchResult]:
        results: list[MatchResult] = []
        for parsed in parsed_classes:
            result = self.match(parsed)
            if result is not None:
                results.append(result)
        return results

    def clear(self) -> None:
        self._resolved.clear()

    def _strip_prefix(self, body: str) -> str | None:
        if not self._prefix:
            return body
        if not body.startswith(self._prefix):
            return None
        return body[len(self._prefix):]
