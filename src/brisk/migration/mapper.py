"""Class mapper: translate foreign-dialect tokens and score compatibility.

The mapper never mutates its inputs and never blocks a migration on
uncertainty: a token no rule recognises is reported as compatible, with a
warning when it looks like a utility name.
"""

from __future__ import annotations

import re
from typing import Iterable, Mapping, Sequence

from brisk.cache import PatternCache
from brisk.migration.model import ClassMapping, CompatibilityReport, MappingRule
from brisk.migration.rules import CATEGORIES, SAME, TAILWIND_RULES, UTILITY_SHAPE

UNKNOWN_WARNING = "Unknown utility class - verify it exists in brisk"
HOVER_TIP = "hover:(bg-blue-500 text-white scale-105)"

_PLACEHOLDER_RE = re.compile(r"\$(&|[1-9])")


def substitute_template(template: str, match: re.Match[str]) -> str:
    """Expand ``$&`` and ``$1``..``$9`` in *template* from *match*.

    Unmatched groups expand to an empty string; group numbers past the
    pattern's group count are left as written.

    >>> m = re.match(r"divide-(x|y)-(.+)", "divide-x-2")
    >>> substitute_template("border-$1-$2", m)
    'border-x-2'
    """

    def expand(placeholder: re.Match[str]) -> str:
        ref = placeholder.group(1)
        if ref == "&":
            return match.group(0)
        index = int(ref)
        if index > (match.re.groups or 0):
            return placeholder.group(0)
        return match.group(index) or ""

    return _PLACEHOLDER_RE.sub(expand, template)


class ClassMapper:
    """Apply an ordered list of :class:`MappingRule` entries to tokens.

    Args:
        cache: Pattern cache shared with the owning engine; rule patterns are
            compiled under ``migration:<rule name>``.
        rules: Mapping rules, first match wins.
    """

    def __init__(
        self,
        cache: PatternCache | None = None,
        rules: Sequence[MappingRule] = TAILWIND_RULES,
    ) -> None:
        self._cache = cache if cache is not None else PatternCache()
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[MappingRule, ...]:
        return self._rules

    def _pattern(self, key: str, source: str) -> re.Pattern[str]:
        return self._cache.get_or_compile(f"migration:{key}", source)

    # ---- mapping ---------------------------------------------------------

    def map_class(self, token: str, custom_mappings: Mapping[str, str] | None = None) -> ClassMapping:
        if custom_mappings and custom_mappings.get(token):
            return ClassMapping(original=token, mapped=custom_mappings[token], compatible=True)

        for index, rule in enumerate(self._rules):
            match = self._pattern(rule.name or f"rule-{index}", rule.pattern).search(token)
            if match is None:
                continue
            mapped = self._apply(rule, token, match)
            if mapped == token:
                mapped = None
            return ClassMapping(
                original=token,
                mapped=mapped,
                compatible=rule.compatible,
                deprecated=rule.deprecated,
                replacement=mapped if rule.deprecated and mapped else None,
                warning=rule.warning,
            )

        if self._pattern("utility-shape", UTILITY_SHAPE).match(token):
            return ClassMapping(original=token, compatible=True, warning=UNKNOWN_WARNING)
        # arbitrary values and anything else carry over unchanged
        return ClassMapping(original=token, compatible=True)

    @staticmethod
    def _apply(rule: MappingRule, token: str, match: re.Match[str]) -> str | None:
        if callable(rule.replacement):
            return rule.replacement(match)
        if rule.replacement == SAME:
            return None
        replaced = substitute_template(rule.replacement, match)
        return token[: match.start()] + replaced + token[match.end():]

    def map_classes(
        self, tokens: Iterable[str], custom_mappings: Mapping[str, str] | None = None
    ) -> list[ClassMapping]:
        return [self.map_class(token, custom_mappings) for token in tokens]

    # ---- reporting -------------------------------------------------------

    def analyze_class_compatibility(self, tokens: Sequence[str]) -> CompatibilityReport:
        """Aggregate verdicts; an empty token list is 100% compatible."""
        mappings = self.map_classes(tokens)
        total = len(tokens)
        compatible = [m for m in mappings if m.compatible and not m.deprecated and not m.warning]
        return CompatibilityReport(
            total=total,
            compatible=len(compatible),
            incompatible=tuple(m for m in mappings if not m.compatible),
            deprecated=tuple(m for m in mappings if m.deprecated),
            warnings=tuple(m for m in mappings if m.warning and m.compatible and not m.deprecated),
            compatibility_rate=_rounded_percent(len(compatible), total),
        )

    def get_class_category(self, token: str) -> str:
        for category, source in CATEGORIES:
            if self._pattern(f"category:{category}", source).search(token):
                return category
        return "other"

    def group_classes_by_category(self, tokens: Iterable[str]) -> dict[str, list[str]]:
        grouped: dict[str, list[str]] = {}
        for token in tokens:
            grouped.setdefault(self.get_class_category(token), []).append(token)
        return grouped

    @staticmethod
    def generate_migration_suggestions(mappings: Sequence[ClassMapping]) -> list[str]:
        suggestions: list[str] = []
        deprecated = [m for m in mappings if m.deprecated]
        warned = [m for m in mappings if m.warning]

        if deprecated:
            suggestions.append(f"Found {len(deprecated)} deprecated classes that should be updated:")
            for mapping in deprecated[:5]:
                suggestions.append(f"  - {mapping.original} -> {mapping.replacement or 'see warning'}")
            if len(deprecated) > 5:
                suggestions.append(f"  ... and {len(deprecated) - 5} more")

        if warned:
            suggestions.append(f"\nFound {len(warned)} classes with suggestions:")
            unique = list(dict.fromkeys(m.warning for m in warned))
            for warning in unique[:3]:
                suggestions.append(f"  - {warning}")

        if sum(1 for m in mappings if m.original.startswith("hover:")) > 2:
            suggestions.append("\nTip: Use variant groups for cleaner hover states:")
            suggestions.append(f"  {HOVER_TIP}")

        return suggestions


def _rounded_percent(part: int, total: int) -> int:
    """``round(part / total * 100)`` with halves rounded up; 100 when empty."""
    if total == 0:
        return 100
    return (part * 200 + total) // (total * 2)


# ---------------------------------------------------------------------------
# Module-level helpers
# ---------------------------------------------------------------------------


def map_class(token: str, custom_mappings: Mapping[str, str] | None = None, cache: PatternCache | None = None) -> ClassMapping:
    return ClassMapper(cache).map_class(token, custom_mappings)


def map_classes(
    tokens: Iterable[str],
    custom_mappings: Mapping[str, str] | None = None,
    cache: PatternCache | None = None,
) -> list[ClassMapping]:
    return ClassMapper(cache).map_classes(tokens, custom_mappings)


def analyze_class_compatibility(tokens: Sequence[str], cache: PatternCache | None = None) -> CompatibilityReport:
    return ClassMapper(cache).analyze_class_compatibility(tokens)


def get_class_category(token: str, cache: PatternCache | None = None) -> str:
    return ClassMapper(cache).get_class_category(token)


def group_classes_by_category(tokens: Iterable[str], cache: PatternCache | None = None) -> dict[str, list[str]]:
    return ClassMapper(cache).group_classes_by_category(tokens)


def generate_migration_suggestions(mappings: Sequence[ClassMapping]) -> list[str]:
    return ClassMapper.generate_migration_suggestions(mappings)


def extract_classes(class_string: str) -> list[str]:
    """Split a class attribute value into tokens."""
    return [token for token in class_string.split() if token]
