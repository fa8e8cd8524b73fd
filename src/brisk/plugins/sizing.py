"""Width and height utilities, including fractions such as ``w-1/2``."""

from __future__ import annotations

import re

from brisk.model.rule import DynamicRule, Properties, Regex, Theme
from brisk.plugins.values import fraction, length, theme_value
from brisk.registry.plugin import plugin
from brisk.registry.registry import RuleRegistry

PROPERTIES: dict[str, tuple[str, ...]] = {
    "w": ("width",),
    "h": ("height",),
    "size": ("width", "height"),
    "min-w": ("min-width",),
    "min-h": ("min-height",),
    "max-w": ("max-width",),
    "max-h": ("max-height",),
}

KEYWORDS = {
    "auto": "auto",
    "full": "100%",
    "min": "min-content",
    "max": "max-content",
    "fit": "fit-content",
}


def _viewport(kind: str, key: str) -> str | None:
    horizontal = kind in ("w", "min-w", "max-w")
    if key == "screen":
        return "100vw" if horizontal else "100vh"
    if key in ("svh", "lvh", "dvh") and not horizontal:
        return f"100{key}"
    if key in ("svw", "lvw", "dvw") and horizontal:
        return f"100{key}"
    return None


def _size(match: re.Match[str], theme: Theme) -> Properties | None:
    kind, key = match.group("kind"), match.group("value")
    value = KEYWORDS.get(key) or _viewport(kind, key) or fraction(key)
    if value is None and kind == "max-w":
        value = theme_value(theme, "maxWidth", key)
    if value is None:
        value = length(theme, key)
    if value is None:
        return None
    return {prop: value for prop in PROPERTIES[kind]}


@plugin("sizing")
def sizing(registry: RuleRegistry) -> None:
    registry.add_rule(
        DynamicRule(
            Regex(r"(?P<kind>min-w|min-h|max-w|max-h|size|w|h)-(?P<value>.+)"),
            _size,
            name="size",
        )
    )
