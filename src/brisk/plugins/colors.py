"""Color utilities.

Each utility resolves a theme color (``red-500``), a bare keyword (``white``)
or an arbitrary ``[...]`` color.  Opacity modifiers are applied later by the
matcher, so these rules only emit plain color values.
"""

from __future__ import annotations

import re

from brisk.model.rule import DynamicRule, NestedProperties, Properties, Regex, Theme
from brisk.plugins.values import color
from brisk.registry.plugin import plugin
from brisk.registry.registry import RuleRegistry

COLOR_PROPERTIES: dict[str, tuple[str, ...]] = {
    "bg": ("background-color",),
    "text": ("color",),
    "border": ("border-color",),
    "border-x": ("border-left-color", "border-right-color"),
    "border-y": ("border-top-color", "border-bottom-color"),
    "border-t": ("border-top-color",),
    "border-r": ("border-right-color",),
    "border-b": ("border-bottom-color",),
    "border-l": ("border-left-color",),
    "outline": ("outline-color",),
    "decoration": ("text-decoration-color",),
    "accent": ("accent-color",),
    "caret": ("caret-color",),
    "fill": ("fill",),
    "stroke": ("stroke",),
    "ring": ("--tw-ring-color",),
}


def _color(match: re.Match[str], theme: Theme) -> Properties | None:
    value = color(theme, match.group("value"))
    if value is None:
        return None
    return {prop: value for prop in COLOR_PROPERTIES[match.group("kind")]}


def _placeholder(match: re.Match[str], theme: Theme) -> NestedProperties | None:
    value = color(theme, match.group("value"))
    if value is None:
        return None
    return {"&::placeholder": {"color": value}}


def _divide_color(match: re.Match[str], theme: Theme) -> NestedProperties | None:
    value = color(theme, match.group("value"))
    if value is None:
        return None
    return {"& > :not([hidden]) ~ :not([hidden])": {"border-color": value}}


@plugin("colors")
def colors(registry: RuleRegistry) -> None:
    kinds = "|".join(sorted(COLOR_PROPERTIES, key=len, reverse=True))
    registry.add_rules(
        [
            DynamicRule(Regex(rf"(?P<kind>{kinds})-(?P<value>.+)"), _color, name="color"),
            DynamicRule(Regex(r"placeholder-(?P<value>.+)"), _placeholder, name="placeholder-color"),
            DynamicRule(Regex(r"divide-(?P<value>.+)"), _divide_color, name="divide-color"),
        ]
    )
