"""Padding, margin and space-between utilities."""

from __future__ import annotations

import re

from brisk.model.rule import DynamicRule, Properties, Regex, Theme
from brisk.plugins.values import length
from brisk.registry.plugin import plugin
from brisk.registry.registry import RuleRegistry

SIDES: dict[str, tuple[str, ...]] = {
    "": ("",),
    "x": ("-left", "-right"),
    "y": ("-top", "-bottom"),
    "t": ("-top",),
    "r": ("-right",),
    "b": ("-bottom",),
    "l": ("-left",),
    "s": ("-inline-start",),
    "e": ("-inline-end",),
}


def _box(prop: str, allow_auto: bool):
    def compute(match: re.Match[str], theme: Theme) -> Properties | None:
        key = match.group("value")
        value = "auto" if allow_auto and key == "auto" else length(theme, key)
        if value is None:
            return None
        return {f"{prop}{suffix}": value for suffix in SIDES[match.group("side")]}

    return compute


def _space_between(match: re.Match[str], theme: Theme) -> Properties | None:
    value = length(theme, match.group("value"))
    if value is None:
        return None
    prop = "margin-left" if match.group("axis") == "x" else "margin-top"
    return {prop: value}


def _between_children(selector: str) -> str:
    return f"{selector} > :not([hidden]) ~ :not([hidden])"


@plugin("spacing")
def spacing(registry: RuleRegistry) -> None:
    registry.add_rules(
        [
            DynamicRule(
                Regex(r"p(?P<side>[xytrblse]?)-(?P<value>.+)"),
                _box("padding", allow_auto=False),
                name="padding",
            ),
            DynamicRule(
                Regex(r"m(?P<side>[xytrblse]?)-(?P<value>.+)"),
                _box("margin", allow_auto=True),
                name="margin",
                negative=True,
            ),
            DynamicRule(
                Regex(r"space-(?P<axis>[xy])-(?P<value>.+)"),
                _space_between,
                name="space-between",
                negative=True,
                selector=_between_children,
            ),
        ]
    )
