"""Opacity, shadow, transition and interactivity utilities."""

from __future__ import annotations

import re

from brisk.model.rule import DynamicRule, Properties, Regex, StaticRule, Theme
from brisk.plugins.values import bracket, is_bracketed, plain
from brisk.registry.plugin import plugin
from brisk.registry.registry import RuleRegistry

CURSORS = ("auto", "default", "pointer", "wait", "text", "move", "help", "not-allowed", "none", "grab", "grabbing")

TRANSITIONS = {
    "transition": "color, background-color, border-color, text-decoration-color, fill, stroke, opacity, box-shadow, transform",
    "transition-all": "all",
    "transition-colors": "color, background-color, border-color, text-decoration-color, fill, stroke",
    "transition-opacity": "opacity",
    "transition-shadow": "box-shadow",
    "transition-transform": "transform",
}


def _opacity(match: re.Match[str], theme: Theme) -> Properties | None:
    key = match.group("value")
    if is_bracketed(key):
        value = bracket(key)
    elif key.isdigit() and int(key) <= 100:
        value = f"{int(key) / 100:g}"
    else:
        value = None
    return {"opacity": value} if value is not None else None


def _shadow(match: re.Match[str], theme: Theme) -> Properties | None:
    key = match.group("value") or "DEFAULT"
    value = plain(theme, "boxShadow", key)
    return {"box-shadow": value} if value is not None else None


def _transition(value: str) -> Properties:
    return {
        "transition-property": value,
        "transition-timing-function": "cubic-bezier(0.4, 0, 0.2, 1)",
        "transition-duration": "150ms",
    }


def _duration(match: re.Match[str], theme: Theme) -> Properties | None:
    key = match.group("value")
    value = plain(theme, "transitionDuration", key)
    if value is None and key.isdigit():
        value = f"{key}ms"
    return {"transition-duration": value} if value is not None else None


def _ease(match: re.Match[str], theme: Theme) -> Properties | None:
    value = plain(theme, "transitionTimingFunction", match.group("value"))
    return {"transition-timing-function": value} if value is not None else None


def _delay(match: re.Match[str], theme: Theme) -> Properties | None:
    key = match.group("value")
    value = f"{key}ms" if key.isdigit() else bracket(key)
    return {"transition-delay": value} if value is not None else None


@plugin("effects")
def effects(registry: RuleRegistry) -> None:
    registry.add_rules(StaticRule(name, _transition(value)) for name, value in TRANSITIONS.items())
    registry.add_rule(StaticRule("transition-none", {"transition-property": "none"}))
    registry.add_rules(StaticRule(f"cursor-{cursor}", {"cursor": cursor}) for cursor in CURSORS)
    registry.add_rules(
        [
            StaticRule("pointer-events-none", {"pointer-events": "none"}),
            StaticRule("pointer-events-auto", {"pointer-events": "auto"}),
            StaticRule("select-none", {"user-select": "none"}),
            StaticRule("select-text", {"user-select": "text"}),
            StaticRule("select-all", {"user-select": "all"}),
            StaticRule("select-auto", {"user-select": "auto"}),
            DynamicRule(Regex(r"opacity-(?P<value>.+)"), _opacity, name="opacity"),
            DynamicRule(Regex(r"shadow(?:-(?P<value>.+))?"), _shadow, name="box-shadow"),
            DynamicRule(Regex(r"duration-(?P<value>.+)"), _duration, name="duration"),
            DynamicRule(Regex(r"ease-(?P<value>.+)"), _ease, name="ease"),
            DynamicRule(Regex(r"delay-(?P<value>.+)"), _delay, name="delay"),
        ]
    )
