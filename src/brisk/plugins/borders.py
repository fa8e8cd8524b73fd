"""Border width, style and radius; divide and ring utilities."""

from __future__ import annotations

import re

from brisk.model.rule import DynamicRule, NestedProperties, NestedRule, Properties, Regex, StaticRule, Theme
from brisk.plugins.values import is_bracketed, length, theme_value
from brisk.registry.plugin import plugin
from brisk.registry.registry import RuleRegistry

BORDER_SIDES: dict[str, tuple[str, ...]] = {
    "": ("border-width",),
    "x": ("border-left-width", "border-right-width"),
    "y": ("border-top-width", "border-bottom-width"),
    "t": ("border-top-width",),
    "r": ("border-right-width",),
    "b": ("border-bottom-width",),
    "l": ("border-left-width",),
}

RADIUS_CORNERS: dict[str, tuple[str, ...]] = {
    "": ("border-radius",),
    "t": ("border-top-left-radius", "border-top-right-radius"),
    "r": ("border-top-right-radius", "border-bottom-right-radius"),
    "b": ("border-bottom-right-radius", "border-bottom-left-radius"),
    "l": ("border-top-left-radius", "border-bottom-left-radius"),
    "tl": ("border-top-left-radius",),
    "tr": ("border-top-right-radius",),
    "br": ("border-bottom-right-radius",),
    "bl": ("border-bottom-left-radius",),
}

BORDER_STYLES = ("solid", "dashed", "dotted", "double", "hidden", "none")

_DIVIDE_CHILDREN = "& > :not([hidden]) ~ :not([hidden])"


def _width(theme: Theme, key: str | None) -> str | None:
    if key is None:
        return theme_value(theme, "borderWidth", "DEFAULT")
    if is_bracketed(key):
        return length(theme, key)
    return theme_value(theme, "borderWidth", key)


def _border_width(match: re.Match[str], theme: Theme) -> Properties | None:
    value = _width(theme, match.group("value"))
    if value is None:
        return None
    return {prop: value for prop in BORDER_SIDES[match.group("side") or ""]}


def _radius(match: re.Match[str], theme: Theme) -> Properties | None:
    key = match.group("value")
    if key is None:
        value = theme_value(theme, "borderRadius", "DEFAULT")
    elif is_bracketed(key):
        value = length(theme, key)
    else:
        value = theme_value(theme, "borderRadius", key)
    if value is None:
        return None
    return {prop: value for prop in RADIUS_CORNERS[match.group("corner") or ""]}


def _divide_width(match: re.Match[str], theme: Theme) -> NestedProperties | None:
    value = _width(theme, match.group("value"))
    if value is None:
        return None
    if match.group("axis") == "x":
        props = {"border-right-width": "0px", "border-left-width": value}
    else:
        props = {"border-bottom-width": "0px", "border-top-width": value}
    return {_DIVIDE_CHILDREN: props}


def _ring(match: re.Match[str], theme: Theme) -> Properties | None:
    key = match.group("value")
    if key is None:
        value = "3px"
    elif is_bracketed(key):
        value = length(theme, key)
    elif key.isdigit():
        value = f"{key}px"
    else:
        value = None
    if value is None:
        return None
    return {"box-shadow": f"0 0 0 {value} var(--tw-ring-color, rgb(59 130 246 / 0.5))"}


@plugin("borders")
def borders(registry: RuleRegistry) -> None:
    registry.add_rules(
        [
            DynamicRule(
                Regex(r"border(?:-(?P<side>[xytrbl]))?(?:-(?P<value>\d+|\[.+\]))?"),
                _border_width,
                name="border-width",
            ),
            DynamicRule(
                Regex(r"rounded(?:-(?P<corner>tl|tr|br|bl|[trbl]))?(?:-(?P<value>[a-z0-9]+|\[.+\]))?"),
                _radius,
                name="border-radius",
            ),
        ]
    )
    registry.add_rules(StaticRule(f"border-{style}", {"border-style": style}) for style in BORDER_STYLES)
    registry.add_rules(
        [
            NestedRule("divide-x", {_DIVIDE_CHILDREN: {"border-right-width": "0px", "border-left-width": "1px"}}),
            NestedRule("divide-y", {_DIVIDE_CHILDREN: {"border-bottom-width": "0px", "border-top-width": "1px"}}),
            DynamicRule(
                Regex(r"divide-(?P<axis>[xy])-(?P<value>\d+|\[.+\])"),
                _divide_width,
                name="divide-width",
            ),
            DynamicRule(Regex(r"ring(?:-(?P<value>\d+|\[.+\]))?"), _ring, name="ring-width"),
            StaticRule("outline-none", {"outline": "2px solid transparent", "outline-offset": "2px"}),
            StaticRule("outline", {"outline-style": "solid"}),
        ]
    )
