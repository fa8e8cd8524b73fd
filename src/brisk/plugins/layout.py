"""Display, position, overflow, flexbox and grid utilities."""

from __future__ import annotations

import re

from brisk.model.rule import DynamicRule, Layer, Properties, Regex, StaticRule, Theme
from brisk.plugins.values import bracket, fraction, is_bracketed, length, theme_value
from brisk.registry.plugin import plugin
from brisk.registry.registry import RuleRegistry

DISPLAY = {
    "block": "block",
    "inline-block": "inline-block",
    "inline": "inline",
    "flex": "flex",
    "inline-flex": "inline-flex",
    "grid": "grid",
    "inline-grid": "inline-grid",
    "table": "table",
    "table-row": "table-row",
    "table-cell": "table-cell",
    "contents": "contents",
    "list-item": "list-item",
    "flow-root": "flow-root",
    "hidden": "none",
}

POSITION = ("static", "fixed", "absolute", "relative", "sticky")

ALIGN_ITEMS = {"start": "flex-start", "end": "flex-end", "center": "center", "baseline": "baseline", "stretch": "stretch"}
JUSTIFY = {
    "normal": "normal",
    "start": "flex-start",
    "end": "flex-end",
    "center": "center",
    "between": "space-between",
    "around": "space-around",
    "evenly": "space-evenly",
    "stretch": "stretch",
}
SELF = {"auto": "auto", **ALIGN_ITEMS}

FLEX = {
    "flex-row": {"flex-direction": "row"},
    "flex-row-reverse": {"flex-direction": "row-reverse"},
    "flex-col": {"flex-direction": "column"},
    "flex-col-reverse": {"flex-direction": "column-reverse"},
    "flex-wrap": {"flex-wrap": "wrap"},
    "flex-wrap-reverse": {"flex-wrap": "wrap-reverse"},
    "flex-nowrap": {"flex-wrap": "nowrap"},
    "flex-1": {"flex": "1 1 0%"},
    "flex-auto": {"flex": "1 1 auto"},
    "flex-initial": {"flex": "0 1 auto"},
    "flex-none": {"flex": "none"},
    "grow": {"flex-grow": "1"},
    "grow-0": {"flex-grow": "0"},
    "shrink": {"flex-shrink": "1"},
    "shrink-0": {"flex-shrink": "0"},
}

_INSET_PROPS = {
    "inset": ("inset",),
    "inset-x": ("left", "right"),
    "inset-y": ("top", "bottom"),
    "top": ("top",),
    "right": ("right",),
    "bottom": ("bottom",),
    "left": ("left",),
    "start": ("inset-inline-start",),
    "end": ("inset-inline-end",),
}


def _inset(match: re.Match[str], theme: Theme) -> Properties | None:
    key = match.group("value")
    value = {"auto": "auto", "full": "100%"}.get(key) or fraction(key) or length(theme, key)
    if value is None:
        return None
    return {prop: value for prop in _INSET_PROPS[match.group("side")]}


def _z_index(match: re.Match[str], theme: Theme) -> Properties | None:
    key = match.group("value")
    value = bracket(key) if is_bracketed(key) else theme_value(theme, "zIndex", key)
    return {"z-index": value} if value is not None else None


def _order(match: re.Match[str], theme: Theme) -> Properties | None:
    key = match.group("value")
    named = {"first": "-9999", "last": "9999", "none": "0"}
    if key in named:
        return {"order": named[key]}
    if key.isdigit():
        return {"order": key}
    value = bracket(key)
    return {"order": value} if value is not None else None


def _keyword(prop: str, table: dict[str, str]):
    def compute(match: re.Match[str], theme: Theme) -> Properties | None:
        value = table.get(match.group("value"))
        return {prop: value} if value is not None else None

    return compute


def _gap(match: re.Match[str], theme: Theme) -> Properties | None:
    value = length(theme, match.group("value"))
    if value is None:
        return None
    axis = match.group("axis")
    prop = {"x": "column-gap", "y": "row-gap"}.get(axis or "", "gap")
    return {prop: value}


def _grid_template(match: re.Match[str], theme: Theme) -> Properties | None:
    prop = "grid-template-columns" if match.group("kind") == "cols" else "grid-template-rows"
    key = match.group("value")
    if key.isdigit() and int(key) > 0:
        return {prop: f"repeat({key}, minmax(0, 1fr))"}
    if key == "none":
        return {prop: "none"}
    value = bracket(key)
    return {prop: value} if value is not None else None


def _grid_span(match: re.Match[str], theme: Theme) -> Properties | None:
    prop = "grid-column" if match.group("kind") == "col" else "grid-row"
    key = match.group("value")
    if key == "full":
        return {prop: "1 / -1"}
    if key.isdigit() and int(key) > 0:
        return {prop: f"span {key} / span {key}"}
    return None


@plugin("layout")
def layout(registry: RuleRegistry) -> None:
    registry.add_rule(
        StaticRule(
            "container",
            {"width": "100%", "margin-left": "auto", "margin-right": "auto"},
            layer=Layer.COMPONENTS,
        )
    )
    registry.add_rule(StaticRule("@container", {"container-type": "inline-size"}))
    registry.add_rules(StaticRule(name, {"display": value}) for name, value in DISPLAY.items())
    registry.add_rules(StaticRule(name, {"position": name}) for name in POSITION)
    registry.add_rules(
        [
            StaticRule("visible", {"visibility": "visible"}),
            StaticRule("invisible", {"visibility": "hidden"}),
            StaticRule("collapse", {"visibility": "collapse"}),
            StaticRule("isolate", {"isolation": "isolate"}),
            StaticRule("box-border", {"box-sizing": "border-box"}),
            StaticRule("box-content", {"box-sizing": "content-box"}),
            StaticRule(
                "sr-only",
                {
                    "position": "absolute",
                    "width": "1px",
                    "height": "1px",
                    "padding": "0",
                    "margin": "-1px",
                    "overflow": "hidden",
                    "clip": "rect(0, 0, 0, 0)",
                    "white-space": "nowrap",
                    "border-width": "0",
                },
            ),
        ]
    )
    registry.add_rule(
        DynamicRule(
            Regex(r"overflow(?:-(?P<axis>[xy]))?-(?P<value>auto|hidden|clip|visible|scroll)"),
            lambda m, theme: {
                f"overflow-{m.group('axis')}" if m.group("axis") else "overflow": m.group("value")
            },
            name="overflow",
        )
    )
    registry.add_rule(
        DynamicRule(
            Regex(r"(?P<side>inset-x|inset-y|inset|top|right|bottom|left|start|end)-(?P<value>.+)"),
            _inset,
            name="inset",
            negative=True,
        )
    )
    registry.add_rule(DynamicRule(Regex(r"z-(?P<value>.+)"), _z_index, name="z-index", negative=True))
    registry.add_rule(DynamicRule(Regex(r"order-(?P<value>.+)"), _order, name="order", negative=True))
    registry.add_rules(StaticRule(name, props) for name, props in FLEX.items())
    registry.add_rules(
        [
            DynamicRule(Regex(r"items-(?P<value>[a-z]+)"), _keyword("align-items", ALIGN_ITEMS), name="align-items"),
            DynamicRule(Regex(r"justify-(?P<value>[a-z]+)"), _keyword("justify-content", JUSTIFY), name="justify-content"),
            DynamicRule(Regex(r"content-(?P<value>[a-z]+)"), _keyword("align-content", JUSTIFY), name="align-content"),
            DynamicRule(Regex(r"self-(?P<value>[a-z]+)"), _keyword("align-self", SELF), name="align-self"),
            DynamicRule(Regex(r"gap(?:-(?P<axis>[xy]))?-(?P<value>.+)"), _gap, name="gap"),
            DynamicRule(Regex(r"grid-(?P<kind>cols|rows)-(?P<value>.+)"), _grid_template, name="grid-template"),
            DynamicRule(Regex(r"(?P<kind>col|row)-span-(?P<value>.+)"), _grid_span, name="grid-span"),
        ]
    )
