"""Font, text and whitespace utilities."""

from __future__ import annotations

import re

from brisk.model.rule import DynamicRule, Properties, Regex, StaticRule, Theme
from brisk.plugins.values import bracket, is_bracketed, looks_like_length, plain, theme_entry, theme_value
from brisk.registry.plugin import plugin
from brisk.registry.registry import RuleRegistry

STATIC: dict[str, Properties] = {
    "text-left": {"text-align": "left"},
    "text-center": {"text-align": "center"},
    "text-right": {"text-align": "right"},
    "text-justify": {"text-align": "justify"},
    "text-start": {"text-align": "start"},
    "text-end": {"text-align": "end"},
    "italic": {"font-style": "italic"},
    "not-italic": {"font-style": "normal"},
    "underline": {"text-decoration-line": "underline"},
    "overline": {"text-decoration-line": "overline"},
    "line-through": {"text-decoration-line": "line-through"},
    "no-underline": {"text-decoration-line": "none"},
    "uppercase": {"text-transform": "uppercase"},
    "lowercase": {"text-transform": "lowercase"},
    "capitalize": {"text-transform": "capitalize"},
    "normal-case": {"text-transform": "none"},
    "truncate": {"overflow": "hidden", "text-overflow": "ellipsis", "white-space": "nowrap"},
    "text-ellipsis": {"text-overflow": "ellipsis"},
    "text-clip": {"text-overflow": "clip"},
    "antialiased": {"-webkit-font-smoothing": "antialiased", "-moz-osx-font-smoothing": "grayscale"},
    "break-normal": {"overflow-wrap": "normal", "word-break": "normal"},
    "break-words": {"overflow-wrap": "break-word"},
    "break-all": {"word-break": "break-all"},
}

WHITESPACE = ("normal", "nowrap", "pre", "pre-line", "pre-wrap", "break-spaces")


def _font_size(match: re.Match[str], theme: Theme) -> Properties | None:
    key = match.group("value")
    if is_bracketed(key):
        value = bracket(key, hints=("length",)) or bracket(key)
        if value is None or not looks_like_length(value):
            return None
        return {"font-size": value}
    entry = theme_entry(theme, "fontSize", key)
    if isinstance(entry, str):
        return {"font-size": entry}
    if isinstance(entry, (list, tuple)) and entry:
        props = {"font-size": entry[0]}
        if len(entry) > 1:
            props["line-height"] = entry[1]
        return props
    return None


def _font(match: re.Match[str], theme: Theme) -> Properties | None:
    key = match.group("value")
    if is_bracketed(key):
        value = bracket(key)
        if value is None:
            return None
        return {"font-weight": value} if value.isdigit() else {"font-family": value}
    weight = theme_value(theme, "fontWeight", key)
    if weight is not None:
        return {"font-weight": weight}
    family = theme_value(theme, "fontFamily", key)
    return {"font-family": family} if family is not None else None


def _theme_property(prop: str, section: str):
    def compute(match: re.Match[str], theme: Theme) -> Properties | None:
        value = plain(theme, section, match.group("value"))
        return {prop: value} if value is not None else None

    return compute


@plugin("typography")
def typography(registry: RuleRegistry) -> None:
    registry.add_rules(StaticRule(name, props) for name, props in STATIC.items())
    registry.add_rules(StaticRule(f"whitespace-{value}", {"white-space": value}) for value in WHITESPACE)
    registry.add_rules(
        [
            DynamicRule(Regex(r"text-(?P<value>.+)"), _font_size, name="font-size"),
            DynamicRule(Regex(r"font-(?P<value>.+)"), _font, name="font"),
            DynamicRule(Regex(r"leading-(?P<value>.+)"), _theme_property("line-height", "lineHeight"), name="line-height"),
            DynamicRule(
                Regex(r"tracking-(?P<value>.+)"),
                _theme_property("letter-spacing", "letterSpacing"),
                name="letter-spacing",
            ),
        ]
    )
