"""Value lookups shared by the core utility plugins.

Every helper returns None when it cannot produce a valid CSS value, so a
:class:`~brisk.model.rule.DynamicRule` can hand the body on to later rules
instead of emitting broken CSS.
"""

from __future__ import annotations

import re
from typing import Any, Mapping

from brisk.matcher.values import is_color
from brisk.model.rule import Theme
from brisk.parser.syntax import parse_arbitrary_value

_FRACTION_RE = re.compile(r"^(?P<num>\d+)/(?P<den>\d+)$")
_LENGTH_RE = re.compile(r"^-?(?:\d*\.?\d+)(?:[a-z%]+)?$|^(?:calc|min|max|clamp)\(", re.IGNORECASE)
_COLOR_FUNCS = ("var(", "color-mix(", "oklch(", "oklab(", "lab(", "lch(", "hwb(")


def bracket(text: str, hints: tuple[str | None, ...] = (None,)) -> str | None:
    """Payload of a ``[...]`` value whose type hint is one of *hints*.

    >>> bracket("[3px]")
    '3px'
    >>> bracket("[color:red]", hints=("color",))
    'red'
    >>> bracket("[]") is None
    True
    """
    if not (text.startswith("[") and text.endswith("]")):
        return None
    parsed = parse_arbitrary_value(text)
    if parsed is None:
        return None
    hint, value = parsed
    if hint not in hints:
        return None
    value = value.strip()
    return value or None


def is_bracketed(text: str) -> bool:
    return text.startswith("[") and text.endswith("]")


def looks_like_color(value: str) -> bool:
    value = value.strip()
    return is_color(value) or value.startswith(_COLOR_FUNCS) or value.isalpha()


def looks_like_length(value: str) -> bool:
    return bool(_LENGTH_RE.match(value.strip()))


def theme_value(theme: Theme, section: str, key: str) -> str | None:
    values = theme.get(section)
    if not isinstance(values, Mapping):
        return None
    value = values.get(key)
    return value if isinstance(value, str) else None


def theme_entry(theme: Theme, section: str, key: str) -> Any:
    values = theme.get(section)
    if not isinstance(values, Mapping):
        return None
    return values.get(key)


def color(theme: Theme, key: str) -> str | None:
    """Resolve ``red-500``, ``white`` or ``[#123456]`` to a color value."""
    if is_bracketed(key):
        explicit = bracket(key, hints=("color",))
        if explicit is not None:
            return explicit
        value = bracket(key)
        if value is not None and looks_like_color(value):
            return value
        return None
    colors = theme.get("colors")
    if not isinstance(colors, Mapping):
        return None
    direct = colors.get(key)
    if isinstance(direct, str):
        return direct
    name, _, shade = key.rpartition("-")
    palette = colors.get(name)
    if isinstance(palette, Mapping):
        value = palette.get(shade)
        return value if isinstance(value, str) else None
    return None


def length(theme: Theme, key: str, section: str = "spacing") -> str | None:
    """Resolve a spacing-scale key or a ``[...]`` length."""
    if is_bracketed(key):
        explicit = bracket(key, hints=("length",))
        if explicit is not None:
            return explicit
        value = bracket(key)
        if value is not None and not looks_like_color(value):
            return value
        return None
    return theme_value(theme, section, key)


def fraction(key: str) -> str | None:
    """``1/2`` -> ``50%``; zero denominators are rejected."""
    match = _FRACTION_RE.match(key)
    if not match:
        return None
    den = int(match.group("den"))
    if den == 0:
        return None
    return f"{round(int(match.group('num')) / den * 100, 6):g}%"


def plain(theme: Theme, section: str, key: str) -> str | None:
    """Theme lookup that also accepts any non-empty ``[...]`` value."""
    if is_bracketed(key):
        return bracket(key)
    return theme_value(theme, section, key)
