"""Value rewrites applied after a rule resolves: negation, alpha, !important."""

from __future__ import annotations

import re
from typing import Callable

from brisk.model.rule import Properties
from brisk.parser.syntax import normalize_arbitrary_value

IMPORTANT = " !important"

_NUMERIC_RE = re.compile(r"^(?P<number>\d*\.?\d+)(?P<unit>[a-z%]*)$", re.IGNORECASE)
_HEX_RE = re.compile(r"^#(?P<hex>[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
_FUNC_COLOR_RE = re.compile(r"^(?P<func>rgba?|hsla?)\((?P<args>[^()]*)\)$", re.IGNORECASE)


def split_important(value: str) -> tuple[str, str]:
    """Split a trailing ``!important`` marker off *value*."""
    if value.endswith(IMPORTANT):
        return value[: -len(IMPORTANT)], IMPORTANT
    return value, ""


def map_values(properties: Properties, func: Callable[[str], str]) -> Properties:
    """Apply *func* to every value, leaving any ``!important`` marker in place."""
    result: Properties = {}
    for prop, value in properties.items():
        bare, suffix = split_important(value)
        result[prop] = func(bare) + suffix
    return result


def mark_important(properties: Properties) -> Properties:
    return {
        prop: value if value.endswith(IMPORTANT) else f"{value}{IMPORTANT}"
        for prop, value in properties.items()
    }


def negate_value(value: str) -> str:
    """Numerically invert a CSS value.

    Plain numbers and dimensions get a leading minus; ``var()``/``calc()``
    expressions are multiplied by -1; zero and anything else is returned
    unchanged.

    >>> negate_value("1rem")
    '-1rem'
    >>> negate_value("var(--gap)")
    'calc(var(--gap) * -1)'
    """
    value = value.strip()
    match = _NUMERIC_RE.match(value)
    if match:
        if float(match.group("number")) == 0:
            return value
        return f"-{value}"
    if value.startswith("-") and _NUMERIC_RE.match(value[1:]):
        return value[1:]
    if value.startswith(("var(", "calc(", "min(", "max(", "clamp(")):
        return f"calc({value} * -1)"
    return value


def format_alpha(alpha: float | str) -> str:
    if isinstance(alpha, str):
        return normalize_arbitrary_value(alpha)
    return f"{round(alpha, 4):g}"


def hex_to_rgb(hex_value: str) -> tuple[int, int, int] | None:
    match = _HEX_RE.match(hex_value)
    if not match:
        return None
    digits = match.group("hex")
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits[:3])
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def is_color(value: str) -> bool:
    value = value.strip()
    return bool(_HEX_RE.match(value) or _FUNC_COLOR_RE.match(value))


def apply_alpha(value: str, alpha: float | str) -> str:
    """Rewrite a recognised color so it carries *alpha*; other values pass through.

    >>> apply_alpha("#ef4444", 0.5)
    'rgb(239 68 68 / 0.5)'
    """
    bare = value.strip()
    rgb = hex_to_rgb(bare)
    if rgb is not None:
        r, g, b = rgb
        return f"rgb({r} {g} {b} / {format_alpha(alpha)})"
    match = _FUNC_COLOR_RE.match(bare)
    if match is None:
        return value
    func = match.group("func").lower().rstrip("a")
    args = match.group("args").replace("/", " ").replace(",", " ").split()
    if len(args) < 3:
        return value
    return f"{func}({' '.join(args[:3])} / {format_alpha(alpha)})"
