"""Transform utilities built on composable custom properties.

Each utility sets one ``--tw-*`` variable and the shared ``transform``
declaration, so ``-translate-x-4`` only has to negate the variable.
"""

from __future__ import annotations

import re

from brisk.model.rule import DynamicRule, Properties, Regex, StaticRule, Theme
from brisk.plugins.values import bracket, fraction, is_bracketed, length
from brisk.registry.plugin import plugin
from brisk.registry.registry import RuleRegistry

TRANSFORM = (
    "translate(var(--tw-translate-x, 0), var(--tw-translate-y, 0)) "
    "rotate(var(--tw-rotate, 0)) "
    "skewX(var(--tw-skew-x, 0)) skewY(var(--tw-skew-y, 0)) "
    "scaleX(var(--tw-scale-x, 1)) scaleY(var(--tw-scale-y, 1))"
)

ORIGINS = {
    "center": "center",
    "top": "top",
    "top-right": "top right",
    "right": "right",
    "bottom-right": "bottom right",
    "bottom": "bottom",
    "bottom-left": "bottom left",
    "left": "left",
    "top-left": "top left",
}


def _axes(axis: str | None) -> tuple[str, ...]:
    return (axis,) if axis else ("x", "y")


def _translate(match: re.Match[str], theme: Theme) -> Properties | None:
    key = match.group("value")
    value = "100%" if key == "full" else fraction(key) or length(theme, key)
    if value is None:
        return None
    props = {f"--tw-translate-{axis}": value for axis in _axes(match.group("axis"))}
    props["transform"] = TRANSFORM
    return props


def _degrees(key: str) -> str | None:
    if is_bracketed(key):
        return bracket(key)
    if key.isdigit():
        return f"{key}deg"
    return None


def _rotate(match: re.Match[str], theme: Theme) -> Properties | None:
    value = _degrees(match.group("value"))
    if value is None:
        return None
    return {"--tw-rotate": value, "transform": TRANSFORM}


def _skew(match: re.Match[str], theme: Theme) -> Properties | None:
    value = _degrees(match.group("value"))
    if value is None:
        return None
    return {f"--tw-skew-{match.group('axis')}": value, "transform": TRANSFORM}


def _scale(match: re.Match[str], theme: Theme) -> Properties | None:
    key = match.group("value")
    if is_bracketed(key):
        value = bracket(key)
    elif key.isdigit():
        value = f"{int(key) / 100:g}"
    else:
        value = None
    if value is None:
        return None
    props = {f"--tw-scale-{axis}": value for axis in _axes(match.group("axis"))}
    props["transform"] = TRANSFORM
    return props


@plugin("transforms")
def transforms(registry: RuleRegistry) -> None:
    registry.add_rules(
        [
            DynamicRule(
                Regex(r"translate-(?:(?P<axis>[xy])-)?(?P<value>.+)"),
                _translate,
                name="translate",
                negative=True,
            ),
            DynamicRule(Regex(r"rotate-(?P<value>.+)"), _rotate, name="rotate", negative=True),
            DynamicRule(Regex(r"skew-(?P<axis>[xy])-(?P<value>.+)"), _skew, name="skew", negative=True),
            DynamicRule(Regex(r"scale-(?:(?P<axis>[xy])-)?(?P<value>.+)"), _scale, name="scale", negative=True),
            StaticRule("transform-none", {"transform": "none"}),
        ]
    )
    registry.add_rules(
        StaticRule(f"origin-{name}", {"transform-origin": value}) for name, value in ORIGINS.items()
    )
