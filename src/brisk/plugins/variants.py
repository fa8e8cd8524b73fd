"""Core variants: states, pseudo-elements, breakpoints, media features, dark mode.

Static variants are registered by name.  Parameterised ones (``group-hover``,
``data-[state=open]``, ``min-[600px]``, ``@md`` and the theme breakpoints) are
:class:`DynamicVariant` entries resolved from the variant text.
"""

from __future__ import annotations

import re
from typing import Mapping

from brisk.model.rule import Regex, Variant, VariantKind
from brisk.parser.syntax import normalize_arbitrary_value
from brisk.registry.errors import RegistryError
from brisk.registry.plugin import FunctionPlugin
from brisk.registry.registry import RuleRegistry

PSEUDO_CLASSES: dict[str, str] = {
    "hover": ":hover",
    "focus": ":focus",
    "focus-within": ":focus-within",
    "focus-visible": ":focus-visible",
    "active": ":active",
    "visited": ":visited",
    "target": ":target",
    "first": ":first-child",
    "last": ":last-child",
    "only": ":only-child",
    "odd": ":nth-child(odd)",
    "even": ":nth-child(even)",
    "first-of-type": ":first-of-type",
    "last-of-type": ":last-of-type",
    "only-of-type": ":only-of-type",
    "empty": ":empty",
    "disabled": ":disabled",
    "enabled": ":enabled",
    "checked": ":checked",
    "indeterminate": ":indeterminate",
    "default": ":default",
    "required": ":required",
    "optional": ":optional",
    "valid": ":valid",
    "invalid": ":invalid",
    "in-range": ":in-range",
    "out-of-range": ":out-of-range",
    "placeholder-shown": ":placeholder-shown",
    "autofill": ":autofill",
    "read-only": ":read-only",
    "open": "[open]",
}

PSEUDO_ELEMENTS: dict[str, str] = {
    "before": "::before",
    "after": "::after",
    "placeholder": "::placeholder",
    "file": "::file-selector-button",
    "marker": "::marker",
    "selection": "::selection",
    "first-line": "::first-line",
    "first-letter": "::first-letter",
    "backdrop": "::backdrop",
}

MEDIA_FEATURES: dict[str, str] = {
    "print": "@media print",
    "motion-safe": "@media (prefers-reduced-motion: no-preference)",
    "motion-reduce": "@media (prefers-reduced-motion: reduce)",
    "portrait": "@media (orientation: portrait)",
    "landscape": "@media (orientation: landscape)",
    "contrast-more": "@media (prefers-contrast: more)",
    "contrast-less": "@media (prefers-contrast: less)",
}

ARIA_STATES = ("busy", "checked", "disabled", "expanded", "hidden", "pressed", "readonly", "required", "selected")

DARK_MODES = ("class", "selector", "media")

_PX_RE = re.compile(r"^(?P<n>\d+(?:\.\d+)?)px$")


def dark_variant(mode: str = "class", selector: str | None = None) -> Variant:
    """Build the ``dark`` variant for a dark-mode strategy.

    ``class`` scopes under ``.dark`` (or *selector*), ``selector`` under
    ``[data-theme="dark"]`` (or *selector*), ``media`` wraps the rule in a
    ``prefers-color-scheme`` query.
    """
    if mode == "class":
        return Variant("dark", VariantKind.PARENT, selector or ".dark")
    if mode == "selector":
        return Variant("dark", VariantKind.PARENT, selector or '[data-theme="dark"]')
    if mode == "media":
        return Variant("dark", VariantKind.AT_RULE, "@media (prefers-color-scheme: dark)")
    raise RegistryError(f"Unknown dark mode {mode!r}; expected one of {', '.join(DARK_MODES)}")


def _bracket_inner(text: str) -> str | None:
    value = normalize_arbitrary_value(text).strip()
    return value or None


def _media_condition(text: str) -> str:
    text = text.strip()
    if text.startswith("("):
        return text
    prop, sep, value = text.partition(":")
    if sep:
        return f"({prop.strip()}: {value.strip()})"
    return f"({text})"


def _screen_variants(screens: Mapping[str, str]):
    """Resolver for ``md``, ``max-md`` and ``md-only`` against *screens*."""
    ordered = sorted(
        ((name, value) for name, value in screens.items() if isinstance(value, str)),
        key=lambda item: float(_PX_RE.match(item[1]).group("n")) if _PX_RE.match(item[1]) else 0.0,
    )

    def resolve(match: re.Match[str]) -> Variant | None:
        name = match.group("screen")
        index = next((i for i, (screen, _) in enumerate(ordered) if screen == name), None)
        if index is None:
            return None
        width = ordered[index][1]
        variant = match.group(0)
        if match.group("max"):
            return Variant(variant, VariantKind.AT_RULE, f"@media not all and (min-width: {width})")
        if match.group("only"):
            query = f"@media (min-width: {width})"
            if index + 1 < len(ordered):
                upper = _PX_RE.match(ordered[index + 1][1])
                if upper is not None:
                    limit = float(upper.group("n")) - 0.02
                    query += f" and (max-width: {limit:g}px)"
            return Variant(variant, VariantKind.AT_RULE, query)
        return Variant(variant, VariantKind.AT_RULE, f"@media (min-width: {width})")

    return resolve


def _group_variant(match: re.Match[str]) -> Variant | None:
    kind, state, arbitrary = match.group("kind"), match.group("state"), match.group("arbitrary")
    if arbitrary is not None:
        condition = _bracket_inner(arbitrary)
        if condition is None:
            return None
    else:
        condition = PSEUDO_CLASSES.get(state)
        if condition is None:
            return None
    if kind == "group":
        return Variant(match.group(0), VariantKind.PARENT, f".group{condition}")
    return Variant(match.group(0), VariantKind.SELECTOR, f".peer{condition} ~ &")


def _data_variant(match: re.Match[str]) -> Variant | None:
    condition = _bracket_inner(match.group("value"))
    if condition is None:
        return None
    return Variant(match.group(0), VariantKind.PSEUDO, f"[data-{condition}]")


def _aria_variant(match: re.Match[str]) -> Variant | None:
    state, arbitrary = match.group("state"), match.group("arbitrary")
    if arbitrary is not None:
        condition = _bracket_inner(arbitrary)
        if condition is None:
            return None
        return Variant(match.group(0), VariantKind.PSEUDO, f"[aria-{condition}]")
    if state not in ARIA_STATES:
        return None
    return Variant(match.group(0), VariantKind.PSEUDO, f'[aria-{state}="true"]')


def _supports_variant(match: re.Match[str]) -> Variant | None:
    condition = _bracket_inner(match.group("value"))
    if condition is None:
        return None
    return Variant(match.group(0), VariantKind.AT_RULE, f"@supports {_media_condition(condition)}")


def _width_variant(match: re.Match[str]) -> Variant | None:
    value = _bracket_inner(match.group("value"))
    if value is None:
        return None
    feature = "min-width" if match.group("kind") == "min" else "max-width"
    return Variant(match.group(0), VariantKind.AT_RULE, f"@media ({feature}: {value})")


def _container_variants(containers: Mapping[str, str]):
    def resolve(match: re.Match[str]) -> Variant | None:
        size = match.group("size")
        if size.startswith("["):
            width = _bracket_inner(size[1:-1])
        else:
            width = containers.get(size)
        if not width:
            return None
        return Variant(match.group(0), VariantKind.AT_RULE, f"@container (min-width: {width})")

    return resolve


def variants_plugin(dark_mode: str = "class", dark_selector: str | None = None) -> FunctionPlugin:
    """Plugin registering the core variant set.

    Breakpoint and container sizes are read from the theme installed before
    this plugin; install :func:`~brisk.plugins.theme.theme_plugin` first.
    """
    dark = dark_variant(dark_mode, dark_selector)

    def install(registry: RuleRegistry) -> None:
        for name, value in PSEUDO_CLASSES.items():
            registry.add_variant(Variant(name, VariantKind.PSEUDO, value))
        for name, value in PSEUDO_ELEMENTS.items():
            registry.add_variant(Variant(name, VariantKind.PSEUDO, value))
        for name, value in MEDIA_FEATURES.items():
            registry.add_variant(Variant(name, VariantKind.AT_RULE, value))
        registry.add_variant(Variant("rtl", VariantKind.SELECTOR, '[dir="rtl"] &'))
        registry.add_variant(Variant("ltr", VariantKind.SELECTOR, '[dir="ltr"] &'))
        registry.add_variant(dark)

        theme = registry.theme
        registry.add_dynamic_variant(
            "screens",
            Regex(r"(?P<max>max-)?(?P<screen>[a-z0-9]+)(?P<only>-only)?"),
            _screen_variants(theme.get("screens", {})),
        )
        registry.add_dynamic_variant(
            "group-peer",
            Regex(r"(?P<kind>group|peer)-(?:(?P<state>[a-z-]+)|\[(?P<arbitrary>.+)\])"),
            _group_variant,
        )
        registry.add_dynamic_variant("data", Regex(r"data-\[(?P<value>.+)\]"), _data_variant)
        registry.add_dynamic_variant(
            "aria",
            Regex(r"aria-(?:(?P<state>[a-z-]+)|\[(?P<arbitrary>.+)\])"),
            _aria_variant,
        )
        registry.add_dynamic_variant("supports", Regex(r"supports-\[(?P<value>.+)\]"), _supports_variant)
        registry.add_dynamic_variant("min-max", Regex(r"(?P<kind>min|max)-\[(?P<value>.+)\]"), _width_variant)
        registry.add_dynamic_variant(
            "container",
            Regex(r"@(?P<size>[0-9]*x?[a-z]+|\[.+\])"),
            _container_variants(theme.get("containers", {})),
        )

    return FunctionPlugin(name="variants", install_func=install)
