"""Arbitrary properties: ``[mask-type:luminance]`` -> ``mask-type: luminance``."""

from __future__ import annotations

import re

from brisk.model.rule import DynamicRule, Properties, Regex, Theme
from brisk.parser.syntax import normalize_arbitrary_value
from brisk.registry.plugin import plugin
from brisk.registry.registry import RuleRegistry


def _property(match: re.Match[str], theme: Theme) -> Properties | None:
    value = normalize_arbitrary_value(match.group("value")).strip()
    if not value:
        return None
    return {match.group("prop"): value}


@plugin("arbitrary")
def arbitrary(registry: RuleRegistry) -> None:
    registry.add_rule(
        DynamicRule(
            Regex(r"\[(?P<prop>-{0,2}[a-zA-Z][a-zA-Z0-9-]*):(?P<value>.+)\]"),
            _property,
            name="arbitrary-property",
        )
    )
