"""Rule and variant definitions contributed by plugins.

Rules come in three shapes, modelled as separate dataclasses and dispatched on
type by the matcher:

- :class:`StaticRule` -- a fixed property mapping.
- :class:`NestedRule` -- a mapping whose values may themselves be mappings,
  keyed by a selector template containing ``&`` (``"&::placeholder"``).
- :class:`DynamicRule` -- a compute function over the pattern match.

A rule pattern is either an exact literal (``str``), a :class:`Regex` source
compiled through the pattern cache under the rule's name, or a precompiled
``re.Pattern``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Callable, Mapping, Union

Properties = dict[str, str]
NestedProperties = Mapping[str, Union[str, Mapping[str, str]]]
Theme = dict[str, Any]

ComputeFunc = Callable[["re.Match[str]", Theme], "Properties | None"]
SelectorFunc = Callable[[str], str]


@dataclass(frozen=True)
class Regex:
    """A generalized pattern given as source text.

    The matcher anchors it (full match) and compiles it through the pattern
    cache keyed by the owning rule's name.
    """

    source: str
    flags: int = 0


PatternLike = Union[str, Regex, "re.Pattern[str]"]


class Layer(IntEnum):
    """Output layer; the integer value is the cascade order."""

    BASE = 0
    COMPONENTS = 1
    UTILITIES = 2

    @property
    def css_name(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class StaticRule:
    pattern: PatternLike
    properties: Properties
    name: str = ""
    layer: Layer = Layer.UTILITIES
    order: int | None = None
    negative: bool = False
    selector: SelectorFunc | None = None


@dataclass(frozen=True)
class NestedRule:
    pattern: PatternLike
    properties: NestedProperties
    name: str = ""
    layer: Layer = Layer.UTILITIES
    order: int | None = None
    negative: bool = False
    selector: SelectorFunc | None = None


@dataclass(frozen=True)
class DynamicRule:
    """A rule whose properties are computed from the pattern match.

    ``compute`` returns a property mapping, ``{}`` when the rule matches but
    emits nothing, or None to let later rules try.
    """

    pattern: PatternLike
    compute: ComputeFunc
    name: str = ""
    layer: Layer = Layer.UTILITIES
    order: int | None = None
    negative: bool = False
    selector: SelectorFunc | None = None


Rule = Union[StaticRule, NestedRule, DynamicRule]


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


class VariantKind(Enum):
    """How a variant changes the rule it wraps."""

    PSEUDO = "pseudo"  # append to the selector: ``:hover``, ``::before``
    PARENT = "parent"  # prefix with an ancestor: ``.dark``, ``.group:hover``
    SELECTOR = "selector"  # template with ``&``: ``&:not(:first-child)``
    AT_RULE = "at_rule"  # wrap in ``@media``/``@container``/``@supports``


@dataclass(frozen=True)
class Variant:
    name: str
    kind: VariantKind
    value: str

    def apply(self, selector: str, at_rules: tuple[str, ...]) -> tuple[str, tuple[str, ...]]:
        """Return the (selector, at_rules) context after wrapping with this variant."""
        if self.kind is VariantKind.PSEUDO:
            return f"{selector}{self.value}", at_rules
        if self.kind is VariantKind.PARENT:
            return f"{self.value} {selector}", at_rules
        if self.kind is VariantKind.SELECTOR:
            return self.value.replace("&", selector), at_rules
        return selector, (*at_rules, self.value)


@dataclass(frozen=True)
class DynamicVariant:
    """Resolves a variant from a pattern match on the variant name.

    Used for parameterised variants such as ``group-hover``, ``data-[state=open]``
    or ``min-[600px]``.  ``resolve`` returns None to reject the name.
    """

    name: str
    pattern: PatternLike
    resolve: Callable[["re.Match[str]"], "Variant | None"]
