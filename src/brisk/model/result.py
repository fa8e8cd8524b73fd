"""MatchResult: a parsed class together with the properties it resolved to."""

from __future__ import annotations

from dataclasses import dataclass, field

from brisk.model.parsed import ParsedClass
from brisk.model.rule import Layer, Properties


@dataclass(frozen=True)
class MatchResult:
    """Output of the matcher for one token.

    Attributes:
        parsed: The parsed token.
        properties: Declarations for :attr:`selector`, in rule order.
        rule_name: Name of the rule that won.
        layer: Output layer of the winning rule.
        sort_key: Ordering key used when sorting by property.
        selector: Final selector after escaping, selector rewrites and variants.
        at_rules: At-rule wrappers from variants, outermost first.
        nested: Extra blocks keyed by fully resolved selector.
    """

    parsed: ParsedClass
    properties: Properties
    rule_name: str
    layer: Layer = Layer.UTILITIES
    sort_key: int = 0
    selector: str = ""
    at_rules: tuple[str, ...] = ()
    nested: dict[str, Properties] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.properties and not any(self.nested.values())
