"""brisk model layer -- public type re-exports."""

from brisk.model.diagnostic import Diagnostic, Severity
from brisk.model.options import GenerateOptions
from brisk.model.parsed import ParsedClass
from brisk.model.result import MatchResult
from brisk.model.rule import (
    DynamicRule,
    DynamicVariant,
    Layer,
    NestedRule,
    Properties,
    Regex,
    Rule,
    StaticRule,
    Theme,
    Variant,
    VariantKind,
)

__all__ = [
    # parsed
    "ParsedClass",
    # rules
    "Regex",
    "Layer",
    "Rule",
    "StaticRule",
    "NestedRule",
    "DynamicRule",
    "Properties",
    "Theme",
    # variants
    "Variant",
    "VariantKind",
    "DynamicVariant",
    # results
    "MatchResult",
    "GenerateOptions",
    # diagnostic
    "Severity",
    "Diagnostic",
]
