"""Utility-token parser: variant groups, variants, modifiers and arbitrary values."""

from brisk.parser.errors import ParseError
from brisk.parser.groups import expand_variant_groups
from brisk.parser.parser import Parser
from brisk.parser.syntax import (
    combine_with_variants,
    create_class_name,
    extract_utility,
    extract_variants,
    has_arbitrary,
    has_variants,
    is_negative,
    normalize_arbitrary_value,
    parse_arbitrary_value,
)

__all__ = [
    "ParseError",
    "Parser",
    "expand_variant_groups",
    "combine_with_variants",
    "create_class_name",
    "extract_utility",
    "extract_variants",
    "has_arbitrary",
    "has_variants",
    "is_negative",
    "normalize_arbitrary_value",
    "parse_arbitrary_value",
]
