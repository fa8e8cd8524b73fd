"""Token diagnostics: validation rules and the validator that runs them."""

from brisk.validation.rules import (
    ALL_RULES,
    check_arbitrary_brackets,
    check_conflicting_classes,
    check_empty_opacity,
    check_syntax,
    check_unknown_class,
    check_unknown_variant,
)
from brisk.validation.validator import ValidationError, expand_tokens, validate, validate_or_raise

__all__ = [
    "ALL_RULES",
    "ValidationError",
    "expand_tokens",
    "validate",
    "validate_or_raise",
    "check_arbitrary_brackets",
    "check_conflicting_classes",
    "check_empty_opacity",
    "check_syntax",
    "check_unknown_class",
    "check_unknown_variant",
]
