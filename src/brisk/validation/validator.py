"""Token validator: expand a class list, lint every token, collect findings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable

from brisk.model.diagnostic import Diagnostic
from brisk.validation.rules import ALL_RULES

if TYPE_CHECKING:
    from brisk.engine import Engine


class ValidationError(Exception):
    """A class list contains tokens that cannot compile; carries the ERROR diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        errors = [str(d) for d in diagnostics if d.is_error]
        super().__init__(f"{len(errors)} error(s) in class list: " + "; ".join(errors))


RuleFunc = Callable[["Engine", list[str]], list[Diagnostic]]


def expand_tokens(engine: Engine, tokens: Iterable[str]) -> list[str]:
    """Flatten variant groups so ``hover:(a b)`` is linted as ``hover:a hover:b``."""
    expanded: list[str] = []
    for token in tokens:
        expanded.extend(engine.parser.expand(token))
    return expanded


def validate(
    engine: Engine, tokens: Iterable[str], extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Lint *tokens* against *engine*'s registry.

    Each rule receives the whole expanded token list, so rules that compare
    tokens (conflicting classes) see every token in order.  Diagnostics come
    back grouped by rule, in :data:`ALL_RULES` order followed by *extra_rules*.
    """
    expanded = expand_tokens(engine, tokens)
    diagnostics: list[Diagnostic] = []
    for rule in (*ALL_RULES, *(extra_rules or ())):
        diagnostics.extend(rule(engine, expanded))
    return diagnostics


def validate_or_raise(
    engine: Engine, tokens: Iterable[str], extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Like :func:`validate`, but unknown or malformed tokens raise :class:`ValidationError`.

    Warnings such as conflicting classes do not raise and are returned.
    """
    diagnostics = validate(engine, tokens, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics
