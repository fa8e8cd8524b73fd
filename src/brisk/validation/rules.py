"""Validation rules for utility tokens.

Each rule is a function taking an Engine and the expanded token list and
returning a list of Diagnostic objects describing any issues found.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from brisk.model.diagnostic import Diagnostic, Severity
from brisk.model.parsed import ParsedClass
from brisk.parser.errors import ParseError
from brisk.parser.syntax import split_outside_brackets

if TYPE_CHECKING:
    from brisk.engine import Engine


def _parse(engine: Engine, token: str) -> ParsedClass | None:
    try:
        return engine.parse(token)
    except ParseError:
        return None


def _bracket_problem(token: str) -> str | None:
    depth = 0
    opened_at = -1
    for i, ch in enumerate(token):
        if ch == "[":
            if depth == 0:
                opened_at = i
            depth += 1
        elif ch == "]":
            depth -= 1
            if depth < 0:
                return "unbalanced-brackets"
            if depth == 0 and i == opened_at + 1:
                return "empty-arbitrary"
    return "unbalanced-brackets" if depth else None


# ---------------------------------------------------------------------------
# Syntax rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_syntax(engine: Engine, tokens: list[str]) -> list[Diagnostic]:
    """Every token must survive group expansion and parse on its own."""
    diagnostics: list[Diagnostic] = []
    for token in tokens:
        try:
            engine.parse(token)
        except ParseError as exc:
            diagnostics.append(
                Diagnostic(
                    rule="check_syntax",
                    severity=Severity.ERROR,
                    message=str(exc),
                    code="parse-error",
                    token=token,
                    fix="Balance the parentheses of the variant group.",
                )
            )
    return diagnostics


def check_arbitrary_brackets(engine: Engine, tokens: list[str]) -> list[Diagnostic]:
    """Arbitrary values must have balanced, non-empty brackets."""
    diagnostics: list[Diagnostic] = []
    for token in tokens:
        problem = _bracket_problem(token)
        if problem is None or token.endswith("/[]"):
            continue
        if problem == "empty-arbitrary":
            message = "Empty arbitrary value"
        else:
            message = "Unbalanced brackets in arbitrary value"
        diagnostics.append(
            Diagnostic(
                rule="check_arbitrary_brackets",
                severity=Severity.ERROR,
                message=message,
                code=problem,
                token=token,
            )
        )
    return diagnostics


def check_empty_opacity(engine: Engine, tokens: list[str]) -> list[Diagnostic]:
    """``/[]`` is not a valid opacity modifier."""
    return [
        Diagnostic(
            rule="check_empty_opacity",
            severity=Severity.ERROR,
            message="Empty arbitrary opacity modifier",
            code="empty-opacity",
            token=token,
            fix=f"Use a value such as {token[:-3]}/50 or {token[:-3]}/[0.5].",
        )
        for token in tokens
        if token.endswith("/[]")
    ]


def check_unknown_variant(engine: Engine, tokens: list[str]) -> list[Diagnostic]:
    """Colon-delimited prefixes must be registered variants."""
    diagnostics: list[Diagnostic] = []
    for token in tokens:
        parsed = _parse(engine, token)
        if parsed is None:
            continue
        leftover = split_outside_brackets(parsed.body, ":")[:-1]
        if leftover:
            diagnostics.append(
                Diagnostic(
                    rule="check_unknown_variant",
                    severity=Severity.ERROR,
                    message=f'Unknown variant: "{leftover[0]}"',
                    code="unknown-variant",
                    token=token,
                )
            )
    return diagnostics


def check_unknown_class(engine: Engine, tokens: list[str]) -> list[Diagnostic]:
    """Tokens that parse cleanly must resolve to a rule."""
    diagnostics: list[Diagnostic] = []
    for token in tokens:
        parsed = _parse(engine, token)
        if parsed is None or len(split_outside_brackets(parsed.body, ":")) > 1:
            continue
        if _bracket_problem(token) or token.endswith("/[]"):
            continue
        if engine.matcher.match(parsed) is None:
            diagnostics.append(
                Diagnostic(
                    rule="check_unknown_class",
                    severity=Severity.ERROR,
                    message=f'Unknown utility class: "{token}"',
                    code="unknown-class",
                    token=token,
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Advisory rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_conflicting_classes(engine: Engine, tokens: list[str]) -> list[Diagnostic]:
    """Two tokens in the same variant context setting the same property."""
    diagnostics: list[Diagnostic] = []
    seen: dict[tuple[tuple[str, ...], str], str] = {}
    for token in tokens:
        parsed = _parse(engine, token)
        if parsed is None:
            continue
        result = engine.matcher.match(parsed)
        if result is None:
            continue
        for prop in result.properties:
            key = (parsed.variants, prop)
            previous = seen.get(key)
            if previous is not None and previous != token:
                diagnostics.append(
                    Diagnostic(
                        rule="check_conflicting_classes",
                        severity=Severity.WARNING,
                        message=(
                            f'Potentially conflicting classes for "{prop}". '
                            f'"{token}" will take precedence over "{previous}".'
                        ),
                        code="conflicting-classes",
                        token=token,
                    )
                )
            seen[key] = token
    return diagnostics


ALL_RULES = [
    check_syntax,
    check_arbitrary_brackets,
    check_empty_opacity,
    check_unknown_variant,
    check_unknown_class,
    check_conflicting_classes,
]
