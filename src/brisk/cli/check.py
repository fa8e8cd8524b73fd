"""CLI command: brisk check -- lint utility tokens."""

from __future__ import annotations

import sys

import click

from brisk.engine import Engine, EngineConfig
from brisk.model.diagnostic import Severity
from brisk.validation import validate as run_validate


@click.command()
@click.argument("tokens", nargs=-1, required=True)
@click.pass_obj
def check(config: EngineConfig | None, tokens: tuple[str, ...]) -> None:
    """Check TOKENS for unknown classes, variants and malformed values.

    Prints diagnostics and exits with code 0 if no errors are found, or
    code 1 if there are errors.
    """
    engine = Engine(config=config)
    diagnostics = run_validate(engine, tokens)

    if not diagnostics:
        click.echo(f"OK: {len(tokens)} token(s) checked (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
