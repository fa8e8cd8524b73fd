"""CLI command: brisk compile -- turn tokens into CSS."""

from __future__ import annotations

import sys

import click

from brisk.engine import Engine, EngineConfig
from brisk.model.options import GenerateOptions
from brisk.registry import PluginInstallError


@click.command(name="compile")
@click.argument("tokens", nargs=-1, required=True)
@click.option("--minify", is_flag=True, help="Strip non-significant whitespace")
@click.option("--layers", is_flag=True, help="Wrap output in @layer blocks")
@click.option("--sort", is_flag=True, help="Order rules by sort key instead of input order")
@click.option("--comments", is_flag=True, help="Emit each source token as a comment")
@click.pass_obj
def compile_(
    config: EngineConfig | None,
    tokens: tuple[str, ...],
    minify: bool,
    layers: bool,
    sort: bool,
    comments: bool,
) -> None:
    """Compile utility TOKENS (variant groups allowed) to CSS on stdout.

    Tokens that match no rule are skipped silently; use ``brisk check`` to
    list them.
    """
    try:
        engine = Engine(config=config)
    except PluginInstallError as exc:
        click.echo(f"Plugin error: {exc}", err=True)
        sys.exit(1)

    options = GenerateOptions(
        minify=minify,
        source_comments=comments,
        sort_by_property=sort,
        use_layers=layers,
    )
    css = engine.compile(tokens, options)
    if css:
        click.echo(css, nl=not css.endswith("\n"))
