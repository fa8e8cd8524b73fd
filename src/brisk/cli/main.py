"""brisk CLI entry point: Click group with subcommands."""

import logging

import click

from brisk import __version__
from brisk.engine import DARK_MODES, EngineConfig


@click.group()
@click.version_option(version=__version__, prog_name="brisk")
@click.option("--prefix", default="", help="Class-name prefix, e.g. 'tw-'")
@click.option(
    "--dark-mode",
    type=click.Choice(DARK_MODES),
    default="class",
    show_default=True,
    help="Dark variant strategy",
)
@click.option("--important", is_flag=True, help="Mark every declaration !important")
@click.option("-v", "--verbose", is_flag=True, help="Log rule matching at DEBUG level")
@click.pass_context
def cli(ctx: click.Context, prefix: str, dark_mode: str, important: bool, verbose: bool) -> None:
    """brisk - compile utility classes to CSS."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = EngineConfig(prefix=prefix, dark_mode=dark_mode, important=important)


# Import and register subcommands
from brisk.cli.check import check  # noqa: E402
from brisk.cli.compile import compile_  # noqa: E402
from brisk.cli.migrate import migrate  # noqa: E402

cli.add_command(compile_)
cli.add_command(migrate)
cli.add_command(check)
