"""CLI command: brisk migrate -- score Tailwind tokens for compatibility."""

from __future__ import annotations

import click

from brisk.migration import ClassMapper, extract_classes


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def migrate(tokens: tuple[str, ...]) -> None:
    """Report how TOKENS from a Tailwind class list carry over.

    Each argument may hold several whitespace-separated classes.
    """
    classes: list[str] = []
    for token in tokens:
        classes.extend(extract_classes(token))

    mapper = ClassMapper()
    mappings = mapper.map_classes(classes)
    report = mapper.analyze_class_compatibility(classes)

    for mapping in mappings:
        if mapping.deprecated:
            status = "DEPRECATED"
        elif not mapping.compatible:
            status = "INCOMPATIBLE"
        elif mapping.warning:
            status = "WARNING"
        else:
            status = "OK"
        line = f"{status:<12} {mapping.original}"
        if mapping.mapped:
            line += f" -> {mapping.mapped}"
        if mapping.warning:
            line += f"  ({mapping.warning})"
        click.echo(line)

    click.echo()
    click.echo(f"Summary: {report.summary()}")

    suggestions = mapper.generate_migration_suggestions(mappings)
    if suggestions:
        click.echo()
        for suggestion in suggestions:
            click.echo(suggestion)
