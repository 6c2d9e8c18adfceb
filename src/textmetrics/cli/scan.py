"""CLI command: textmetrics scan -- list correction placeholders in a stylesheet."""

from __future__ import annotations

from pathlib import Path

import click

from textmetrics.log import configure_logging
from textmetrics.placeholders import (
    extract_at_rule_replacement,
    extract_declarations,
    extract_groups,
    extract_property,
    extract_value,
    iter_at_rule_preludes,
)


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True))
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def scan(stylesheet: str, verbose: bool) -> None:
    """List declarations and at-rules carrying correction groups.

    Works on raw source (CSS or SCSS), before any compilation step.
    """
    configure_logging(verbose=verbose)
    path = Path(stylesheet)
    source = path.read_text(encoding="utf-8")

    declarations = extract_declarations(source)
    replacements: list[tuple[str, str]] = []
    for prelude in iter_at_rule_preludes(source):
        fragment = extract_at_rule_replacement(prelude)
        if fragment is not None:
            replacements.append((prelude, fragment))

    click.echo(f"Declarations: {len(declarations)}")
    for declaration in declarations:
        prop = extract_property(declaration)
        value = extract_value(declaration)
        groups = extract_groups(value)
        click.echo(f"  {prop}: {value}  groups={len(groups)}")
        for group in groups:
            click.echo(f"    {{{group}}}")
    click.echo()

    click.echo(f"At-rules: {len(replacements)}")
    for prelude, fragment in replacements:
        name = prelude.split(None, 1)[0]
        click.echo(f"  {name}  replace={fragment}")
