"""CLI command: textmetrics build -- compute the correction tree of CSS files."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from textmetrics.config import load_metrics
from textmetrics.log import configure_logging
from textmetrics.stylesheet import ParseError
from textmetrics.typography import create_parser


@click.command()
@click.argument("css_files", nargs=-1, required=True, type=click.Path(exists=True))
@click.option(
    "--metrics",
    "metrics_file",
    type=click.Path(),
    default=None,
    help="Font metrics JSON file",
)
@click.option(
    "--dot-replacement",
    default="",
    help="String used in place of '.' in correction paths (default %dot%)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    default=None,
    help="Write the JSON tree to this file instead of stdout",
)
@click.option("--strict", is_flag=True, help="Fail on invalid CSS")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def build(
    css_files: tuple[str, ...],
    metrics_file: str | None,
    dot_replacement: str,
    output: str | None,
    strict: bool,
    verbose: bool,
) -> None:
    """Compute vertical corrections for typography CSS files.

    Files are merged in the order given. The correction tree is printed as
    JSON, keyed by target selector.
    """
    configure_logging(verbose=verbose)
    metrics = load_metrics(metrics_file) if metrics_file else {}
    parser = create_parser(dot_replacement=dot_replacement, metrics=metrics)

    try:
        sources = [Path(path).read_text(encoding="utf-8") for path in css_files]
        tree = parser.parse(sources, strict=strict)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    payload = json.dumps(tree.to_dict(), indent=2)
    if output is None:
        click.echo(payload)
        return

    Path(output).write_text(payload + "\n", encoding="utf-8")
    click.echo(f"Wrote {len(tree)} correction path(s) to {output}")
