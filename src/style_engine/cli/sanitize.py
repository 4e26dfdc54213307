"""CLI command: style-engine sanitize -- filter CSS declarations."""

from __future__ import annotations

import sys

import click

from style_engine.engine import get_style_engine


@click.command()
@click.argument("css")
def sanitize(css: str) -> None:
    """Filter CSS declarations through the sanitizer.

    Prints the accepted declarations, and the reason for each rejected one
    on stderr. Exits with code 1 if nothing was accepted.
    """
    sanitizer = get_style_engine().sanitizer
    for item in css.split(";"):
        if not item.strip():
            continue
        reason = sanitizer.explain(item)
        if reason is not None:
            click.echo(f"Rejected '{item.strip()}': {reason}", err=True)

    filtered = sanitizer.filter_attr(css)
    if not filtered:
        sys.exit(1)
    click.echo(filtered)
