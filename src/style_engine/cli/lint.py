"""CLI command: style-engine lint -- explain what a style object drops."""

from __future__ import annotations

import sys

import click

from style_engine.cli.io import read_styles
from style_engine.model.diagnostic import Severity
from style_engine.validation import validate


@click.command()
@click.argument("stylefile", type=click.File("r"), default="-")
def lint(stylefile) -> None:
    """Lint a JSON style object.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    styles = read_styles(stylefile)
    diagnostics = validate(styles)

    name = getattr(stylefile, "name", "<stdin>")
    if not diagnostics:
        click.echo(f"OK: {name} is clean (0 diagnostics)")
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
