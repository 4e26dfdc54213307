"""CLI command: style-engine generate -- compile a style object."""

from __future__ import annotations

import json

import click

from style_engine.cli.io import read_styles
from style_engine.engine import get_style_engine
from style_engine.model.result import GenerateOptions


@click.command()
@click.argument("stylefile", type=click.File("r"), default="-")
@click.option("--selector", default=None, help="Wrap declarations in a rule for this selector")
def generate(stylefile, selector: str | None) -> None:
    """Compile a JSON style object into css and classnames.

    Reads STYLEFILE (or stdin) and prints the result as JSON, or
    ``null`` when the input is empty or not an object.
    """
    try:
        options = GenerateOptions(selector=selector)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--selector") from exc

    styles = read_styles(stylefile)
    result = get_style_engine().generate(styles, options)
    click.echo(json.dumps(result.to_dict() if result is not None else None))
