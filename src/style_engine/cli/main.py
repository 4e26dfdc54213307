"""Style engine CLI entry point: Click group with subcommands."""

import logging

import click

from style_engine import __version__


@click.group()
@click.version_option(version=__version__, prog_name="style-engine")
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging")
def cli(debug: bool) -> None:
    """Style engine - compile block style attributes into CSS and class names."""
    if debug:
        logging.basicConfig(level=logging.DEBUG)


# Import and register subcommands
from style_engine.cli.generate import generate  # noqa: E402
from style_engine.cli.lint import lint  # noqa: E402
from style_engine.cli.sanitize import sanitize  # noqa: E402
from style_engine.cli.schema import schema  # noqa: E402
from style_engine.cli.serve import serve  # noqa: E402

cli.add_command(generate)
cli.add_command(lint)
cli.add_command(sanitize)
cli.add_command(schema)
cli.add_command(serve)
