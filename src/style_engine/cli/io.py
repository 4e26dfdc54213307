"""Shared helpers for CLI commands that read style objects."""

from __future__ import annotations

import json
import sys
from typing import IO

import click


def read_styles(stream: IO[str]) -> object:
    """Load a JSON style object, exiting with code 1 on malformed input."""
    try:
        return json.load(stream)
    except json.JSONDecodeError as exc:
        click.echo(f"Error: invalid JSON: {exc}", err=True)
        sys.exit(1)
