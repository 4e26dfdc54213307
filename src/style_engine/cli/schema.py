"""CLI command: style-engine schema -- display the style definition table."""

from __future__ import annotations

import click

from style_engine.engine import get_style_engine


@click.command()
def schema() -> None:
    """Display the style definitions, grouped by category."""
    for category, definitions in get_style_engine().schema:
        click.echo(f"{category}:")
        for definition in definitions:
            parts = [f"  {definition.name}", f"kind={definition.kind.value}"]
            if "default" in definition.properties:
                parts.append(f"default={definition.properties['default']}")
            if definition.sides_template:
                parts.append(f"sides={definition.sides_template}")
            if definition.classnames:
                parts.append(f"classnames={','.join(definition.classnames)}")
            if definition.css_vars:
                parts.append(f"css_vars={','.join(definition.css_vars)}")
            click.echo("  ".join(parts))
