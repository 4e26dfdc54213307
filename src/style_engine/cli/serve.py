"""CLI command: style-engine serve -- run the JSON API."""

from __future__ import annotations

import click

from style_engine.config import StyleEngineConfig


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=5000, type=int, help="Port to bind to")
@click.option("--selector", default=None, help="Default selector for generated css")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(host: str, port: int, selector: str | None, debug: bool) -> None:
    """Start the style engine web server."""
    from style_engine.web.app import create_app

    config = StyleEngineConfig(host=host, port=port, debug=debug, selector=selector)
    app = create_app(config={"STYLE_SELECTOR": config.selector})
    click.echo(f"Starting style engine on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=config.debug)
