from __future__ import annotations

from flask import Flask

from style_engine.engine import StyleEngine, get_style_engine


def create_app(
    engine: StyleEngine | None = None,
    config: dict | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.setdefault("STYLE_SELECTOR", None)
    app.config.update(config or {})

    app.extensions["style_engine"] = engine or get_style_engine()

    from style_engine.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
