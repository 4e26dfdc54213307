from __future__ import annotations

import pytest

from style_engine.web.app import create_app


@pytest.fixture
def app():
    """Create a Flask app for testing."""
    application = create_app()
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
