"""Vercel serverless entry point for the style engine API."""
import sys
import os

# Add src to path so imports work
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from style_engine.web.app import create_app

app = create_app()
