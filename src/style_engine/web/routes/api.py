from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from style_engine.model.result import GenerateOptions
from style_engine.validation import validate

api_bp = Blueprint("api", __name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


def _engine():
    return current_app.extensions["style_engine"]


@api_bp.route("/generate", methods=["POST"])
def generate_styles():
    """Compile a style object into css and classnames."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or "styles" not in data:
        return jsonify({"error": "styles required"}), 400

    selector = data.get("selector", current_app.config["STYLE_SELECTOR"])
    if selector is not None and not isinstance(selector, str):
        return jsonify({"error": "selector must be a string"}), 400
    try:
        options = GenerateOptions(selector=selector)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    result = _engine().generate(data["styles"], options)
    return jsonify({"result": result.to_dict() if result is not None else None})


@api_bp.route("/sanitize", methods=["POST"])
def sanitize_css():
    """Filter a style attribute string through the CSS sanitizer."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get("css"), str):
        return jsonify({"error": "css string required"}), 400
    return jsonify({"css": _engine().sanitizer.filter_attr(data["css"])})


@api_bp.route("/lint", methods=["POST"])
def lint_styles():
    """Report why parts of a style object would be dropped."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or "styles" not in data:
        return jsonify({"error": "styles required"}), 400

    diagnostics = validate(data["styles"], engine=_engine())
    return jsonify({
        "diagnostics": [d.to_dict() for d in diagnostics],
        "errors": sum(1 for d in diagnostics if d.is_error),
        "warnings": sum(1 for d in diagnostics if d.is_warning),
    })


@api_bp.route("/schema")
def schema():
    """Return the style definition table."""
    return jsonify(_engine().schema.to_dict())
