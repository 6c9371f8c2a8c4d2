# =============================================================================
# File: roster/routes/__init__.py
# Purpose: Group and register all blueprints.
# =============================================================================
from __future__ import annotations

from flask import Flask

from .members import bp as members_bp
from .misc import bp as misc_bp


def register_routes(app: Flask) -> None:
    """Register every blueprint on the Flask app."""
    app.register_blueprint(members_bp, url_prefix="/members")
    app.register_blueprint(misc_bp)
