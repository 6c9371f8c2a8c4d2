# roster/routes/misc.py
from flask import Blueprint, jsonify, redirect, url_for

bp = Blueprint("misc", __name__)


@bp.get("/")
def home():
    """The roster is the whole application: send visitors to the list."""
    return redirect(url_for("members.index"))


@bp.get("/health")
def health():
    """Simple health endpoint used by tests."""
    return jsonify({"status": "ok"})
