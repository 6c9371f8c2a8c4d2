# =============================================================================
# File: tests/conftest.py
# Purpose: Per-test temporary member store + Flask app/client fixtures.
# =============================================================================
import pytest

from roster import create_app
from roster.store import FileMemberStore


@pytest.fixture
def members_file(tmp_path, monkeypatch):
    """Point the app at a temporary store file (seeding disabled)."""
    path = tmp_path / "members.txt"
    monkeypatch.setenv("MEMBERS_FILE", str(path))
    monkeypatch.setenv("MEMBERS_SEED_FILE", str(tmp_path / "no_seed.yml"))
    return path


@pytest.fixture
def store(members_file):
    return FileMemberStore(members_file)


@pytest.fixture
def app(members_file):
    members_file.write_text("Anja\nMaren")
    app = create_app()
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
