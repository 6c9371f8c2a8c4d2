# roster/__init__.py
import logging
import os

import click
from dotenv import load_dotenv
from flask import Flask, render_template

from .errors import StorageError
from .middleware import MethodOverrideMiddleware
from .routes import register_routes
from .seed import DEFAULT_SEED_FILE, seed_members_from_yaml
from .store import FileMemberStore

# Load environment variables from .env file
load_dotenv()


def create_app() -> Flask:
    app = Flask(__name__)

    # ===== Config from environment (read at app creation) =====
    app.config["SECRET_KEY"] = os.getenv("SECRET_KEY", "dev")
    app.config["MEMBERS_FILE"] = os.getenv("MEMBERS_FILE", "members.txt")
    app.config["MEMBERS_SEED_FILE"] = os.getenv(
        "MEMBERS_SEED_FILE", str(DEFAULT_SEED_FILE)
    )
    app.logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())
    # ==========================================================

    store = FileMemberStore(app.config["MEMBERS_FILE"])
    app.extensions["member_store"] = store
    seed_members_from_yaml(store, app.config["MEMBERS_SEED_FILE"])

    # HTML forms only know GET/POST
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)

    register_routes(app)
    register_error_handlers(app)
    register_commands(app)

    app.logger.info("Member store: %s", store.path)
    return app


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(404)
    def not_found(error):
        return render_template("errors/404.html"), 404

    @app.errorhandler(StorageError)
    def storage_failed(error):
        app.logger.error("Member store failure: %s", error, exc_info=error)
        return render_template("errors/500.html"), 500


def register_commands(app: Flask) -> None:
    @app.cli.command("seed-members")
    @click.option("--force", is_flag=True, help="Overwrite an existing store.")
    def seed_members(force: bool):
        """Write the YAML seed roster into the member store."""
        n = seed_members_from_yaml(
            app.extensions["member_store"],
            app.config["MEMBERS_SEED_FILE"],
            force=force,
        )
        click.echo(f"Seeded {n} members")
