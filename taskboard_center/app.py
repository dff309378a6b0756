"""
Taskboard web application

Server-rendered task list on top of a local SQLite file.

Usage:
    python -m taskboard_center.app                       # PORT env var or 3000
    python -m taskboard_center.app --port 8080
    python -m taskboard_center.app --db-path /tmp/tasks.db
"""
import argparse
import logging
from datetime import datetime
from typing import List, Optional

from flask import Flask, redirect, url_for
from markupsafe import Markup, escape
from werkzeug.exceptions import HTTPException

from taskboard_core.config import TaskboardConfig
from taskboard_core.store import TaskStore
from taskboard_core.validator import is_iso_date

logger = logging.getLogger(__name__)


def create_app(config: Optional[TaskboardConfig] = None) -> Flask:
    """Create the Taskboard Flask application."""
    config = config or TaskboardConfig.from_env()

    app = Flask(__name__)
    app.config["TASKBOARD"] = config

    # Opened once and held for the life of the process
    app.task_store = TaskStore(config.db_path)

    @app.template_filter("pretty_date")
    def pretty_date(value):
        if not value:
            return ""
        if not is_iso_date(value):
            return str(value)
        try:
            return datetime.strptime(value, "%Y-%m-%d").strftime("%d %b %Y")
        except ValueError:
            return str(value)

    @app.template_filter("nl2br")
    def nl2br(text):
        if not text:
            return ""
        return Markup("<br>").join(escape(text).split("\n"))

    from taskboard_center.routes.task_routes import tasks_bp
    app.register_blueprint(tasks_bp)

    @app.route("/")
    def index():
        return redirect(url_for("tasks.list_tasks"))

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        if isinstance(error, HTTPException):
            return error
        logger.exception("Unhandled error while processing request")
        return "Internal Server Error", 500, {"Content-Type": "text/plain; charset=utf-8"}

    return app


def build_config(argv: Optional[List[str]] = None) -> TaskboardConfig:
    """Environment first, CLI args take highest priority."""
    parser = argparse.ArgumentParser(description="Taskboard task list server")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on (default: $PORT or 3000)")
    parser.add_argument("--host", type=str, default=None, help="Interface to bind (default: 127.0.0.1)")
    parser.add_argument("--db-path", type=str, default=None, help="SQLite database file")
    args = parser.parse_args(argv)

    config = TaskboardConfig.from_env()
    if args.port is not None:
        config.port = args.port
    if args.host is not None:
        config.host = args.host
    if args.db_path is not None:
        config.db_path = args.db_path
    return config


def main(argv: Optional[List[str]] = None):
    config = build_config(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [TASKBOARD] %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(config)
    logger.info("Task Manager running on http://localhost:%d", config.port)
    app.run(host=config.host, port=config.port, debug=config.debug)


if __name__ == "__main__":
    main()
