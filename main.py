#!/usr/bin/env python3
"""
LabWhere - Labware location tracking service
=============================================

Single-command run:  python main.py

See config.py for all environment-variable tunables.
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify

import config
from db import init_db
from api import api_bp

logger = logging.getLogger("labwhere")


def configure_logging(level: str = config.LOG_LEVEL) -> None:
    logging.basicConfig(level=level, format=config.LOG_FORMAT)


def create_app(db_url: str | None = None) -> Flask:
    """Flask application factory."""

    app = Flask(__name__)
    app.config["DEBUG"] = config.DEBUG

    # ── Initialise database ─────────────────────────────────────────
    init_db(db_url or config.DB_URL)

    # ── Register blueprints ─────────────────────────────────────────
    app.register_blueprint(api_bp)

    # ── Error handlers ──────────────────────────────────────────────
    @app.errorhandler(404)
    def _404(_e):
        return jsonify({"error": "not found"}), 404

    @app.errorhandler(500)
    def _500(_e):
        return jsonify({"error": "internal server error"}), 500

    return app


def main():
    configure_logging()
    app = create_app()
    logger.info(f"Environment: {config.ENVIRONMENT}")
    logger.info(f"Server running on port: {config.PORT}")
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)


if __name__ == "__main__":
    main()
