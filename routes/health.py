"""Health check route."""

import sqlite3

from flask import current_app, jsonify

from core.logger import logger
from database.db import get_db


def register_health(app):
    """Register health check route."""

    @app.route("/health")
    def health():
        """Health check endpoint for Docker/Kubernetes."""
        try:
            db = get_db(current_app.config.get("DATABASE_PATH"))
            try:
                db.execute("SELECT 1").fetchone()
            finally:
                db.close()
            return jsonify({"status": "healthy", "service": "cv-builder"}), 200
        except sqlite3.Error as e:
            logger.error(f"Health check failed: {str(e)}")
            return jsonify({"status": "unhealthy", "error": str(e)}), 503
