"""JSON API for building, storing and improving CVs."""
from pathlib import Path
from typing import Callable, Optional

from dotenv import load_dotenv
from flask import Flask, g, session

from config import settings
from core.logger import logger, setup_logger
from database import init_db
from routes import register_all_routes
from services.container import Container

ContainerFactory = Callable[[Optional[str]], Container]


def create_app(container_factory: Optional[ContainerFactory] = None, db_path: Optional[Path] = None) -> Flask:
    """
    Build the Flask application.

    Args:
        container_factory: Called once per request with the session's access
            token; defaults to a SQLite-backed container
        db_path: Database file (defaults to ``settings.database_path``)

    Returns:
        Configured Flask app
    """
    # Load environment variables
    load_dotenv()

    # Setup logging
    setup_logger(log_level=settings.log_level)

    # Initialize database
    init_db(db_path)

    if container_factory is None:
        def container_factory(access_token: Optional[str]) -> Container:
            return Container.from_settings(access_token=access_token, db_path=db_path)

    app = Flask(__name__)
    app.secret_key = settings.secret_key
    app.config["DATABASE_PATH"] = db_path
    app.config["DEFAULT_TEMPLATE"] = settings.default_template

    @app.before_request
    def bind_container():
        g.container = container_factory(session.get("access_token"))

    register_all_routes(app)

    if not settings.is_azure_configured:
        logger.warning(
            "Azure OpenAI not configured. AI endpoints will return 503.\n"
            "To enable them, add to .env file:\n"
            "  AZURE_OPENAI_API_KEY=your-key\n"
            "  AZURE_OPENAI_ENDPOINT=https://your-resource.openai.azure.com/"
        )

    return app


if __name__ == "__main__":
    logger.info("Starting Flask application")
    create_app().run(debug=True, host="0.0.0.0", port=5000)
