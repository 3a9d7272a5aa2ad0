"""Flask route registration."""

from routes.ai import register_ai
from routes.auth import register_auth
from routes.catalog import register_catalog
from routes.cvs import register_cvs
from routes.health import register_health
from routes.helpers import register_error_handlers


def register_all_routes(app):
    """Register all route modules on the Flask app."""
    register_error_handlers(app)
    register_auth(app)
    register_cvs(app)
    register_ai(app)
    register_catalog(app)
    register_health(app)
