"""Shared helpers for routes."""

from typing import Any, Dict

from flask import g, jsonify, request

from core.exceptions import AppError, ConfigurationError, LLMError, RepositoryError, ValidationError
from core.logger import logger
from models.auth_models import AuthSession
from models.saved_cv import UNSET
from services.container import Container


def get_container() -> Container:
    """Container bound to the current request."""
    return g.container


def get_json_body() -> Dict[str, Any]:
    """Parse the request body as a JSON object."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object", fields={"body": "Expected a JSON object"})
    return data


def field(data: Dict[str, Any], camel_name: str, snake_name: str = None) -> Any:
    """Value of a body field under its camelCase or snake_case name, or UNSET."""
    if camel_name in data:
        return data[camel_name]
    if snake_name and snake_name in data:
        return data[snake_name]
    return UNSET


def require_user():
    """Signed-in user; raises AuthenticationError otherwise."""
    return get_container().get_current_user.execute().user


def session_payload(auth_session: AuthSession) -> Dict[str, Any]:
    """Public part of an auth session; tokens stay in the server-side cookie."""
    return {"user": auth_session.user.to_dict()}


def register_error_handlers(app):
    """Map exceptions to JSON error responses."""

    @app.errorhandler(AppError)
    def handle_app_error(error: AppError):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(ConfigurationError)
    def handle_configuration_error(error: ConfigurationError):
        logger.error(f"Configuration error: {str(error)}")
        return jsonify({"error": "CONFIGURATION_ERROR", "message": str(error)}), 503

    @app.errorhandler(LLMError)
    def handle_llm_error(error: LLMError):
        logger.error(f"AI service error: {str(error)}")
        return jsonify({"error": "AI_SERVICE_ERROR", "message": str(error)}), 502

    @app.errorhandler(RepositoryError)
    def handle_repository_error(error: RepositoryError):
        logger.error(f"Storage error: {str(error)}", exc_info=True)
        return jsonify({"error": "STORAGE_ERROR", "message": str(error)}), 500
