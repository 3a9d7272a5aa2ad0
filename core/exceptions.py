"""Custom exceptions for the application."""
from typing import Dict, Optional


class AppError(Exception):
    """Base exception for domain and use-case errors."""

    code = "APP_ERROR"
    status_code = 400

    def __init__(self, message: str, code: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        """Serialize error for API responses."""
        return {"error": self.code, "message": self.message}


class ValidationError(AppError):
    """Input failed structural or semantic validation."""

    code = "VALIDATION_ERROR"
    status_code = 400

    def __init__(self, message: str, fields: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.fields = dict(fields) if fields else {}

    def to_dict(self) -> dict:
        data = super().to_dict()
        if self.fields:
            data["fields"] = self.fields
        return data


class NotFoundError(AppError):
    """Referenced entity does not exist."""

    code = "NOT_FOUND"
    status_code = 404

    def __init__(self, resource: str, resource_id: Optional[str] = None):
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        else:
            message = f"{resource} not found"
        super().__init__(message)
        self.resource = resource
        self.resource_id = resource_id


class AuthenticationError(AppError):
    """No authenticated user where one is required."""

    code = "AUTH_ERROR"
    status_code = 401

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class AuthorizationError(AppError):
    """Authenticated user lacks permission."""

    code = "AUTHORIZATION_ERROR"
    status_code = 403

    def __init__(self, message: str = "You do not have permission to perform this action"):
        super().__init__(message)


class ConflictError(AppError):
    """Operation would violate a uniqueness constraint."""

    code = "CONFLICT_ERROR"
    status_code = 409


class RateLimitError(AppError):
    """Upstream AI service is throttling requests."""

    code = "RATE_LIMIT_ERROR"
    status_code = 429

    def __init__(self, message: str = "Too many requests. Please try again later."):
        super().__init__(message)


class ConfigurationError(Exception):
    """Error in application configuration."""
    pass


class LLMError(Exception):
    """Error during LLM API call."""
    pass


class RepositoryError(Exception):
    """Error raised by a storage-backed repository."""
    pass
