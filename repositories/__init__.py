"""Repository and service interfaces."""
from repositories.base import AIService, AuthRepository, CVRepository

__all__ = ["AIService", "AuthRepository", "CVRepository"]
