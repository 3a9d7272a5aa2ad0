"""Services package."""
from services.container import Container

__all__ = ["Container"]
