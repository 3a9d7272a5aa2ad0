"""Configuration package."""
from config.settings import Settings, settings

__all__ = ["Settings", "settings"]
