"""Core utilities: logging and exceptions."""
