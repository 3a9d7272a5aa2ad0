"""Agents package."""
from agents.base_agent import BaseAgent
from agents.cv_ai_agent import CVAIAgent

__all__ = [
    "BaseAgent",
    "CVAIAgent",
]
