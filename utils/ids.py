"""Identifier generation."""

import itertools
import uuid
from typing import Callable

IdFactory = Callable[[], str]


def generate_id() -> str:
    """Return a new random UUID4 string."""
    return str(uuid.uuid4())


def sequential_ids(prefix: str = "id") -> IdFactory:
    """Build a deterministic id factory: ``prefix-1``, ``prefix-2``, ..."""
    counter = itertools.count(1)
    return lambda: f"{prefix}-{next(counter)}"
