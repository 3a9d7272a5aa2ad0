"""Mapping of upstream error messages onto domain errors.

Upstream services report throttling and duplicate accounts only through
free-text messages, so the matched substrings live here and nowhere else.
"""

from contextlib import contextmanager
from typing import Dict, Iterator, Optional

from constants import ErrorMarkers, Messages
from core.exceptions import ConflictError, RateLimitError, ValidationError
from core.logger import get_logger
from models.validation import ParseFailure

logger = get_logger("use_cases")


def is_rate_limit_error(error: BaseException) -> bool:
    return ErrorMarkers.RATE_LIMIT in str(error)


def is_already_registered_error(error: BaseException) -> bool:
    return ErrorMarkers.ALREADY_REGISTERED in str(error)


@contextmanager
def rate_limit_as_domain_error(action: str) -> Iterator[None]:
    """Re-raise throttling errors as RateLimitError; let everything else through unchanged."""
    try:
        yield
    except Exception as exc:
        if is_rate_limit_error(exc):
            logger.warning(f"AI service throttled {action} request: {exc}")
            raise RateLimitError(Messages.RATE_LIMITED.format(action=action)) from exc
        raise


@contextmanager
def already_registered_as_conflict() -> Iterator[None]:
    """Re-raise duplicate-account errors as ConflictError."""
    try:
        yield
    except Exception as exc:
        if is_already_registered_error(exc):
            logger.warning("Sign-up rejected: email already registered")
            raise ConflictError(Messages.EMAIL_TAKEN) from exc
        raise


def validation_failed(message: str, failure: Optional[ParseFailure] = None,
                      fields: Optional[Dict[str, str]] = None) -> ValidationError:
    """Build a ValidationError from a schema failure or an explicit field map."""
    field_map = dict(fields or {})
    if failure is not None:
        field_map.update(failure.as_field_map())
    logger.warning(f"Validation failed: {message} {field_map}")
    return ValidationError(message, field_map)
