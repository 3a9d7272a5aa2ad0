"""Application constants."""


class Limits:
    """Size and length limits."""

    MAX_TITLE_LENGTH = 100
    PARSE_TEXT_MIN = 50
    PARSE_TEXT_MAX = 10000
    JOB_DESCRIPTION_MIN = 50
    JOB_DESCRIPTION_MAX = 5000
    IMPROVE_TEXT_MIN = 10
    IMPROVE_TEXT_MAX = 1000
    PASSWORD_MIN = 6
    PASSWORD_MAX = 72
    MAX_FULL_NAME_LENGTH = 100


class ErrorMarkers:
    """Substrings used to recognise upstream error messages."""

    RATE_LIMIT = "rate limit"
    ALREADY_REGISTERED = "already registered"


class Messages:
    """Common user-facing messages."""

    TITLE_REQUIRED = "Title is required"
    TITLE_TOO_LONG = "Title is too long"
    INVALID_CV_DATA = "Invalid CV data"
    INVALID_CREDENTIALS = "Invalid email or password"
    EMAIL_TAKEN = "An account with this email already exists"
    NOT_SIGNED_IN = "No user is currently signed in"
    EXPORT_INCOMPLETE = "CV must have personal info, summary, experience, and education to export"
    RATE_LIMITED = "Too many {action} requests. Please try again in a few minutes."
