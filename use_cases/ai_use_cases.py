"""Use-cases delegating to the AI service.

All four check their input locally before calling the service and turn a
throttling error from the service into RateLimitError. Any other service
error propagates unchanged.
"""

from dataclasses import dataclass
from typing import Any, Dict

from constants import Limits
from core.logger import get_logger
from models.ai_models import CVScore, ImproveTextResult, JobMatch
from models.cv_models import CVData, has_content
from models.validation import safe_parse_cv_data, safe_parse_structure
from repositories.base import AIService
from use_cases.error_translation import rate_limit_as_domain_error, validation_failed

logger = get_logger("use_cases")


def _validate_length(value: Any, field: str, minimum: int, maximum: int, *,
                     required: str, too_short: str, too_long: str, noun: str) -> str:
    """Check ``value`` is non-blank and its raw length is within [minimum, maximum]; return it trimmed."""
    if not isinstance(value, str) or not value.strip():
        raise validation_failed(f"{noun} is required", fields={field: required})
    if len(value) < minimum:
        raise validation_failed(f"{noun} is too short", fields={field: too_short})
    if len(value) > maximum:
        raise validation_failed(f"{noun} is too long", fields={field: too_long})
    return value.strip()


def _validated_cv(cv_data: Any, message: str) -> CVData:
    result = safe_parse_cv_data(cv_data)
    if not result.ok:
        raise validation_failed(message, result)
    return result.value


@dataclass
class AnalyzeCVInput:
    cv_data: Any


@dataclass
class AnalyzeCVOutput:
    score: CVScore


class AnalyzeCVUseCase:
    """Score a CV."""

    def __init__(self, ai_service: AIService):
        self.ai_service = ai_service

    def execute(self, request: AnalyzeCVInput) -> AnalyzeCVOutput:
        structure = safe_parse_structure(CVData, request.cv_data)
        if not structure.ok:
            raise validation_failed("Invalid CV data for analysis", structure)

        # An empty CV is reported as such rather than as a list of missing fields
        if not has_content(structure.value):
            raise validation_failed(
                "CV must have some content to analyze",
                fields={"content": "Please add personal information, summary, or experience before analyzing"},
            )

        cv_data = _validated_cv(structure.value, "Invalid CV data for analysis")

        with rate_limit_as_domain_error("analysis"):
            score = self.ai_service.score_cv(cv_data)
        logger.info(f"CV analyzed: overall score {score.overall}")
        return AnalyzeCVOutput(score=score)


@dataclass
class ParseCVTextInput:
    text: str


@dataclass
class ParseCVTextOutput:
    cv_data: Dict[str, Any]


class ParseCVTextUseCase:
    """Extract structured CV fields from free text."""

    def __init__(self, ai_service: AIService):
        self.ai_service = ai_service

    def execute(self, request: ParseCVTextInput) -> ParseCVTextOutput:
        text = _validate_length(
            request.text, "text", Limits.PARSE_TEXT_MIN, Limits.PARSE_TEXT_MAX,
            noun="Text",
            required="Please provide text to parse",
            too_short=f"Please provide at least {Limits.PARSE_TEXT_MIN} characters to parse",
            too_long=f"Text must be {Limits.PARSE_TEXT_MAX:,} characters or less",
        )

        with rate_limit_as_domain_error("parsing"):
            cv_data = self.ai_service.extract_from_text(text)
        logger.info(f"Parsed CV text ({len(text)} chars) into sections: {sorted(cv_data)}")
        return ParseCVTextOutput(cv_data=cv_data)


@dataclass
class MatchJobInput:
    cv_data: Any
    job_description: str


@dataclass
class MatchJobOutput:
    match: JobMatch


class MatchJobUseCase:
    """Compare a CV with a job description."""

    def __init__(self, ai_service: AIService):
        self.ai_service = ai_service

    def execute(self, request: MatchJobInput) -> MatchJobOutput:
        cv_data = _validated_cv(request.cv_data, "Invalid CV data for job matching")
        job_description = _validate_length(
            request.job_description, "jobDescription",
            Limits.JOB_DESCRIPTION_MIN, Limits.JOB_DESCRIPTION_MAX,
            noun="Job description",
            required="Please provide a job description to match against",
            too_short=(
                "Please provide a more detailed job description "
                f"(at least {Limits.JOB_DESCRIPTION_MIN} characters)"
            ),
            too_long=f"Job description must be {Limits.JOB_DESCRIPTION_MAX:,} characters or less",
        )

        with rate_limit_as_domain_error("matching"):
            match = self.ai_service.match_job(cv_data, job_description)
        logger.info(f"Job match score: {match.score}")
        return MatchJobOutput(match=match)


@dataclass
class ImproveTextInput:
    text: str
    context: str


@dataclass
class ImproveTextOutput:
    result: ImproveTextResult


class ImproveTextUseCase:
    """Rewrite a piece of CV prose."""

    def __init__(self, ai_service: AIService):
        self.ai_service = ai_service

    def execute(self, request: ImproveTextInput) -> ImproveTextOutput:
        text = _validate_length(
            request.text, "text", Limits.IMPROVE_TEXT_MIN, Limits.IMPROVE_TEXT_MAX,
            noun="Text",
            required="Please provide text to improve",
            too_short=f"Please provide at least {Limits.IMPROVE_TEXT_MIN} characters to improve",
            too_long=f"Text must be {Limits.IMPROVE_TEXT_MAX:,} characters or less",
        )
        if not isinstance(request.context, str) or not request.context.strip():
            raise validation_failed(
                "Context is required",
                fields={"context": 'Please specify the context (e.g., "summary", "achievement")'},
            )

        with rate_limit_as_domain_error("improvement"):
            result = self.ai_service.improve_text(text, request.context.strip())
        logger.info(f"Improved {len(text)} chars of {request.context.strip()} text")
        return ImproveTextOutput(result=result)
