"""Prompts package."""

from prompts.cv_parsing_prompt import CV_PARSING_PROMPT
from prompts.cv_scoring_prompt import CV_SCORING_PROMPT
from prompts.improve_text_prompt import IMPROVE_TEXT_PROMPT
from prompts.job_match_prompt import JOB_MATCH_PROMPT

__all__ = [
    "CV_PARSING_PROMPT",
    "CV_SCORING_PROMPT",
    "IMPROVE_TEXT_PROMPT",
    "JOB_MATCH_PROMPT",
]
