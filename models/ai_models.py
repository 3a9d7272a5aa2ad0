"""Pydantic models for AI service results."""

from typing import List

from pydantic import Field

from models.cv_models import CVModel


class ScoreBreakdown(CVModel):
    """Per-dimension CV score."""

    completeness: int = Field(..., ge=0, le=100, description="Share of expected sections filled in")
    quality: int = Field(..., ge=0, le=100, description="Writing quality")
    ats_compatibility: int = Field(..., ge=0, le=100, description="Applicant tracking system friendliness")
    impact: int = Field(..., ge=0, le=100, description="Quantified achievements and action verbs")


class CVScore(CVModel):
    """Result of scoring a CV."""

    overall: int = Field(..., ge=0, le=100)
    breakdown: ScoreBreakdown
    recommendations: List[str] = Field(default_factory=list)


class JobMatch(CVModel):
    """Result of matching a CV against a job description."""

    score: int = Field(..., ge=0, le=100)
    matched_keywords: List[str] = Field(default_factory=list)
    missing_keywords: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)


class ImproveTextResult(CVModel):
    """Rewritten text with an explanation of the edits."""

    improved_text: str
    explanation: str = ""
    key_changes: List[str] = Field(default_factory=list)
