"""Models package."""

from models.ai_models import CVScore, ImproveTextResult, JobMatch, ScoreBreakdown
from models.auth_models import AuthCredentials, AuthEvent, AuthSession, AuthSubscription, SignUpData, User
from models.cv_models import (
    INITIAL_CV_DATA,
    Certificate,
    CVData,
    CVVersion,
    Education,
    Experience,
    Language,
    PersonalInfo,
    SectionOrderItem,
    SectionVisibility,
    Skill,
)
from models.saved_cv import UNSET, CVUpdate, SavedCV
from models.value_objects import (
    CVTemplateType,
    ExportFormat,
    LanguageProficiency,
    SectionKey,
    SkillLevel,
)

__all__ = [
    "CVScore",
    "ImproveTextResult",
    "JobMatch",
    "ScoreBreakdown",
    "AuthCredentials",
    "AuthEvent",
    "AuthSession",
    "AuthSubscription",
    "SignUpData",
    "User",
    "INITIAL_CV_DATA",
    "Certificate",
    "CVData",
    "CVVersion",
    "Education",
    "Experience",
    "Language",
    "PersonalInfo",
    "SectionOrderItem",
    "SectionVisibility",
    "Skill",
    "UNSET",
    "CVUpdate",
    "SavedCV",
    "CVTemplateType",
    "ExportFormat",
    "LanguageProficiency",
    "SectionKey",
    "SkillLevel",
]
