"""Schema validation for CV entities.

Every ``safe_parse_*`` function is non-throwing: it returns ``ParseSuccess``
holding the validated, normalized model or ``ParseFailure`` holding every
problem found as (dotted camelCase path, message) pairs.

Structure (types, enum membership) is checked by the pydantic models; the
rules below are layered on top of a structurally valid model:

- required strings reject empty and whitespace-only values
- emails, when non-empty, must look like ``local@domain.tld``
- optional links (linkedin, website, github, certificate url, gpa) accept ""
- section order lists every optional section exactly once
"""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from models.cv_models import (
    Certificate,
    CVData,
    Education,
    Experience,
    Language,
    PersonalInfo,
    SectionOrderItem,
    Skill,
)
from models.value_objects import SectionKey

ModelT = TypeVar("ModelT", bound=BaseModel)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
URL_RE = re.compile(r"^https?://[^\s/$.?#][^\s]*$", re.IGNORECASE)


@dataclass(frozen=True)
class ValidationIssue:
    """One failed rule."""

    path: str
    message: str


@dataclass(frozen=True)
class ParseSuccess(Generic[ModelT]):
    """Validated value."""

    value: ModelT
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True)
class ParseFailure:
    """All issues found in the input."""

    errors: List[ValidationIssue]
    ok: bool = field(default=False, init=False)

    def as_field_map(self) -> Dict[str, str]:
        """Path -> message; the first message recorded for a path wins."""
        fields: Dict[str, str] = {}
        for issue in self.errors:
            fields.setdefault(issue.path or "root", issue.message)
        return fields


SchemaResult = Union[ParseSuccess, ParseFailure]


def is_valid_email(value: str) -> bool:
    """Check the permissive ``local@domain.tld`` shape."""
    return bool(EMAIL_RE.fullmatch(value or ""))


def _join(prefix: str, name: str) -> str:
    return f"{prefix}.{name}" if prefix else name


def _format_loc(loc: tuple) -> str:
    return ".".join(str(part) for part in loc)


def _format_pydantic_error(error: dict) -> str:
    if error.get("type") == "value_error" and "error" in error.get("ctx", {}):
        return str(error["ctx"]["error"])
    if error.get("type") == "missing":
        return "Required"
    return error.get("msg", "Invalid value")


def _require(value: str, path: str, message: str, issues: List[ValidationIssue]) -> None:
    if not value or not value.strip():
        issues.append(ValidationIssue(path, message))


# ---------------------------------------------------------------------------
# Semantic rules per entity
# ---------------------------------------------------------------------------

def check_personal_info(info: PersonalInfo, prefix: str = "") -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    _require(info.full_name, _join(prefix, "fullName"), "Full name is required", issues)
    if info.email and not is_valid_email(info.email):
        issues.append(ValidationIssue(_join(prefix, "email"), "Invalid email address"))
    return issues


def check_experience(experience: Experience, prefix: str = "") -> List[ValidationIssue]:
    # current and end_date are not cross-checked
    issues: List[ValidationIssue] = []
    _require(experience.company, _join(prefix, "company"), "Company name is required", issues)
    _require(experience.position, _join(prefix, "position"), "Position is required", issues)
    return issues


def check_education(education: Education, prefix: str = "") -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    _require(education.institution, _join(prefix, "institution"), "Institution name is required", issues)
    _require(education.degree, _join(prefix, "degree"), "Degree is required", issues)
    _require(education.field, _join(prefix, "field"), "Field of study is required", issues)
    return issues


def check_skill(skill: Skill, prefix: str = "") -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    _require(skill.name, _join(prefix, "name"), "Skill name is required", issues)
    return issues


def check_language(language: Language, prefix: str = "") -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    _require(language.name, _join(prefix, "name"), "Language name is required", issues)
    return issues


def check_certificate(certificate: Certificate, prefix: str = "") -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    _require(certificate.name, _join(prefix, "name"), "Certificate name is required", issues)
    _require(certificate.issuer, _join(prefix, "issuer"), "Issuer is required", issues)
    if certificate.url and not URL_RE.fullmatch(certificate.url):
        issues.append(ValidationIssue(_join(prefix, "url"), "Invalid URL"))
    return issues


def check_section_order(items: List[SectionOrderItem], prefix: str = "sectionOrder") -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    seen = set()
    for index, item in enumerate(items):
        if item.id in seen:
            issues.append(
                ValidationIssue(f"{prefix}.{index}.id", f"Section '{item.id.value}' is listed more than once")
            )
        seen.add(item.id)
    for key in SectionKey:
        if key not in seen:
            issues.append(ValidationIssue(prefix, f"Section '{key.value}' is missing from the order"))
    return issues


def check_cv_data(cv_data: CVData) -> List[ValidationIssue]:
    issues = check_personal_info(cv_data.personal_info, "personalInfo")
    sections: List[tuple] = [
        ("experience", cv_data.experience, check_experience),
        ("education", cv_data.education, check_education),
        ("skills", cv_data.skills, check_skill),
        ("languages", cv_data.languages, check_language),
        ("certificates", cv_data.certificates, check_certificate),
    ]
    for name, entries, checker in sections:
        for index, entry in enumerate(entries):
            issues.extend(checker(entry, f"{name}.{index}"))
    issues.extend(check_section_order(cv_data.section_order))
    return issues


# ---------------------------------------------------------------------------
# safeParse entry points
# ---------------------------------------------------------------------------

def safe_parse_structure(model_cls: Type[ModelT], data: Any) -> SchemaResult:
    """Check types and enum membership only (a draft may still miss required values)."""
    try:
        return ParseSuccess(value=model_cls.model_validate(data))
    except PydanticValidationError as exc:
        return ParseFailure(
            errors=[
                ValidationIssue(_format_loc(error["loc"]), _format_pydantic_error(error))
                for error in exc.errors()
            ]
        )


def safe_parse(
    model_cls: Type[ModelT],
    checker: Callable[[ModelT], List[ValidationIssue]],
    data: Any,
) -> SchemaResult:
    """Validate ``data`` structurally with ``model_cls`` then semantically with ``checker``."""
    structure = safe_parse_structure(model_cls, data)
    if not structure.ok:
        return structure

    value = structure.value
    issues = checker(value)
    if issues:
        return ParseFailure(errors=issues)
    return ParseSuccess(value=value)


def safe_parse_personal_info(data: Any) -> SchemaResult:
    return safe_parse(PersonalInfo, check_personal_info, data)


def safe_parse_experience(data: Any) -> SchemaResult:
    return safe_parse(Experience, check_experience, data)


def safe_parse_education(data: Any) -> SchemaResult:
    return safe_parse(Education, check_education, data)


def safe_parse_skill(data: Any) -> SchemaResult:
    return safe_parse(Skill, check_skill, data)


def safe_parse_language(data: Any) -> SchemaResult:
    return safe_parse(Language, check_language, data)


def safe_parse_certificate(data: Any) -> SchemaResult:
    return safe_parse(Certificate, check_certificate, data)


def safe_parse_cv_data(data: Any) -> SchemaResult:
    """Validate a whole CV; one invalid nested entry fails the aggregate."""
    return safe_parse(CVData, check_cv_data, data)


def is_valid_cv_data(data: Any) -> bool:
    return safe_parse_cv_data(data).ok
