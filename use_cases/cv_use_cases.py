"""Use-cases for managing saved CVs.

Each use-case validates its input, confirms the referenced CV exists where
one is referenced, and only then calls the repository. Invalid input never
reaches the repository.
"""

from dataclasses import dataclass
from typing import Any, Callable, List

from constants import Limits, Messages
from core.exceptions import NotFoundError
from core.logger import get_logger
from models.cv_models import CVData, is_complete
from models.saved_cv import UNSET, CVUpdate, SavedCV, is_set
from models.validation import safe_parse_cv_data
from models.value_objects import CVTemplateType, ExportFormat
from repositories.base import CVRepository
from use_cases.error_translation import validation_failed

logger = get_logger("use_cases")

CV_RESOURCE = "CV"


def validate_title(title: Any) -> str:
    """Return the trimmed title or raise ValidationError."""
    if not isinstance(title, str) or not title.strip():
        raise validation_failed(Messages.TITLE_REQUIRED, fields={"title": "Title cannot be empty"})
    if len(title) > Limits.MAX_TITLE_LENGTH:
        raise validation_failed(
            Messages.TITLE_TOO_LONG,
            fields={"title": f"Title must be {Limits.MAX_TITLE_LENGTH} characters or less"},
        )
    return title.strip()


def validate_cv_data(cv_data: Any) -> CVData:
    """Return the validated CVData or raise ValidationError listing every field error."""
    result = safe_parse_cv_data(cv_data)
    if not result.ok:
        raise validation_failed(Messages.INVALID_CV_DATA, result)
    return result.value


def validate_template(template: Any) -> CVTemplateType:
    try:
        return CVTemplateType(template)
    except ValueError:
        allowed = ", ".join(item.value for item in CVTemplateType)
        raise validation_failed(
            "Invalid template", fields={"template": f"Template must be one of: {allowed}"}
        ) from None


def _require_cv(repository: CVRepository, cv_id: str) -> SavedCV:
    cv = repository.get_by_id(cv_id)
    if cv is None:
        logger.warning(f"CV not found: {cv_id}")
        raise NotFoundError(CV_RESOURCE, cv_id)
    return cv


@dataclass
class CreateCVInput:
    title: str
    cv_data: Any
    template: Any = CVTemplateType.MODERN


@dataclass
class CreateCVOutput:
    cv: SavedCV


class CreateCVUseCase:
    """Create a CV from a title, CV data and a template."""

    def __init__(self, cv_repository: CVRepository):
        self.cv_repository = cv_repository

    def execute(self, request: CreateCVInput) -> CreateCVOutput:
        title = validate_title(request.title)
        cv_data = validate_cv_data(request.cv_data)
        template = validate_template(request.template)

        cv = self.cv_repository.create(title, cv_data, template)
        logger.info(f"Created CV {cv.id} ('{cv.title}', template={template.value})")
        return CreateCVOutput(cv=cv)


@dataclass
class GetCVByIdInput:
    id: str


@dataclass
class GetCVByIdOutput:
    cv: SavedCV


class GetCVByIdUseCase:
    def __init__(self, cv_repository: CVRepository):
        self.cv_repository = cv_repository

    def execute(self, request: GetCVByIdInput) -> GetCVByIdOutput:
        return GetCVByIdOutput(cv=_require_cv(self.cv_repository, request.id))


@dataclass
class GetUserCVsOutput:
    cvs: List[SavedCV]
    total: int


class GetUserCVsUseCase:
    """List the current user's CVs, most recently updated first."""

    def __init__(self, cv_repository: CVRepository):
        self.cv_repository = cv_repository

    def execute(self) -> GetUserCVsOutput:
        cvs = self.cv_repository.get_all()
        # sorted() is stable, ties keep repository order
        ordered = sorted(cvs, key=lambda cv: cv.updated_at, reverse=True)
        return GetUserCVsOutput(cvs=ordered, total=len(ordered))


@dataclass
class UpdateCVInput:
    """Fields left as UNSET are not touched."""

    id: str
    title: Any = UNSET
    cv_data: Any = UNSET
    selected_template: Any = UNSET


@dataclass
class UpdateCVOutput:
    cv: SavedCV


class UpdateCVUseCase:
    """Partially update a CV. A supplied cv_data replaces the stored one wholesale."""

    def __init__(self, cv_repository: CVRepository):
        self.cv_repository = cv_repository

    def execute(self, request: UpdateCVInput) -> UpdateCVOutput:
        _require_cv(self.cv_repository, request.id)

        changes = {}
        if is_set(request.title):
            changes["title"] = validate_title(request.title)
        if is_set(request.cv_data):
            changes["cv_data"] = validate_cv_data(request.cv_data)
        if is_set(request.selected_template):
            changes["selected_template"] = validate_template(request.selected_template)

        cv = self.cv_repository.update(request.id, CVUpdate(**changes))
        logger.info(f"Updated CV {request.id}: {sorted(changes)}")
        return UpdateCVOutput(cv=cv)


@dataclass
class CVIdInput:
    id: str


DeleteCVInput = DuplicateCVInput = SetDefaultCVInput = CVIdInput


class DeleteCVUseCase:
    """Delete a CV after confirming it exists."""

    def __init__(self, cv_repository: CVRepository):
        self.cv_repository = cv_repository

    def execute(self, request: DeleteCVInput) -> None:
        _require_cv(self.cv_repository, request.id)
        self.cv_repository.delete(request.id)
        logger.info(f"Deleted CV {request.id}")


@dataclass
class DuplicateCVOutput:
    cv: SavedCV


class DuplicateCVUseCase:
    """Copy a CV; the repository owns the new id and the "(Copy)" title."""

    def __init__(self, cv_repository: CVRepository):
        self.cv_repository = cv_repository

    def execute(self, request: DuplicateCVInput) -> DuplicateCVOutput:
        _require_cv(self.cv_repository, request.id)
        cv = self.cv_repository.duplicate(request.id)
        logger.info(f"Duplicated CV {request.id} as {cv.id}")
        return DuplicateCVOutput(cv=cv)


class SetDefaultCVUseCase:
    """Mark a CV as the user's default; the repository unsets the previous one."""

    def __init__(self, cv_repository: CVRepository):
        self.cv_repository = cv_repository

    def execute(self, request: SetDefaultCVInput) -> None:
        _require_cv(self.cv_repository, request.id)
        self.cv_repository.set_default(request.id)
        logger.info(f"CV {request.id} set as default")


@dataclass
class ExportCVInput:
    id: str
    format: Any = ExportFormat.PDF


@dataclass
class ExportCVOutput:
    cv: SavedCV
    format: ExportFormat


class ExportCVUseCase:
    """Check that a CV can be exported. Rendering happens elsewhere."""

    def __init__(self, cv_repository: CVRepository,
                 completeness_check: Callable[[CVData], bool] = is_complete):
        self.cv_repository = cv_repository
        self.completeness_check = completeness_check

    def execute(self, request: ExportCVInput) -> ExportCVOutput:
        try:
            export_format = ExportFormat(request.format)
        except ValueError:
            raise validation_failed(
                "Invalid export format", fields={"format": "Format must be one of: pdf, docx, json"}
            ) from None

        cv = _require_cv(self.cv_repository, request.id)
        if not self.completeness_check(cv.cv_data):
            raise validation_failed(
                Messages.EXPORT_INCOMPLETE,
                fields={"export": "Please fill in the required sections before exporting"},
            )

        logger.info(f"CV {cv.id} ready for {export_format.value} export")
        return ExportCVOutput(cv=cv, format=export_format)
