"""Tests for CV management use-cases (in-memory repository, no database)."""

from datetime import datetime
from unittest.mock import Mock

import pytest

from conftest import make_cv_data
from core.exceptions import NotFoundError, ValidationError
from models.cv_models import CVData
from models.saved_cv import SavedCV
from models.value_objects import CVTemplateType, ExportFormat
from repositories.base import CVRepository
from use_cases import (
    CreateCVInput,
    CreateCVUseCase,
    CVIdInput,
    DeleteCVUseCase,
    DuplicateCVUseCase,
    ExportCVInput,
    ExportCVUseCase,
    GetCVByIdInput,
    GetCVByIdUseCase,
    GetUserCVsUseCase,
    SetDefaultCVUseCase,
    UpdateCVInput,
    UpdateCVUseCase,
)


def _create(repository, title="My CV", cv_data=None, template=CVTemplateType.MODERN):
    return CreateCVUseCase(repository).execute(
        CreateCVInput(title=title, cv_data=cv_data or make_cv_data(), template=template)
    ).cv


def test_create_trims_title(cv_repository, cv_data):
    cv = _create(cv_repository, title="  Backend CV  ", cv_data=cv_data)
    assert cv.title == "Backend CV"
    assert cv_repository.calls[0][1] == "Backend CV"


@pytest.mark.parametrize("title", ["", "   ", None])
def test_create_rejects_empty_title(cv_repository, title):
    """Invalid input never reaches the repository."""
    with pytest.raises(ValidationError) as exc_info:
        _create(cv_repository, title=title)
    assert exc_info.value.fields == {"title": "Title cannot be empty"}
    assert "create" not in cv_repository.call_names()


def test_create_title_length_boundary(cv_repository):
    assert _create(cv_repository, title="x" * 100).title == "x" * 100
    with pytest.raises(ValidationError, match="Title is too long"):
        _create(cv_repository, title="x" * 101)


def test_create_title_limit_counts_surrounding_whitespace(cv_repository):
    assert _create(cv_repository, title=" " + "x" * 99).title == "x" * 99
    with pytest.raises(ValidationError, match="Title is too long"):
        _create(cv_repository, title="  " + "x" * 100)
    assert cv_repository.call_names() == ["create"]


def test_create_rejects_invalid_cv_data(cv_repository):
    bad = make_cv_data()
    bad["personalInfo"]["fullName"] = ""
    with pytest.raises(ValidationError) as exc_info:
        _create(cv_repository, cv_data=bad)
    assert exc_info.value.message == "Invalid CV data"
    assert "personalInfo.fullName" in exc_info.value.fields
    assert cv_repository.calls == []


def test_create_rejects_unknown_template(cv_repository):
    with pytest.raises(ValidationError) as exc_info:
        _create(cv_repository, template="neon")
    assert "template" in exc_info.value.fields
    assert cv_repository.calls == []


def test_get_by_id_not_found(cv_repository):
    with pytest.raises(NotFoundError) as exc_info:
        GetCVByIdUseCase(cv_repository).execute(GetCVByIdInput(id="missing"))
    assert exc_info.value.status_code == 404
    assert "missing" in exc_info.value.message


def test_user_cvs_sorted_by_last_update(cv_repository):
    first = _create(cv_repository, title="First")
    second = _create(cv_repository, title="Second")
    UpdateCVUseCase(cv_repository).execute(UpdateCVInput(id=first.id, title="First, edited"))

    output = GetUserCVsUseCase(cv_repository).execute()
    assert output.total == 2
    assert [cv.id for cv in output.cvs] == [first.id, second.id]


def test_update_only_supplied_fields(cv_repository):
    cv = _create(cv_repository)
    output = UpdateCVUseCase(cv_repository).execute(UpdateCVInput(id=cv.id, selected_template="berlin"))

    update_call = cv_repository.calls[-1]
    assert update_call[0] == "update"
    assert update_call[2].changes() == {"selected_template": CVTemplateType.BERLIN}
    assert output.cv.title == "My CV"
    assert output.cv.selected_template == CVTemplateType.BERLIN


def test_update_replaces_cv_data_wholesale(cv_repository):
    cv = _create(cv_repository)
    replacement = make_cv_data(summary="New summary", skills=[])
    output = UpdateCVUseCase(cv_repository).execute(UpdateCVInput(id=cv.id, cv_data=replacement))
    assert output.cv.cv_data.summary == "New summary"
    assert output.cv.cv_data.skills == []


def test_update_missing_cv(cv_repository):
    with pytest.raises(NotFoundError):
        UpdateCVUseCase(cv_repository).execute(UpdateCVInput(id="missing", title="New"))
    assert "update" not in cv_repository.call_names()


def test_update_invalid_title_does_not_reach_repository(cv_repository):
    cv = _create(cv_repository)
    with pytest.raises(ValidationError):
        UpdateCVUseCase(cv_repository).execute(UpdateCVInput(id=cv.id, title="  "))
    assert "update" not in cv_repository.call_names()


def _saved_cv(cv_id="cv-1"):
    now = datetime(2024, 1, 1)
    return SavedCV(
        id=cv_id,
        user_id="user-1",
        title="CV",
        cv_data=CVData.model_validate(make_cv_data()),
        selected_template=CVTemplateType.MODERN,
        created_at=now,
        updated_at=now,
    )


@pytest.mark.parametrize(
    "use_case_cls, mutating_call",
    [
        (DeleteCVUseCase, "delete"),
        (DuplicateCVUseCase, "duplicate"),
        (SetDefaultCVUseCase, "set_default"),
    ],
)
def test_existence_checked_before_mutation(use_case_cls, mutating_call):
    """get_by_id is called before the mutating repository call."""
    repository = Mock(spec=CVRepository)
    repository.get_by_id.return_value = _saved_cv()
    repository.duplicate.return_value = _saved_cv("cv-2")

    use_case_cls(repository).execute(CVIdInput(id="cv-1"))

    assert [call[0] for call in repository.mock_calls] == ["get_by_id", mutating_call]


@pytest.mark.parametrize("use_case_cls", [DeleteCVUseCase, DuplicateCVUseCase, SetDefaultCVUseCase])
def test_missing_cv_is_not_mutated(use_case_cls):
    repository = Mock(spec=CVRepository)
    repository.get_by_id.return_value = None
    with pytest.raises(NotFoundError):
        use_case_cls(repository).execute(CVIdInput(id="missing"))
    assert [call[0] for call in repository.mock_calls] == ["get_by_id"]


def test_duplicate_and_default(cv_repository):
    cv = _create(cv_repository, title="Original")
    copy = DuplicateCVUseCase(cv_repository).execute(CVIdInput(id=cv.id)).cv
    assert copy.id != cv.id
    assert copy.title == "Original (Copy)"

    SetDefaultCVUseCase(cv_repository).execute(CVIdInput(id=copy.id))
    SetDefaultCVUseCase(cv_repository).execute(CVIdInput(id=cv.id))
    defaults = [item.id for item in cv_repository.cvs.values() if item.is_default]
    assert defaults == [cv.id]


def test_delete(cv_repository):
    cv = _create(cv_repository)
    DeleteCVUseCase(cv_repository).execute(CVIdInput(id=cv.id))
    assert GetUserCVsUseCase(cv_repository).execute().total == 0


def test_export_complete_cv(cv_repository):
    cv = _create(cv_repository)
    output = ExportCVUseCase(cv_repository).execute(ExportCVInput(id=cv.id, format="docx"))
    assert output.format == ExportFormat.DOCX
    assert output.cv.id == cv.id


def test_export_incomplete_cv(cv_repository):
    cv = _create(cv_repository, cv_data=make_cv_data(summary=""))
    with pytest.raises(ValidationError) as exc_info:
        ExportCVUseCase(cv_repository).execute(ExportCVInput(id=cv.id))
    assert "export" in exc_info.value.fields


def test_export_invalid_format_checked_first(cv_repository):
    with pytest.raises(ValidationError) as exc_info:
        ExportCVUseCase(cv_repository).execute(ExportCVInput(id="missing", format="odt"))
    assert "format" in exc_info.value.fields
    assert cv_repository.calls == []


def test_export_uses_injected_completeness_check(cv_repository):
    cv = _create(cv_repository, cv_data=make_cv_data(summary=""))
    output = ExportCVUseCase(cv_repository, completeness_check=lambda data: True).execute(
        ExportCVInput(id=cv.id, format=ExportFormat.JSON)
    )
    assert output.format == ExportFormat.JSON


def test_create_then_list_end_to_end(cv_repository, cv_data):
    """A CV created with the technical template shows up in the user's list."""
    created = _create(cv_repository, title="Tech CV", cv_data=cv_data, template="technical")
    output = GetUserCVsUseCase(cv_repository).execute()
    assert output.total == 1
    assert output.cvs[0].id == created.id
    assert output.cvs[0].selected_template == CVTemplateType.TECHNICAL
    assert output.cvs[0].cv_data.personal_info.full_name == "Jane Doe"
