"""Tests for the use-case container."""

import pytest

from core.exceptions import ConfigurationError, ValidationError
from database import SQLiteAuthRepository, SQLiteCVRepository
from services.container import Container
from use_cases import CreateCVUseCase, ImproveTextInput, ImproveTextUseCase, ParseCVTextInput, SignUpInput


def test_ai_service_created_lazily(cv_repository, auth_repository, ai_service):
    created = []

    def factory():
        created.append(True)
        return ai_service

    container = Container(cv_repository, auth_repository, ai_service_factory=factory)
    assert isinstance(container.create_cv, CreateCVUseCase)
    assert created == []

    improve_text = container.improve_text
    assert isinstance(improve_text, ImproveTextUseCase)
    assert created == []

    improve_text.execute(ImproveTextInput(text="Led a team of engineers", context="experience"))
    assert created == [True]
    assert container.ai_service is ai_service
    assert ai_service.calls[0][0] == "improve_text"


def test_input_validated_before_ai_service_is_built(cv_repository, auth_repository):
    """Missing AI configuration does not hide validation errors."""

    def unconfigured():
        raise ConfigurationError("Azure OpenAI API key not configured")

    container = Container(cv_repository, auth_repository, ai_service_factory=unconfigured)
    with pytest.raises(ValidationError):
        container.parse_cv_text.execute(ParseCVTextInput(text="too short"))
    with pytest.raises(ConfigurationError):
        container.parse_cv_text.execute(ParseCVTextInput(text="Jane Doe, backend developer. " * 3))


def test_from_settings_scopes_cvs_to_session_user(db_path):
    container = Container.from_settings(db_path=db_path)
    assert isinstance(container.auth_repository, SQLiteAuthRepository)
    assert isinstance(container.cv_repository, SQLiteCVRepository)
    assert container.cv_repository.user_id_provider() is None

    session = container.sign_up.execute(SignUpInput(email="jane@example.com", password="secret123")).session
    assert container.cv_repository.user_id_provider() == session.user.id

    resumed = Container.from_settings(access_token=session.access_token, db_path=db_path)
    assert resumed.get_current_user.execute().user.id == session.user.id
