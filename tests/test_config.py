"""Tests for configuration and settings."""

import os

import pytest

from config.settings import Settings, settings
from core.exceptions import ConfigurationError


def test_settings_has_expected_attributes():
    """Settings should have expected configuration attributes."""
    assert hasattr(settings, "azure_openai_api_key")
    assert hasattr(settings, "azure_openai_endpoint")
    assert hasattr(settings, "openai_model")
    assert hasattr(settings, "database_path")
    assert hasattr(settings, "default_template")


def test_api_key_missing_raises_configuration_error():
    """Accessing api_key without AZURE_OPENAI_API_KEY fails loudly."""
    config = Settings(_env_file=None, azure_openai_api_key=None)
    with pytest.raises(ConfigurationError):
        _ = config.api_key
    assert config.is_azure_configured is False


def test_deployment_name_becomes_model(monkeypatch):
    """With Azure configured the deployment name is used as the model."""
    monkeypatch.setattr(os, "environ", dict(os.environ))
    config = Settings(
        _env_file=None,
        azure_openai_api_key="test-key",
        azure_openai_gpt_deployment="cv-deployment",
    )
    assert config.api_key == "test-key"
    assert config.is_azure_configured is True
    assert config.openai_model == "cv-deployment"
