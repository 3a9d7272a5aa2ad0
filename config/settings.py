"""Application configuration and settings management."""
import os
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Azure OpenAI Configuration (backs every AI feature)
    azure_openai_api_key: Optional[str] = None
    azure_openai_endpoint: str = "https://example-resource.openai.azure.com/"
    azure_openai_api_version: str = "2024-12-01-preview"
    azure_openai_gpt_deployment: str = "gpt-4.1"

    # Model used by the AI agent; replaced by the deployment name in model_post_init
    openai_model: str = "gpt-4.1"
    openai_temperature: float = 1.0
    openai_timeout: int = 120
    openai_max_retries: int = 2

    # Logging
    log_level: str = "INFO"

    # Storage
    database_path: str = "data/cv_builder.db"

    # Web application
    secret_key: str = "dev-secret-key-change-in-production"
    default_template: str = "modern"

    @property
    def api_key(self) -> str:
        """Return the Azure OpenAI API key or fail loudly."""
        if not self.azure_openai_api_key:
            from core.exceptions import ConfigurationError

            raise ConfigurationError(
                "AZURE_OPENAI_API_KEY not found. Set it in .env file or environment variable."
            )
        return self.azure_openai_api_key

    @property
    def is_azure_configured(self) -> bool:
        """Check if Azure OpenAI is configured."""
        return bool(self.azure_openai_api_key and self.azure_openai_endpoint)

    def model_post_init(self, __context) -> None:
        """
        Point the OpenAI client environment at Azure when a key is present.

        The agent keeps reading ``settings.openai_model``; with Azure configured
        that field is the deployment name.
        """
        if self.azure_openai_api_key and self.azure_openai_endpoint:
            os.environ["OPENAI_API_KEY"] = self.azure_openai_api_key
            os.environ["OPENAI_API_BASE"] = self.azure_openai_endpoint
            os.environ["OPENAI_API_TYPE"] = "azure"
            os.environ["OPENAI_API_VERSION"] = self.azure_openai_api_version

            if self.azure_openai_gpt_deployment:
                self.openai_model = self.azure_openai_gpt_deployment


# Global settings instance
settings = Settings()
