"""Configuration management for RecruiterAI."""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 5 MiB, the largest resume accepted for upload
DEFAULT_MAX_DOCUMENT_BYTES = 5 * 1024 * 1024


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RECRUITER_AI_",
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # API key (no prefix, standard env vars)
    google_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GOOGLE_API_KEY", "API_KEY"),
    )

    # Provider configuration
    model: str = "gemini-2.5-flash"
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    request_timeout: float = Field(
        default=120.0,
        ge=5.0,
        le=600.0,
        description="Client-side timeout for the analysis call in seconds",
    )

    # Intake
    max_document_bytes: int = Field(
        default=DEFAULT_MAX_DOCUMENT_BYTES,
        ge=1,
        description="Largest resume file accepted, in bytes",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # LangSmith tracing (no prefix - standard env vars)
    langsmith_api_key: str | None = Field(default=None, alias="LANGSMITH_API_KEY")
    langsmith_tracing: bool = Field(default=False, alias="LANGSMITH_TRACING")
    langsmith_endpoint: str = Field(
        default="https://api.smith.langchain.com", alias="LANGSMITH_ENDPOINT"
    )
    langsmith_project: str = Field(default="recruiter-ai", alias="LANGSMITH_PROJECT")

    @property
    def langsmith_enabled(self) -> bool:
        """Check if LangSmith tracing is enabled and configured."""
        return bool(self.langsmith_api_key and self.langsmith_tracing)

    @property
    def langsmith_dashboard_url(self) -> str:
        """Dashboard URL matching the configured LangSmith endpoint region."""
        if "eu.api.smith" in self.langsmith_endpoint:
            return "https://eu.smith.langchain.com/"
        return "https://smith.langchain.com/"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
