"""Application configuration using Pydantic V2."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MODEL = "gemini-2.5-pro"


class Settings(BaseSettings):
    """Application settings and configuration.

    The credential is not validated at startup. A missing key only surfaces
    once a fetch is attempted.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="ai-stock-screener", description="Application name")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Gemini
    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("api_key", "gemini_api_key", "google_api_key"),
        description="Gemini API key",
    )
    model: str = Field(
        default=DEFAULT_MODEL,
        validation_alias=AliasChoices("gemini_model", "model"),
        description="Gemini model used for all categories",
    )
    analysis_language: str = Field(
        default="English", description="Language the model writes the analysis text in"
    )


def load_settings() -> Settings:
    """Read settings from the environment and `.env`."""
    return Settings()
