"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    admin_token: str
    openai_api_key: str | None = None
    openai_model: str = "gpt-4.1-mini"
    openai_temperature: float = 0.7
    openai_max_output_tokens: int = 1000
    edamam_app_id: str | None = None
    edamam_app_key: str | None = None
    edamam_base_url: str = "https://api.edamam.com/api/food-database/v2"
    edamam_timeout_seconds: float = 15.0
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def has_edamam_credentials(self) -> bool:
        """Return True when both Edamam credentials are configured."""
        return bool(self.edamam_app_id) and bool(self.edamam_app_key)

    @property
    def has_openai_credentials(self) -> bool:
        """Return True when an OpenAI API key is configured."""
        return bool(self.openai_api_key)
