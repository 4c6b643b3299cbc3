"""
Application settings using Pydantic for validation and type safety.
Security: The webhook URL is loaded from environment variables only.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration with validation."""

    # Application
    app_name: str = Field(default="LessonDeck", description="Application name")
    debug: bool = Field(default=False, description="Debug mode flag")
    log_level: str = Field(default="INFO", description="Root logging level")

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=7004, ge=1, le=65535, description="Server port")

    # Generation webhook
    webhook_url: Optional[str] = Field(
        default=None,
        description="URL of the lesson generation webhook; the sample outline is served when unset"
    )
    webhook_timeout: int = Field(
        default=300,
        ge=1,
        le=600,
        description="Generation webhook timeout in seconds"
    )

    # CORS Configuration
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    @property
    def has_webhook(self) -> bool:
        """Check if the generation webhook is configured."""
        return bool(self.webhook_url)

    @property
    def generation_provider(self) -> str:
        """Get the active generation provider name."""
        if self.has_webhook:
            return "webhook"
        return "sample"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the logging level name."""
        level = v.upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    class Config:
        """Pydantic configuration."""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        env_prefix = ""
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Using lru_cache ensures settings are loaded once and reused.
    """
    return Settings()
