"""Application configuration."""

from functools import lru_cache
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables prefixed with ``ONBOARDING_``."""

    model_config = SettingsConfigDict(
        env_prefix="ONBOARDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Onboarding Core"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Clock - IANA zone name for wall-clock timestamps, host local time when unset
    timezone: str | None = Field(default=None, description="IANA time zone, e.g. Europe/Berlin")

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Validate settings for consistency."""
        if self.environment == "production" and self.debug:
            raise ValueError(
                "DEBUG mode cannot be enabled in production environment. "
                "This would log unsanitized payloads."
            )

        if self.timezone:
            try:
                ZoneInfo(self.timezone)
            except (ZoneInfoNotFoundError, ValueError) as e:
                raise ValueError(f"TIMEZONE '{self.timezone}' is not a known IANA zone") from e

        return self

    @property
    def tzinfo(self) -> ZoneInfo | None:
        """Configured zone, or None for host local time."""
        if not self.timezone:
            return None
        return ZoneInfo(self.timezone)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
