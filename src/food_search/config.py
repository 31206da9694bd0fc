"""Application configuration."""

import logging
import os

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from food_search.domain.errors import ConfigurationError

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    api_key: str
    search_url: str = "https://api.apilayer.com/spoonacular/food/menuItems/search"
    recipe_url: str = "https://api.apilayer.com/spoonacular/recipes"
    request_timeout_seconds: float = 15.0
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3
    log_level: str = "WARNING"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("api_key")
    @classmethod
    def api_key_not_blank(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("API key must not be blank")
        return cleaned

    @field_validator("retry_attempts")
    @classmethod
    def retry_attempts_non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("retry_attempts must be >= 0")
        return value

    @field_validator("retry_delay_seconds")
    @classmethod
    def retry_delay_non_negative(cls, value: float) -> float:
        if value < 0:
            raise ValueError("retry_delay_seconds must be >= 0")
        return value

    @field_validator("log_level")
    @classmethod
    def log_level_known(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value!r}")
        return level


def load_settings() -> Settings:
    """Load settings once, failing with a configuration error if invalid."""
    try:
        return Settings()
    except ValidationError as exc:
        fields = {str(error["loc"][0]) for error in exc.errors() if error["loc"]}
        if "api_key" in fields:
            raise ConfigurationError(
                "API key not found: set API_KEY in the environment or a .env file"
            ) from exc
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
