"""Centralized process settings for storefront-url-engine using Pydantic Settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LOG_LEVELS = {"debug", "info", "warning", "error", "critical"}


class Settings(BaseSettings):
    """Strictly typed process settings loaded from environment variables.

    The per-deployment URL policy itself lives in the JSON file referenced by
    ``storefront_config_path`` (see ``storefront_urls.url_config``).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",  # Ignore extra env vars not defined in model
    )

    storefront_config_path: str = Field(
        default="storefront.json", description="Path to the JSON file holding the storefront URL configuration"
    )

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json_output: bool = Field(default=True, description="Emit structured JSON logs")
    logger_levels: str = Field(
        default="",
        description="Comma-separated per-logger overrides, e.g. 'storefront_urls.config_store=debug'",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"Invalid LOG_LEVEL '{value}'. Allowed: {sorted(_LOG_LEVELS)}")
        return normalized

    def get_logger_levels(self) -> dict[str, str]:
        """Parse ``logger_levels`` into a logger name -> level mapping.

        Entries without ``=`` or with an unknown level are skipped.
        """
        levels: dict[str, str] = {}
        for entry in self.logger_levels.split(","):
            name, sep, level = entry.strip().partition("=")
            level = level.strip().lower()
            if sep and name.strip() and level in _LOG_LEVELS:
                levels[name.strip()] = level
        return levels
