"""Define configuration for the project."""

import tomllib
from pathlib import Path
from typing import Literal

from pydantic import Field, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings", "settings"]


_app_config_path = Path(__file__).parent / "resources" / "app.toml"

with Path.open(_app_config_path, "rb") as f:
    _config = tomllib.load(f)
    _app_config = _config.get("app", {})
    _envelope_config = _app_config.get("envelope", {})
    _log_config = _app_config.get("logging", {})


class Settings(BaseSettings):
    """Application configuration settings."""

    # Environment configuration
    app_env: Literal["development", "testing", "production"] = Field(
        default="development",
        description="Current application environment determining behavior.",
        validation_alias="ENV",
    )

    # Envelope configuration
    page_placeholder: str = Field(
        default=_envelope_config.get("page_placeholder", "??"),
        min_length=1,
        description="Token in a base URI that is replaced by a page number.",
    )

    default_status: int = Field(
        default=_envelope_config.get("default_status", 200),
        description="HTTP status code used when none is supplied.",
    )

    unknown_error_code: int = Field(
        default=_envelope_config.get("unknown_error_code", 0),
        description="Error code attached to failed responses without one.",
    )

    unknown_error_message: str = Field(
        default=_envelope_config.get("unknown_error_message", "Unknown Error."),
        description="Error message attached to failed responses without one.",
    )

    envelope_trace: bool = Field(
        default=_envelope_config.get("trace", False),
        validation_alias="ENVELOPE_TRACE",
        description="Whether envelopes log every recomputation by default.",
    )

    # Log configuration
    log_dir: str = Field(
        default=_log_config.get("log_dir", "log"),
        description="Directory for storing log files.",
    )

    log_file: str = Field(
        default=_log_config.get("log_file", "app.log"),
        description="Name of the log file.",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (e.g., DEBUG, INFO, WARNING, ERROR).",
    )

    rotation: str = Field(
        default=_log_config.get("rotation", "10 MB"),
        description="Log rotation strategy (time or size-based).",
    )

    @computed_field
    @property
    def log_path(self) -> Path:
        """Path where application logs are stored."""
        return Path(self.log_dir) / self.log_file

    @model_validator(mode="after")
    def validate_log_level(self) -> "Settings":
        """Adjust log level based on environment."""
        if self.app_env == "production" and self.log_level == "DEBUG":
            self.log_level = "INFO"
        return self

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )


# Create a single instance of Settings to use throughout the application
settings = Settings()
