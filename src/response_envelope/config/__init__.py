"""Configuration module for the response envelope package.

This module provides centralized configuration management, including logging
setup, error constants and envelope defaults.

Key Components:
- settings: Configuration loaded from environment variables and the bundled TOML file
- Logging: Loguru-based logging configuration with development/production modes
- Error handling: Centralized error codes and message templates

Defaults for the page placeholder, the unknown-error fallback and the
envelope trace flag come from ``resources/app.toml`` and can be overridden
through environment variables or a ``.env`` file.
"""

from response_envelope.config.config import Settings, settings
from response_envelope.config.errors import ErrorCode, ErrorNames
from response_envelope.config.logger import config_logger

__all__ = [
    "ErrorCode",
    "ErrorNames",
    "Settings",
    "config_logger",
    "settings",
]
