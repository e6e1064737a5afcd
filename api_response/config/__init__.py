"""Public API for API response configuration."""

from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    ENV_PREFIX,
    ApiSettings,
    ErrorSettings,
    LoggingSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ENV_PREFIX",
    "ApiSettings",
    "ErrorSettings",
    "LoggingSettings",
    "load_settings",
]
