"""Typed settings models threaded through API response handling."""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "api_response" / "api_response.yaml"
ENV_PREFIX = "API_RESPONSE_"

# YAML file read by the next ``ApiSettings`` construction in this context.
CONFIG_PATH: ContextVar[Path] = ContextVar(
    "api_response_config_path", default=DEFAULT_CONFIG_PATH
)


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = True
    service: str = "api_response"
    environment: str = "dev"


class ErrorSettings(BaseModel):
    """How transport-outcome errors capture the failed response body."""

    read_content: bool = True
    max_content_chars: int = Field(default=65536, gt=0)


class ApiSettings(BaseSettings):
    """Root settings object forwarded, unread, by every ``ApiResponse``.

    Only collaborators (error construction, logging setup) look inside it.
    Values resolve from init kwargs, then ``API_RESPONSE_*`` environment
    variables, then the YAML file, then model defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        extra="ignore",
        frozen=True,
        nested_model_default_partial_update=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    errors: ErrorSettings = Field(default_factory=ErrorSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Apply precedence: init > env > yaml > defaults."""
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(
                settings_cls,
                yaml_file=CONFIG_PATH.get(),
                yaml_file_encoding="utf-8",
            ),
        )
