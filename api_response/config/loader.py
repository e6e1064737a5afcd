"""Resolve ``ApiSettings`` from the standard source cascade.

The cascade is always:
1) CLI params
2) Environment variables
3) ~/.config/api_response/api_response.yaml
4) Built-in defaults

Environment variable format:
- Prefix: ``API_RESPONSE_``
- Nested keys: ``__`` separator
- Example: ``API_RESPONSE_ERRORS__READ_CONTENT=false`` ->
  ``errors.read_content = False``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from .models import CONFIG_PATH, ApiSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> ApiSettings:
    """Resolve and validate ``ApiSettings``; a missing YAML file is skipped."""
    token = CONFIG_PATH.set(Path(config_path)) if config_path is not None else None
    try:
        return ApiSettings(**dict(cli_params or {}))
    finally:
        if token is not None:
            CONFIG_PATH.reset(token)
