"""Stdout logging configuration for API response handling.

Log lines are emitted to stdout either as newline-delimited JSON or as plain
text; both carry the structured context bound through
:mod:`api_response.logging.context`.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from api_response.config.models import LoggingSettings

from . import fields
from .context import bind_context, get_context


class ContextFilter(logging.Filter):
    """Snapshot the bound log context onto each record as ``record.context``."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.context = get_context()
        return True


class _ContextFormatter(logging.Formatter):
    """Base for formatters that render the context snapshot of a record."""

    @staticmethod
    def context_of(record: logging.LogRecord) -> dict[str, str]:
        context = getattr(record, "context", None)
        return dict(context) if isinstance(context, dict) else {}


class JsonFormatter(_ContextFormatter):
    """One JSON object per line: record time, level, logger, message, context."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = self.context_of(record)
        payload.update(
            {
                fields.TIMESTAMP: datetime.fromtimestamp(record.created, UTC).isoformat(),
                fields.LEVEL: record.levelname,
                fields.LOGGER: record.name,
                fields.MESSAGE: record.getMessage(),
            }
        )
        if record.exc_info:
            payload[fields.EXCEPTION] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(_ContextFormatter):
    """``<time> <LEVEL> <logger> <message> k=v ...`` with context keys sorted."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        context = self.context_of(record)
        line = super().format(record)
        if not context:
            return line
        pairs = (f"{key}={context[key]}" for key in sorted(context))
        return " ".join((line, *pairs))


def configure_logging(
    *,
    level: str = "INFO",
    json_output: bool = True,
    service: str | None = None,
    environment: str | None = None,
) -> None:
    """Configure root logging with a single stdout handler.

    Existing root handlers are replaced, so repeated calls never duplicate
    emissions.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setLevel(level.upper())
    handler.addFilter(ContextFilter())
    handler.setFormatter(JsonFormatter() if json_output else PlainFormatter())
    root.addHandler(handler)

    bind_context(
        **{fields.SERVICE: service or None, fields.ENVIRONMENT: environment or None}
    )


def configure_from_settings(settings: LoggingSettings) -> None:
    """Configure root logging from a validated ``LoggingSettings`` subtree."""
    configure_logging(
        level=settings.level,
        json_output=settings.json_output,
        service=settings.service,
        environment=settings.environment,
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger using Python's standard logging hierarchy."""
    return logging.getLogger(name)
