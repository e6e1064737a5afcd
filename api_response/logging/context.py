"""Structured log context for response handling.

The context lives in a ``contextvars`` variable so the status, method and url
of the response being handled are attached to every log line emitted while
it is processed, in sync and async code alike.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Mapping

import httpx

from api_response.raw import request_of

from . import fields

_LOG_CONTEXT: ContextVar[dict[str, str]] = ContextVar(
    "api_response_log_context", default={}
)


def get_context() -> dict[str, str]:
    """Return a shallow copy of current logging context."""
    return dict(_LOG_CONTEXT.get())


def bind_context(**values: object) -> None:
    """Bind non-``None`` values, stringified, into the current context."""
    if not values:
        return
    current = _LOG_CONTEXT.get().copy()
    current.update(
        {str(key): str(value) for key, value in values.items() if value is not None}
    )
    _LOG_CONTEXT.set(current)


def clear_context(*keys: str) -> None:
    """Clear selected keys or the entire logging context."""
    if not keys:
        _LOG_CONTEXT.set({})
        return
    current = _LOG_CONTEXT.get().copy()
    for key in keys:
        current.pop(key, None)
    _LOG_CONTEXT.set(current)


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Temporarily bind logging context for the duration of a block."""
    token = _LOG_CONTEXT.set(_LOG_CONTEXT.get().copy())
    try:
        bind_context(**dict(values))
        yield
    finally:
        _LOG_CONTEXT.reset(token)


def response_fields(response: httpx.Response) -> dict[str, object]:
    """Return the canonical log fields describing one raw response."""
    values: dict[str, object] = {
        fields.STATUS_CODE: response.status_code,
        fields.REASON_PHRASE: response.reason_phrase,
    }
    request = request_of(response)
    if request is not None:
        values[fields.METHOD] = request.method
        values[fields.URL] = str(request.url)
    return values
