"""Unit tests for transport-outcome error construction."""

from __future__ import annotations

import asyncio

import httpx
from pydantic import BaseModel

from api_response import (
    ApiException,
    ApiSettings,
    ValidationApiException,
    create_api_exception,
    create_api_exception_async,
)
from api_response.config import ErrorSettings


class _ErrorBody(BaseModel):
    code: str
    retryable: bool = False


class _AsyncOnlyStream(httpx.AsyncByteStream):
    async def __aiter__(self):
        yield b"late body"


def test_create_api_exception_captures_response_details(make_response, settings) -> None:
    """The error should carry request, status, headers and body text."""
    raw = make_response(
        404,
        method="PUT",
        url="https://example.test/items/9",
        headers={"X-Trace": "t-1", "Content-Type": "text/plain"},
        text="no such item",
    )

    error = create_api_exception(raw.request, "PUT", raw, settings)

    assert type(error) is ApiException
    assert str(error) == "Response status code does not indicate success: 404 (Not Found)."
    assert error.request is raw.request
    assert error.method == "PUT"
    assert error.url == "https://example.test/items/9"
    assert error.status_code == 404
    assert error.reason_phrase == "Not Found"
    assert error.headers["x-trace"] == "t-1"
    assert error.content_headers["content-type"] == "text/plain"
    assert error.content == "no such item"
    assert error.has_content is True
    assert error.settings is settings


def test_create_api_exception_skips_body_when_disabled(make_response) -> None:
    """``errors.read_content = False`` should leave content empty."""
    raw = make_response(500, text="stack trace")
    settings = ApiSettings(errors=ErrorSettings(read_content=False))

    error = create_api_exception(raw.request, "GET", raw, settings)

    assert error.content is None
    assert error.has_content is False


def test_create_api_exception_truncates_long_bodies(make_response) -> None:
    """Captured body text should respect ``errors.max_content_chars``."""
    raw = make_response(500, text="abcdefghij")
    settings = ApiSettings(errors=ErrorSettings(max_content_chars=4))

    error = create_api_exception(raw.request, "GET", raw, settings)

    assert error.content == "abcd"


def test_create_api_exception_tolerates_unreadable_body(settings) -> None:
    """A body that cannot be read synchronously should not mask the status."""
    raw = httpx.Response(
        502,
        stream=_AsyncOnlyStream(),
        request=httpx.Request("GET", "https://example.test/"),
    )

    error = create_api_exception(raw.request, "GET", raw, settings)

    assert error.status_code == 502
    assert error.content is None


def test_create_api_exception_async_reads_streamed_body(settings) -> None:
    """The async collaborator should read an async-only body stream."""
    raw = httpx.Response(
        503,
        stream=_AsyncOnlyStream(),
        request=httpx.Request("GET", "https://example.test/"),
    )

    error = asyncio.run(create_api_exception_async(raw.request, "GET", raw, settings))

    assert error.content == "late body"
    assert error.status_code == 503


def test_problem_json_body_builds_validation_exception(make_response, settings) -> None:
    """``application/problem+json`` bodies should be parsed into ProblemDetails."""
    raw = make_response(
        400,
        headers={"Content-Type": "application/problem+json; charset=utf-8"},
        content=(
            b'{"type": "https://example.test/probs/invalid", "title": "Invalid",'
            b' "status": 400, "errors": {"name": ["required"]}, "traceId": "x1"}'
        ),
    )

    error = create_api_exception(raw.request, "POST", raw, settings)

    assert isinstance(error, ValidationApiException)
    assert error.problem is not None
    assert error.problem.title == "Invalid"
    assert error.problem.status == 400
    assert error.problem.errors == {"name": ["required"]}
    assert error.problem.model_extra == {"traceId": "x1"}


def test_malformed_problem_json_falls_back_to_api_exception(make_response, settings) -> None:
    """An unparseable problem document should still yield a plain ApiException."""
    raw = make_response(
        400,
        headers={"Content-Type": "application/problem+json"},
        content=b"not json",
    )

    error = create_api_exception(raw.request, "POST", raw, settings)

    assert type(error) is ApiException
    assert error.content == "not json"


def test_content_as_validates_json_body(make_response, settings) -> None:
    """content_as should validate the captured body into the requested model."""
    raw = make_response(409, json={"code": "CONFLICT", "retryable": True})
    error = create_api_exception(raw.request, "GET", raw, settings)

    body = error.content_as(_ErrorBody)

    assert body == _ErrorBody(code="CONFLICT", retryable=True)
    assert error.content_as(dict[str, object]) == {"code": "CONFLICT", "retryable": True}


def test_content_as_returns_none_without_body(make_response, settings) -> None:
    """content_as should return None when no body was captured."""
    raw = make_response(500)
    error = create_api_exception(raw.request, "GET", raw, settings)

    assert error.content == ""
    assert error.content_as(_ErrorBody) is None
