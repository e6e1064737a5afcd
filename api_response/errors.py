"""Error taxonomy and default error construction for API responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from api_response.config import ApiSettings
from api_response.logging import fields, get_logger, log_context, response_fields
from api_response.raw import content_headers, response_headers

_LOGGER = get_logger(__name__)

PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class ApiResponseError(Exception):
    """Base error type for API response failures."""

    message: str

    def __str__(self) -> str:
        """Return the human-readable error message."""
        return self.message


@dataclass(frozen=True, eq=False)
class ResponseShapeError(ApiResponseError, TypeError):
    """A response constructor does not accept the required argument shape.

    This is a programming error in the dispatch layer, never a data condition.
    """

    body_type: object = None
    constructor: object = None


@dataclass(frozen=True, eq=False)
class ApiException(ApiResponseError):
    """Transport-outcome error for a response with a non-success status code."""

    request: httpx.Request | None
    method: str
    url: str
    status_code: int
    reason_phrase: str
    headers: httpx.Headers
    content_headers: httpx.Headers
    settings: ApiSettings
    content: str | None = None

    @property
    def has_content(self) -> bool:
        """Return True when a non-blank response body was captured."""
        return self.content is not None and self.content.strip() != ""

    def content_as(self, model: type[T]) -> T | None:
        """Validate the captured JSON body as ``model``; ``None`` without one."""
        if not self.has_content:
            return None
        return TypeAdapter(model).validate_json(self.content)


class ProblemDetails(BaseModel):
    """RFC 7807 problem document returned with ``application/problem+json``."""

    model_config = ConfigDict(extra="allow", frozen=True)

    type: str = "about:blank"
    title: str | None = None
    status: int | None = None
    detail: str | None = None
    instance: str | None = None
    errors: dict[str, list[str]] = Field(default_factory=dict)


@dataclass(frozen=True, eq=False)
class ValidationApiException(ApiException):
    """``ApiException`` whose body is a parsed RFC 7807 problem document."""

    problem: ProblemDetails | None = None


ErrorFactory = Callable[
    [httpx.Request | None, str, httpx.Response, ApiSettings], ApiException
]
AsyncErrorFactory = Callable[
    [httpx.Request | None, str, httpx.Response, ApiSettings],
    Awaitable[ApiException],
]


def create_api_exception(
    request: httpx.Request | None,
    method: str,
    response: httpx.Response,
    settings: ApiSettings,
) -> ApiException:
    """Build an ``ApiException`` from a still-open failed response."""
    content: str | None = None
    if settings.errors.read_content:
        try:
            response.read()
        except (httpx.HTTPError, RuntimeError) as exc:
            _log_unreadable_content(response, exc)
        else:
            content = _truncate(response.text, settings)
    return _build_exception(request, method, response, settings, content)


async def create_api_exception_async(
    request: httpx.Request | None,
    method: str,
    response: httpx.Response,
    settings: ApiSettings,
) -> ApiException:
    """Build an ``ApiException``, reading the body without blocking the loop."""
    content: str | None = None
    if settings.errors.read_content:
        try:
            await response.aread()
        except (httpx.HTTPError, RuntimeError) as exc:
            _log_unreadable_content(response, exc)
        else:
            content = _truncate(response.text, settings)
    return _build_exception(request, method, response, settings, content)


def _build_exception(
    request: httpx.Request | None,
    method: str,
    response: httpx.Response,
    settings: ApiSettings,
    content: str | None,
) -> ApiException:
    """Assemble the exception type matching the response media type."""
    reason_phrase = response.reason_phrase
    values = {
        "message": (
            "Response status code does not indicate success: "
            f"{response.status_code} ({reason_phrase})."
        ),
        "request": request,
        "method": method,
        "url": str(request.url) if request is not None else "",
        "status_code": response.status_code,
        "reason_phrase": reason_phrase,
        "headers": response_headers(response),
        "content_headers": content_headers(response),
        "settings": settings,
        "content": content,
    }

    media_type = response.headers.get("content-type", "").split(";")[0].strip()
    if content and media_type.lower() == PROBLEM_JSON_MEDIA_TYPE:
        try:
            problem = ProblemDetails.model_validate_json(content)
        except ValidationError:
            _LOGGER.debug(
                "Problem document could not be parsed: status_code=%s",
                response.status_code,
            )
        else:
            return ValidationApiException(**values, problem=problem)
    return ApiException(**values)


def _truncate(text: str, settings: ApiSettings) -> str:
    """Cap captured body text at the configured character budget."""
    return text[: settings.errors.max_content_chars]


def _log_unreadable_content(response: httpx.Response, exc: Exception) -> None:
    """Record that a failed response body could not be captured."""
    context = response_fields(response)
    context[fields.EVENT] = fields.ERROR_CONTENT_UNAVAILABLE_EVENT
    with log_context(context):
        _LOGGER.debug(
            "Failed response body unavailable: exception_type=%s",
            type(exc).__name__,
        )
