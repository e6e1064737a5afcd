"""Typed outcome wrappers for completed HTTP calls."""

from api_response.config import ApiSettings, ErrorSettings, LoggingSettings, load_settings
from api_response.contracts import ApiResponseLike, TypedApiResponse
from api_response.errors import (
    ApiException,
    ApiResponseError,
    AsyncErrorFactory,
    ErrorFactory,
    ProblemDetails,
    ResponseShapeError,
    ValidationApiException,
    create_api_exception,
    create_api_exception_async,
)
from api_response.factory import (
    ResponseFactoryRegistry,
    create_response,
    default_registry,
    register_response,
)
from api_response.outcome import Failure, Outcome, Success
from api_response.response import ApiResponse

__all__ = [
    "ApiException",
    "ApiResponse",
    "ApiResponseError",
    "ApiResponseLike",
    "ApiSettings",
    "AsyncErrorFactory",
    "ErrorFactory",
    "ErrorSettings",
    "Failure",
    "LoggingSettings",
    "Outcome",
    "ProblemDetails",
    "ResponseFactoryRegistry",
    "ResponseShapeError",
    "Success",
    "TypedApiResponse",
    "ValidationApiException",
    "create_api_exception",
    "create_api_exception_async",
    "create_response",
    "default_registry",
    "load_settings",
    "register_response",
]
