"""Typed outcome wrapper for one completed HTTP call."""

from __future__ import annotations

from types import TracebackType
from typing import Generic, TypeVar

import httpx

from api_response.config import ApiSettings
from api_response.errors import (
    ApiException,
    AsyncErrorFactory,
    ErrorFactory,
    create_api_exception,
    create_api_exception_async,
)
from api_response.logging import fields, get_logger, log_context, response_fields
from api_response.outcome import Failure, Outcome, Success
from api_response.raw import content_headers, request_of, response_headers

_LOGGER = get_logger(__name__)

T = TypeVar("T")


class ApiResponse(Generic[T]):
    """Raw response, deserialized body and success classification in one value.

    The wrapper owns ``response`` and releases it at most once, through
    :meth:`close`, :meth:`aclose` or a failing :meth:`ensure_success`.
    Accessors never raise; failures surface only when the caller asks for
    them with :meth:`ensure_success` / :meth:`aensure_success`.
    """

    def __init__(
        self,
        response: httpx.Response,
        content: T | None,
        settings: ApiSettings,
        error: ApiException | None = None,
        *,
        error_factory: ErrorFactory | None = None,
        async_error_factory: AsyncErrorFactory | None = None,
    ) -> None:
        """Wrap one completed response; no I/O is performed.

        Raises:
            ValueError: ``response`` is ``None``.
        """
        if response is None:
            raise ValueError("response is required")
        self._response = response
        self._content = content
        self._settings = settings
        self._error = error
        self._error_factory = error_factory or create_api_exception
        self._async_error_factory = async_error_factory or create_api_exception_async
        self._disposed = False

        if error is not None and response.is_success:
            _LOGGER.warning(
                "Error supplied for a successful response is ignored: status_code=%s",
                response.status_code,
            )

    @property
    def content(self) -> T | None:
        """Deserialized body as the declared type."""
        return self._content

    @property
    def settings(self) -> ApiSettings:
        """Settings used to send the request."""
        return self._settings

    @property
    def is_success(self) -> bool:
        return self._response.is_success

    @property
    def headers(self) -> httpx.Headers:
        return response_headers(self._response)

    @property
    def content_headers(self) -> httpx.Headers:
        return content_headers(self._response)

    @property
    def reason_phrase(self) -> str:
        return self._response.reason_phrase

    @property
    def request(self) -> httpx.Request | None:
        return request_of(self._response)

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def version(self) -> str:
        return self._response.http_version

    @property
    def error(self) -> ApiException | None:
        """Transport-outcome error; always ``None`` for a successful response."""
        if self.is_success:
            return None
        return self._error

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def ensure_success(self) -> ApiResponse[T]:
        """Return ``self`` on success; otherwise dispose and raise the error.

        Raises:
            ApiException: the status code is outside the 2xx range.
        """
        if self.is_success:
            return self
        try:
            error = self._resolve_error()
        finally:
            self.close()
        self._log_failure(error)
        raise error.with_traceback(None)

    async def aensure_success(self) -> ApiResponse[T]:
        """Async variant of :meth:`ensure_success`.

        The error collaborator is awaited while the response is still open.
        """
        if self.is_success:
            return self
        try:
            error = await self._aresolve_error()
        finally:
            await self.aclose()
        self._log_failure(error)
        raise error.with_traceback(None)

    def outcome(self) -> Outcome[T]:
        """Return ``Success`` or ``Failure`` without raising or disposing."""
        if self.is_success:
            return self._success()
        return Failure(error=self._resolve_error())

    async def aoutcome(self) -> Outcome[T]:
        """Async variant of :meth:`outcome`."""
        if self.is_success:
            return self._success()
        return Failure(error=await self._aresolve_error())

    def close(self) -> None:
        """Release the raw response; later calls are no-ops.

        A response backed by an async stream cannot be released here;
        ``httpx`` raises ``RuntimeError`` and the wrapper stays open for
        :meth:`aclose`.
        """
        if self._disposed:
            return
        self._response.close()
        self._disposed = True
        self._log_disposed()

    async def aclose(self) -> None:
        """Release a raw response backed by an async stream; idempotent."""
        if self._disposed:
            return
        await self._response.aclose()
        self._disposed = True
        self._log_disposed()

    def __enter__(self) -> ApiResponse[T]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    async def __aenter__(self) -> ApiResponse[T]:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} [{self.status_code} {self.reason_phrase}]"
            f"{' disposed' if self._disposed else ''}>"
        )

    def _success(self) -> Success[T]:
        return Success(
            content=self._content,
            headers=self.headers,
            content_headers=self.content_headers,
        )

    def _resolve_error(self) -> ApiException:
        """Return the supplied error or build and keep one."""
        if self._error is None:
            request = self.request
            self._error = self._error_factory(
                request, _method_of(request), self._response, self._settings
            )
        return self._error

    async def _aresolve_error(self) -> ApiException:
        if self._error is None:
            request = self.request
            self._error = await self._async_error_factory(
                request, _method_of(request), self._response, self._settings
            )
        return self._error

    def _log_failure(self, error: ApiException) -> None:
        context = response_fields(self._response)
        context[fields.EVENT] = fields.RESPONSE_FAILURE_EVENT
        with log_context(context):
            _LOGGER.warning(
                "Response failed success check: error_type=%s",
                type(error).__name__,
            )

    def _log_disposed(self) -> None:
        context = response_fields(self._response)
        context[fields.EVENT] = fields.RESPONSE_DISPOSED_EVENT
        with log_context(context):
            _LOGGER.debug("Response disposed")


def _method_of(request: httpx.Request | None) -> str:
    """Return the request method, or an empty string without a request."""
    return request.method if request is not None else ""
