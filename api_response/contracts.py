"""Capability interfaces every API response wrapper satisfies.

``ApiResponseLike`` is the type-erased contract for code that does not know
the body type (logging, metrics, uniform retry wrappers). ``TypedApiResponse``
narrows ``content`` for endpoint-specific callers.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

import httpx

from api_response.errors import ApiException

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class ApiResponseLike(Protocol):
    """Read-only view of one completed call, independent of its body type."""

    @property
    def is_success(self) -> bool:
        """Return True when the status code is in the 2xx range."""
        ...

    @property
    def content(self) -> object | None:
        """Return the deserialized body, if any."""
        ...

    @property
    def headers(self) -> httpx.Headers:
        """Return the response headers, entity headers excluded."""
        ...

    @property
    def content_headers(self) -> httpx.Headers:
        """Return the response entity headers."""
        ...

    @property
    def status_code(self) -> int:
        """Return the HTTP status code."""
        ...

    @property
    def reason_phrase(self) -> str:
        """Return the reason phrase sent alongside the status code."""
        ...

    @property
    def request(self) -> httpx.Request | None:
        """Return the request that led to this response."""
        ...

    @property
    def version(self) -> str:
        """Return the HTTP protocol version, e.g. ``HTTP/1.1``."""
        ...

    @property
    def error(self) -> ApiException | None:
        """Return the transport-outcome error, when one is known."""
        ...

    def close(self) -> None:
        """Release the underlying raw response; idempotent."""
        ...


@runtime_checkable
class TypedApiResponse(ApiResponseLike, Protocol[T_co]):
    """``ApiResponseLike`` with ``content`` narrowed to the declared body type."""

    @property
    def content(self) -> T_co | None:
        """Return the deserialized body as the declared type, if any."""
        ...
