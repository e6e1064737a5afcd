"""Read-only projections over a raw ``httpx.Response``.

``httpx`` keeps entity headers and response headers in one collection and
raises when a response was built without a request; these helpers present
both the way the response wrapper exposes them.
"""

from __future__ import annotations

import httpx

# Entity headers as defined in RFC 2616 section 7.1.
CONTENT_HEADER_NAMES: frozenset[str] = frozenset(
    {
        "allow",
        "content-disposition",
        "content-encoding",
        "content-language",
        "content-length",
        "content-location",
        "content-md5",
        "content-range",
        "content-type",
        "expires",
        "last-modified",
    }
)


def request_of(response: httpx.Response) -> httpx.Request | None:
    """Return the request that led to ``response``, or ``None`` when unset."""
    try:
        return response.request
    except RuntimeError:
        return None


def response_headers(response: httpx.Response) -> httpx.Headers:
    """Return the non-entity headers of ``response``."""
    return httpx.Headers(
        [
            (name, value)
            for name, value in response.headers.multi_items()
            if name.lower() not in CONTENT_HEADER_NAMES
        ]
    )


def content_headers(response: httpx.Response) -> httpx.Headers:
    """Return the entity headers of ``response``."""
    return httpx.Headers(
        [
            (name, value)
            for name, value in response.headers.multi_items()
            if name.lower() in CONTENT_HEADER_NAMES
        ]
    )
