"""Shared fixtures for API response tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from api_response.config import ApiSettings, load_settings

ResponseBuilder = Callable[..., "CountingResponse"]


class CountingResponse(httpx.Response):
    """``httpx.Response`` that records how often it was released."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        # In-memory bodies are read, and the stream closed, during construction.
        self.close_calls = 0
        self.aclose_calls = 0
        super().__init__(*args, **kwargs)
        self.close_calls = 0

    def close(self) -> None:
        self.close_calls += 1
        super().close()

    async def aclose(self) -> None:
        self.aclose_calls += 1
        await super().aclose()

    @property
    def release_count(self) -> int:
        return self.close_calls + self.aclose_calls


@pytest.fixture
def settings(tmp_path: Path) -> ApiSettings:
    """Default settings forwarded through wrappers under test."""
    return load_settings(config_path=tmp_path / "api_response.yaml")


@pytest.fixture
def make_response() -> ResponseBuilder:
    """Return a builder for in-memory responses tied to a GET request."""

    def _build(
        status_code: int = 200,
        *,
        method: str = "GET",
        url: str = "https://example.test/items/1",
        **kwargs: Any,
    ) -> CountingResponse:
        kwargs.setdefault("request", httpx.Request(method, url))
        return CountingResponse(status_code, **kwargs)

    return _build
