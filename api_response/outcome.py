"""Two-variant view of a completed call: ``Success`` or ``Failure``.

Unlike the wrapper's nullable accessors, neither variant can be ill-formed:
a ``Success`` never carries an error and a ``Failure`` always does.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

import httpx

from api_response.errors import ApiException

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful call with its deserialized body and headers."""

    content: T | None
    headers: httpx.Headers
    content_headers: httpx.Headers

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Failed call with its resolved transport-outcome error."""

    error: ApiException

    @property
    def ok(self) -> bool:
        return False


Outcome = Union[Success[T], Failure]
