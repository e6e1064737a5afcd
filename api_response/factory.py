"""Build response wrappers from a runtime body-type descriptor.

Generic dispatch layers that serve heterogeneous endpoints know each body
type only at runtime. They look up a constructor by body type in a
:class:`ResponseFactoryRegistry`; constructors are checked against the fixed
``(response, content, settings, error)`` shape once, when registered.
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, TypeVar, get_origin

import httpx

from api_response.config import ApiSettings
from api_response.contracts import ApiResponseLike
from api_response.errors import ApiException, ResponseShapeError
from api_response.logging import get_logger
from api_response.response import ApiResponse

_LOGGER = get_logger(__name__)

ResponseConstructor = Callable[..., ApiResponseLike]

_SHAPE = ("response", "content", "settings", "error")


class ResponseFactoryRegistry:
    """Body type -> response constructor table with a generic fallback."""

    def __init__(self) -> None:
        self._constructors: dict[Any, ResponseConstructor] = {}

    def register(self, body_type: Any, constructor: ResponseConstructor) -> None:
        """Register ``constructor`` for ``body_type``.

        Raises:
            ResponseShapeError: ``constructor`` cannot be called with
                ``(response, content, settings, error)``.
        """
        _validate_shape(body_type, constructor)
        self._constructors[body_type] = constructor
        _LOGGER.debug(
            "Response constructor registered: body_type=%s constructor=%s",
            _type_name(body_type),
            getattr(constructor, "__qualname__", repr(constructor)),
        )

    def registered(self, body_type: Any) -> bool:
        """Return True when a custom constructor exists for ``body_type``."""
        return body_type in self._constructors

    def create(
        self,
        body_type: Any,
        response: httpx.Response,
        content: object | None,
        settings: ApiSettings,
        error: ApiException | None = None,
    ) -> ApiResponseLike:
        """Build the wrapper for ``body_type``, defaulting to ``ApiResponse``."""
        constructor = self._constructors.get(body_type)
        if constructor is None:
            constructor = _generic_constructor(body_type)

        wrapper = constructor(response, content, settings, error)
        if not isinstance(wrapper, ApiResponseLike):
            raise ResponseShapeError(
                message=(
                    f"Constructor for {_type_name(body_type)} returned "
                    f"{type(wrapper).__name__}, not an API response"
                ),
                body_type=body_type,
                constructor=constructor,
            )
        return wrapper


default_registry = ResponseFactoryRegistry()


def create_response(
    body_type: Any,
    response: httpx.Response,
    content: object | None,
    settings: ApiSettings,
    error: ApiException | None = None,
) -> ApiResponseLike:
    """Build a wrapper for ``body_type`` through the default registry."""
    return default_registry.create(body_type, response, content, settings, error)


def register_response(body_type: Any, constructor: ResponseConstructor) -> None:
    """Register ``constructor`` for ``body_type`` in the default registry."""
    default_registry.register(body_type, constructor)


def _generic_constructor(body_type: Any) -> ResponseConstructor:
    """Return ``ApiResponse[body_type]``, rejecting non-type descriptors."""
    if not _is_type_descriptor(body_type):
        raise ResponseShapeError(
            message=f"{body_type!r} is not a valid body type descriptor",
            body_type=body_type,
            constructor=ApiResponse,
        )
    return ApiResponse[body_type]


def _is_type_descriptor(body_type: Any) -> bool:
    """Accept classes, ``None``, type variables and parameterized generics."""
    return (
        body_type is None
        or isinstance(body_type, (type, TypeVar))
        or get_origin(body_type) is not None
    )


def _validate_shape(body_type: Any, constructor: ResponseConstructor) -> None:
    """Ensure ``constructor`` binds the fixed four-argument shape."""
    if not callable(constructor):
        raise ResponseShapeError(
            message=f"Constructor for {_type_name(body_type)} is not callable",
            body_type=body_type,
            constructor=constructor,
        )
    try:
        signature = inspect.signature(constructor)
        signature.bind(*_SHAPE)
    except (TypeError, ValueError) as exc:
        raise ResponseShapeError(
            message=(
                f"Constructor for {_type_name(body_type)} must accept "
                f"({', '.join(_SHAPE)}): {exc}"
            ),
            body_type=body_type,
            constructor=constructor,
        ) from exc


def _type_name(body_type: Any) -> str:
    return getattr(body_type, "__qualname__", None) or repr(body_type)
