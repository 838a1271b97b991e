r"""Define the exceptions raised by the request executor and its
helpers.

All the exceptions derive from ``HttpRequestError`` so callers can catch
every failure of the library with a single ``except`` clause, or
interpret the error kind with the subclasses.
"""

from __future__ import annotations

__all__ = [
    "BodyReadError",
    "ConstructionError",
    "HttpRequestError",
    "SerializationError",
    "StatusError",
    "TransportError",
    "UnsupportedMethodError",
]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class HttpRequestError(RuntimeError):
    """Base exception for all the failures of an HTTP request.

    Args:
        message: A descriptive error message.
        method: The HTTP method of the failed request, if known.
        url: The URL of the failed request, if known.
        status_code: The HTTP status code of the response, if a response
            was received.
        response: The response object, if a response was received.
        cause: The underlying exception, if any.

    Example:
        ```pycon
        >>> from requester.exceptions import HttpRequestError
        >>> error = HttpRequestError(
        ...     "GET request to https://api.example.com failed",
        ...     method="GET",
        ...     url="https://api.example.com",
        ... )
        >>> error.method
        'GET'
        >>> error.status_code is None
        True

        ```
    """

    def __init__(
        self,
        message: str,
        *,
        method: str | None = None,
        url: str | None = None,
        status_code: int | None = None,
        response: httpx.Response | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.method = method
        self.url = url
        self.status_code = status_code
        self.response = response
        self.cause = cause

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(message={self.message!r}, method={self.method!r}, "
            f"url={self.url!r}, status_code={self.status_code!r})"
        )


class ConstructionError(HttpRequestError):
    """Raised when the outbound request cannot be built, for example
    because of a malformed method or URL.

    This error is never retried.
    """


class UnsupportedMethodError(ConstructionError):
    """Raised when the HTTP method is not one of the supported verbs.

    Example:
        ```pycon
        >>> from requester.exceptions import ConstructionError, UnsupportedMethodError
        >>> error = UnsupportedMethodError("unsupported HTTP method: 'BREW'", method="BREW")
        >>> isinstance(error, ConstructionError)
        True

        ```
    """


class TransportError(HttpRequestError):
    """Raised when every attempt failed at the transport level
    (connection refused, DNS failure, timeout, ...).

    The last transport exception is available as ``cause`` and as
    ``__cause__``.
    """


class StatusError(HttpRequestError):
    """Raised when a response was received with a status code outside
    ``[200, 300)``.

    This error is never retried and ``status_code`` is always set.
    """


class BodyReadError(HttpRequestError):
    """Raised when a successful response body cannot be fully read."""


class SerializationError(HttpRequestError):
    """Raised when a payload cannot be encoded to JSON, or when JSON
    data cannot be decoded into the requested shape."""
