r"""Define the closed set of HTTP methods supported by the helpers."""

from __future__ import annotations

__all__ = ["HttpMethod"]

from enum import Enum

from requester.config import DEFAULT_METHOD
from requester.exceptions import UnsupportedMethodError


class HttpMethod(Enum):
    """Supported HTTP methods.

    Attributes:
        GET: Retrieve a resource.
        POST: Create a resource, sent with a JSON body by the helpers.
        PUT: Replace a resource, sent with a JSON body by the helpers.
        PATCH: Update a resource, sent with a JSON body by the helpers.
        DELETE: Delete a resource.
        OPTIONS: Describe the communication options of a resource.
        HEAD: Retrieve the headers of a resource.
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    HEAD = "HEAD"

    @property
    def has_body(self) -> bool:
        """Indicate if the verb helpers send a JSON body with this
        method."""
        return self in {HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH}

    @classmethod
    def parse(cls, value: str | HttpMethod) -> HttpMethod:
        """Parse an HTTP method.

        Args:
            value: An ``HttpMethod`` or a method name. The name is
                case-insensitive and surrounding whitespace is ignored.
                An empty name means ``GET``.

        Returns:
            The matching HTTP method.

        Raises:
            UnsupportedMethodError: If the value is not a supported
                HTTP method.

        Example:
            ```pycon
            >>> from requester.method import HttpMethod
            >>> HttpMethod.parse("post")
            <HttpMethod.POST: 'POST'>
            >>> HttpMethod.parse("")
            <HttpMethod.GET: 'GET'>
            >>> HttpMethod.parse("BREW")  # doctest: +SKIP
            Traceback (most recent call last):
            ...
            requester.exceptions.UnsupportedMethodError: unsupported HTTP method: 'BREW'

            ```
        """
        if isinstance(value, HttpMethod):
            return value
        if not isinstance(value, str):
            msg = f"unsupported HTTP method: {value!r}"
            raise UnsupportedMethodError(msg, method=repr(value))
        name = value.strip().upper() or DEFAULT_METHOD
        try:
            return cls(name)
        except ValueError as exc:
            msg = f"unsupported HTTP method: {value!r}"
            raise UnsupportedMethodError(msg, method=value, cause=exc) from exc
