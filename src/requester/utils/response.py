r"""HTTP response handling utilities.

This module provides the functions validating the status code of a
response and reading its body.
"""

from __future__ import annotations

__all__ = ["handle_response", "is_success", "read_body"]

import logging
import time

import httpx

from requester.exceptions import BodyReadError, StatusError

logger: logging.Logger = logging.getLogger(__name__)


def is_success(status_code: int) -> bool:
    """Indicate if a status code is a success (2xx).

    Example:
        ```pycon
        >>> from requester.utils.response import is_success
        >>> is_success(204)
        True
        >>> is_success(301)
        False

        ```
    """
    return 200 <= status_code < 300




def handle_response(response: httpx.Response, url: str, method: str) -> None:
    """Raise an error if the response status code is not a success.

    The body of an error response is read before raising, so it stays
    available on ``StatusError.response`` once the response is closed.

    Args:
        response: The HTTP response object to validate.
        url: The URL that was requested, used in error messages.
        method: The HTTP method name (e.g., "GET", "POST"), used in
            error messages.

    Raises:
        StatusError: If the status code is outside ``[200, 300)``.
    """
    status_code = response.status_code
    if is_success(status_code):
        return
    status = f"{status_code} {httpx.codes.get_reason_phrase(status_code)}".rstrip()
    logger.debug(f"{method} request to {url} failed with status {status}")
    try:
        response.read()
    except (httpx.RequestError, httpx.StreamError) as exc:
        # The status error is raised anyway, without the body
        logger.debug(f"{method} request to {url} failed to read the error response body: {exc}")
    raise StatusError(
        f"{method} request to {url} failed with status {status}",
        method=method,
        url=url,
        status_code=status_code,
        response=response,
    )


def read_body(
    response: httpx.Response, url: str, method: str, deadline: float | None = None
) -> bytes:
    """Read the whole body of a streamed response.

    Args:
        response: The HTTP response object, sent with ``stream=True``.
        url: The URL that was requested, used in error messages.
        method: The HTTP method name, used in error messages.
        deadline: Optional ``time.monotonic()`` value after which the
            body read is aborted. If None, the read is only limited by
            the timeouts of the httpx client.

    Returns:
        The raw body bytes.

    Raises:
        BodyReadError: If the body cannot be fully read, or is still
            being received when the deadline passes.
    """
    chunks = []
    try:
        for chunk in response.iter_bytes():
            chunks.append(chunk)
            if deadline is not None and time.monotonic() > deadline:
                msg = "deadline exceeded while receiving the response body"
                raise httpx.ReadTimeout(msg, request=response.request)
    except (httpx.RequestError, httpx.StreamError) as exc:
        logger.debug(f"{method} request to {url} failed to read the response body: {exc}")
        raise BodyReadError(
            f"{method} request to {url} failed to read the response body: {exc}",
            method=method,
            url=url,
            status_code=response.status_code,
            response=response,
            cause=exc,
        ) from exc
    return b"".join(chunks)
