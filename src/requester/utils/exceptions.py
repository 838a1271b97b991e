r"""Exception handling utilities for the request executor.

This module provides the functions converting the exceptions raised
by httpx into the exceptions of ``requester.exceptions``.
"""

from __future__ import annotations

__all__ = ["handle_transport_error", "raise_construction_error", "raise_final_error"]

import logging
from typing import NoReturn

from requester.exceptions import ConstructionError, TransportError

logger: logging.Logger = logging.getLogger(__name__)


def handle_transport_error(
    exc: Exception,
    url: str,
    method: str,
    attempt: int,
    retries: int,
) -> None:
    """Log a transport failure of one attempt.

    The error is recorded by the caller, and the retry loop continues
    until the attempts are exhausted.

    Args:
        exc: The transport exception (typically a subclass of
            ``httpx.RequestError`` like ``httpx.ConnectError`` or
            ``httpx.ReadTimeout``).
        url: The URL that was requested.
        method: The HTTP method name (e.g., "GET", "POST").
        attempt: The current attempt number (0-indexed).
        retries: The total number of attempts.
    """
    error_type = type(exc).__name__
    logger.debug(
        f"{method} request to {url} encountered {error_type} on attempt "
        f"{attempt + 1}/{retries}: {exc}"
    )


def raise_construction_error(exc: Exception, url: str, method: str) -> NoReturn:
    """Raise a ``ConstructionError`` for a request that cannot be built.

    Args:
        exc: The exception raised while building the request.
        url: The URL of the request.
        method: The HTTP method name.

    Raises:
        ConstructionError: Always, chained from ``exc``.
    """
    logger.debug(f"{method} request to {url} could not be built: {exc}")
    raise ConstructionError(
        f"invalid {method} request to {url}: {exc}",
        method=method,
        url=url,
        cause=exc,
    ) from exc


def raise_final_error(
    *,
    url: str,
    method: str,
    retries: int,
    last_error: Exception | None,
) -> NoReturn:
    """Raise the error reported when every attempt failed at the
    transport level.

    Args:
        url: The URL that was requested.
        method: The HTTP method name.
        retries: The total number of attempts.
        last_error: The transport exception of the last attempt.

    Raises:
        TransportError: Always, chained from ``last_error``.
    """
    msg = f"{method} request to {url} failed after {retries} attempts"
    if last_error is not None:
        msg = f"{msg}: {last_error}"
    raise TransportError(msg, method=method, url=url, cause=last_error) from last_error
