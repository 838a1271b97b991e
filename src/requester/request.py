r"""Contains the request executor: a fixed-count retry loop with linear
backoff on transport failures."""

from __future__ import annotations

__all__ = ["send"]

import logging
import time
from contextlib import nullcontext
from typing import TYPE_CHECKING

import httpx

from requester.backoff import LinearBackoff
from requester.config import ClientConfig
from requester.method import HttpMethod
from requester.utils import (
    handle_response,
    handle_transport_error,
    raise_construction_error,
    raise_final_error,
    read_body,
)

if TYPE_CHECKING:
    from contextlib import AbstractContextManager

    from requester.request_spec import RequestSpec

logger: logging.Logger = logging.getLogger(__name__)


def send(
    spec: RequestSpec,
    *,
    config: ClientConfig | None = None,
    client: httpx.Client | None = None,
) -> bytes:
    r"""Send an HTTP request and return the raw response body.

    The defaults of ``config`` are applied to the unset fields of
    ``spec`` before any attempt: an empty method is ``GET``, a zero
    timeout is 10 seconds and zero retries is a single attempt.

    The request is attempted up to ``spec.retries`` times. Only the
    transport failures (connection refused, DNS failure, timeout, ...)
    are retried, after a linear backoff of ``backoff_delay * (attempt + 1)``
    seconds (0.5s, 1.0s, 1.5s, ... by default). A response with a status
    code outside ``[200, 300)`` fails immediately, and so does a failure
    to read the body of a successful response. The timeout bounds each
    attempt as a whole: a body still being received when it runs out is
    a ``BodyReadError``.

    Args:
        spec: The description of the request.
        config: An optional ClientConfig object with the default values.
            If None, default ClientConfig values are used.
        client: An optional httpx.Client object used for every attempt.
            It is not closed by this function. If None, a new client is
            created for each attempt and closed after it.

    Returns:
        The body of the first successful (2xx) response.

    Raises:
        ConstructionError: If the method is not supported or the request
            cannot be built from the method and URL.
        TransportError: If every attempt failed at the transport level.
        StatusError: If the response status code is outside ``[200, 300)``.
        BodyReadError: If the response body cannot be read.
        ValueError: If the timeout or the number of retries is negative.

    Example:
        ```pycon
        >>> from requester import RequestSpec, send
        >>> body = send(
        ...     RequestSpec(url="https://api.example.com/data", retries=3)
        ... )  # doctest: +SKIP

        ```
    """
    config = config or ClientConfig()
    spec = spec.resolve(config)
    method = HttpMethod.parse(spec.method).value
    backoff = LinearBackoff(base_delay=config.backoff_delay)
    last_error: Exception | None = None

    for attempt in range(spec.retries):
        # The timeout bounds the whole attempt, body included
        deadline = time.monotonic() + spec.timeout
        with _open_client(client, config=config, timeout=spec.timeout) as http_client:
            http_request = _build_request(http_client, spec=spec, method=method)
            try:
                response = http_client.send(http_request, stream=True)
            except httpx.RequestError as exc:
                last_error = exc
                handle_transport_error(exc, spec.url, method, attempt, spec.retries)
            else:
                try:
                    handle_response(response, spec.url, method)
                    body = read_body(response, spec.url, method, deadline=deadline)
                finally:
                    response.close()
                if attempt > 0:
                    logger.debug(f"{method} request to {spec.url} succeeded on attempt {attempt + 1}")
                return body

        # No wait after the last attempt since we're about to fail
        if attempt < spec.retries - 1:
            sleep_time = backoff.calculate(attempt)
            logger.debug(f"Waiting {sleep_time:.2f}s before retry")
            time.sleep(sleep_time)

    raise_final_error(url=spec.url, method=method, retries=spec.retries, last_error=last_error)


def _open_client(
    client: httpx.Client | None, *, config: ClientConfig, timeout: float
) -> AbstractContextManager[httpx.Client]:
    r"""Return a context manager providing the client of one attempt.

    A caller-provided client is used as-is and left open. Otherwise a
    fresh client is created and closed on exit.
    """
    if client is not None:
        return nullcontext(client)
    return httpx.Client(
        timeout=timeout,
        headers=config.default_headers(),
        follow_redirects=True,
    )


def _build_request(client: httpx.Client, *, spec: RequestSpec, method: str) -> httpx.Request:
    r"""Build the outbound request and apply the request headers.

    Raises:
        ConstructionError: If the request cannot be built.
    """
    try:
        request = client.build_request(
            method,
            spec.url,
            content=spec.body or None,
            timeout=spec.timeout,
        )
        for name, value in spec.headers.items():
            request.headers[name] = value
    except (httpx.InvalidURL, ValueError, TypeError) as exc:
        raise_construction_error(exc, spec.url, method)
    return request
