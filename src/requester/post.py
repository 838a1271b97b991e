r"""Contains the HTTP POST helper sending a JSON payload."""

from __future__ import annotations

__all__ = ["post"]

from typing import TYPE_CHECKING, Any

from requester.core.http_logic import execute_http_method
from requester.method import HttpMethod

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

    from requester.config import ClientConfig


def post(
    url: str,
    payload: Any,
    *,
    headers: Mapping[str, str] | None = None,
    timeout: float | None = None,
    config: ClientConfig | None = None,
    client: httpx.Client | None = None,
) -> bytes:
    r"""Send an HTTP POST request with a JSON body and return the raw
    response body.

    The payload is encoded as JSON and the ``Content-Type`` header is
    always ``application/json``. The request is sent once, without
    retry.

    Args:
        url: The URL to send the POST request to.
        payload: The value to encode as the JSON body.
        headers: Optional request headers.
        timeout: Maximum seconds to wait for the server response.
            If None, ``config.timeout`` is used. Must be > 0.
        config: An optional ClientConfig object. If None, default
            ClientConfig values are used.
        client: An optional httpx.Client object to use for the request.
            If None, a new client will be created and closed after use.

    Returns:
        The body of the successful (2xx) response.

    Raises:
        SerializationError: If the payload cannot be encoded.
        HttpRequestError: If the request fails, see ``requester.send``.
        ValueError: If timeout is non-positive.

    Example:
        ```pycon
        >>> from requester import post
        >>> body = post("https://api.example.com/items/1", {"name": "widget"})  # doctest: +SKIP

        ```
    """
    return execute_http_method(
        url=url,
        method=HttpMethod.POST,
        payload=payload,
        headers=headers,
        timeout=timeout,
        config=config,
        client=client,
    )
