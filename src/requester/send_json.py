r"""Contains the helper sending a JSON payload with automatic retry
logic."""

from __future__ import annotations

__all__ = ["send_json"]

from typing import TYPE_CHECKING, Any

from requester.config import ClientConfig
from requester.json_utils import encode_json, json_headers
from requester.method import HttpMethod
from requester.request import send
from requester.request_spec import RequestSpec

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx


def send_json(
    url: str,
    method: str | HttpMethod,
    payload: Any,
    headers: Mapping[str, str] | None = None,
    *,
    config: ClientConfig | None = None,
    client: httpx.Client | None = None,
) -> bytes:
    r"""Send a payload encoded as JSON and return the raw response body.

    The ``Content-Type`` header is always ``application/json``, even if
    ``headers`` sets another value. The request is attempted up to
    ``config.json_retries`` times (2 by default) on transport failures.

    Args:
        url: The URL to send the request to.
        method: The HTTP method.
        payload: The value to encode as JSON.
        headers: Optional request headers. The mapping is not modified.
        config: An optional ClientConfig object. If None, default
            ClientConfig values are used.
        client: An optional httpx.Client object to use for every
            attempt. If None, a new client is created for each attempt.

    Returns:
        The body of the successful (2xx) response.

    Raises:
        UnsupportedMethodError: If the method is not supported.
        SerializationError: If the payload cannot be encoded.
        ConstructionError: If the request cannot be built.
        TransportError: If every attempt failed at the transport level.
        StatusError: If the response status code is outside ``[200, 300)``.
        BodyReadError: If the response body cannot be read.

    Example:
        ```pycon
        >>> from requester import send_json
        >>> body = send_json(
        ...     "https://api.example.com/items", "POST", {"name": "widget"}
        ... )  # doctest: +SKIP

        ```
    """
    config = config or ClientConfig()
    http_method = HttpMethod.parse(method)
    body = encode_json(payload)
    return send(
        RequestSpec(
            url=url,
            method=http_method,
            headers=json_headers(headers),
            body=body,
            retries=config.json_retries,
        ),
        config=config,
        client=client,
    )
