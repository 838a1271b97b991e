r"""Shared logic of the HTTP verb helpers.

The verb helpers (``get``, ``post``, ...) only pre-fill the method and
delegate to ``execute_http_method``, which sends a single attempt.
"""

from __future__ import annotations

__all__ = ["VERB_RETRIES", "execute_http_method"]

from typing import TYPE_CHECKING, Any

from requester.core.validation import validate_timeout
from requester.json_utils import encode_json, json_headers
from requester.request import send
from requester.request_spec import RequestSpec

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

    from requester.config import ClientConfig
    from requester.method import HttpMethod

# The verb helpers never retry
VERB_RETRIES = 1


def execute_http_method(
    url: str,
    method: HttpMethod,
    *,
    payload: Any = None,
    headers: Mapping[str, str] | None = None,
    timeout: float | None = None,
    config: ClientConfig | None = None,
    client: httpx.Client | None = None,
) -> bytes:
    """Execute an HTTP method with a single attempt.

    For the methods with a body (POST, PUT, PATCH), ``payload`` is
    encoded as JSON and the ``Content-Type`` header is forced to
    ``application/json``. For the other methods, ``payload`` is ignored.

    Args:
        url: The URL to send the request to.
        method: The HTTP method.
        payload: The value to encode as the JSON body.
        headers: Optional request headers. The mapping is not modified.
        timeout: Maximum seconds to wait for the server response.
            If None, ``config.timeout`` is used. Must be > 0.
        config: An optional ClientConfig object. If None, default
            ClientConfig values are used.
        client: An optional httpx.Client object to use for the request.
            If None, a new client will be created and closed after use.

    Returns:
        The body of the successful (2xx) response.

    Raises:
        HttpRequestError: If the request fails, see ``requester.send``.
        ValueError: If timeout is non-positive.
    """
    if timeout is not None:
        validate_timeout(timeout)

    if method.has_body:
        body = encode_json(payload)
        headers = json_headers(headers)
    else:
        body = b""
        headers = dict(headers or {})

    return send(
        RequestSpec(
            url=url,
            method=method,
            headers=headers,
            body=body,
            timeout=timeout or 0.0,
            retries=VERB_RETRIES,
        ),
        config=config,
        client=client,
    )
