r"""Contains the HTTP HEAD helper."""

from __future__ import annotations

__all__ = ["head"]

from typing import TYPE_CHECKING

from requester.core.http_logic import execute_http_method
from requester.method import HttpMethod

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

    from requester.config import ClientConfig


def head(
    url: str,
    *,
    headers: Mapping[str, str] | None = None,
    timeout: float | None = None,
    config: ClientConfig | None = None,
    client: httpx.Client | None = None,
) -> bytes:
    r"""Send an HTTP HEAD request.

    The request is sent once, without retry. A HEAD response has no
    body, so this helper is mostly useful to check that a resource
    exists: a missing resource raises ``StatusError``.

    Args:
        url: The URL to send the HEAD request to.
        headers: Optional request headers.
        timeout: Maximum seconds to wait for the server response.
            If None, ``config.timeout`` is used. Must be > 0.
        config: An optional ClientConfig object. If None, default
            ClientConfig values are used.
        client: An optional httpx.Client object to use for the request.
            If None, a new client will be created and closed after use.

    Returns:
        The empty body of the successful (2xx) response.

    Raises:
        HttpRequestError: If the request fails, see ``requester.send``.
        ValueError: If timeout is non-positive.

    Example:
        ```pycon
        >>> from requester import head
        >>> body = head("https://api.example.com/items/1")  # doctest: +SKIP

        ```
    """
    return execute_http_method(
        url=url,
        method=HttpMethod.HEAD,
        headers=headers,
        timeout=timeout,
        config=config,
        client=client,
    )
