r"""Caller-held client for sending HTTP requests with shared
configuration.

The ``Requester`` replaces a process-wide default client: the caller
constructs it explicitly with a ``ClientConfig`` and passes it where
requests are made.
"""

from __future__ import annotations

__all__ = ["Requester"]

from typing import TYPE_CHECKING, Any

import httpx

from requester.config import ClientConfig
from requester.core.http_logic import execute_http_method
from requester.json_utils import parse_json
from requester.method import HttpMethod
from requester.request import send
from requester.send_json import send_json

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType
    from typing import Self

    from requester.request_spec import RequestSpec


class Requester:
    r"""Send HTTP requests with a shared configuration.

    Two usage patterns are supported:

    **Context manager**: on enter, a shared ``httpx.Client`` is created
    from the configuration (timeout, ``User-Agent`` and extra headers)
    if no client was provided, and it is closed on exit. All the
    requests made inside the ``with`` block reuse its connections.

    **Without context manager**: each attempt uses a fresh client, or the
    provided ``httpx.Client``.

    A caller-provided ``httpx.Client`` is never closed by the
    ``Requester``.

    Args:
        config: Optional ClientConfig instance. If ``None``, a default
            ClientConfig is used.
        client: Optional httpx.Client instance used for all the requests.

    Example:
        ```pycon
        >>> from requester import ClientConfig, Requester
        >>> with Requester(config=ClientConfig(timeout=5.0)) as requester:  # doctest: +SKIP
        ...     body = requester.get("https://api.example.com/items")
        ...     items = requester.parse_json(body, list)
        ...

        ```
    """

    def __init__(
        self,
        *,
        config: ClientConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._config: ClientConfig = config or ClientConfig()
        self._client: httpx.Client | None = client
        self._owns_client = False

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(config={self._config})"

    @property
    def config(self) -> ClientConfig:
        r"""The configuration shared by all the requests."""
        return self._config

    def __enter__(self) -> Self:
        """Enter the context manager.

        Returns:
            The Requester instance for making requests.
        """
        if self._client is None:
            self._client = httpx.Client(
                timeout=self._config.timeout,
                headers=self._config.default_headers(),
                follow_redirects=True,
            )
            self._owns_client = True
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the context manager and close the httpx client if this
        context manager created it."""
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None
            self._owns_client = False

    def send(self, spec: RequestSpec) -> bytes:
        r"""Send an HTTP request with the retry loop of
        ``requester.send``.

        Args:
            spec: The description of the request. Its unset fields use
                the values of the shared configuration.

        Returns:
            The body of the successful (2xx) response.
        """
        return send(spec, config=self._config, client=self._client)

    def send_json(
        self,
        url: str,
        method: str | HttpMethod,
        payload: Any,
        headers: Mapping[str, str] | None = None,
    ) -> bytes:
        r"""Send a payload encoded as JSON, see ``requester.send_json``."""
        return send_json(
            url, method, payload, headers, config=self._config, client=self._client
        )

    def parse_json(self, data: bytes | str, target: type[Any] | None = None) -> Any:
        r"""Decode JSON data, see ``requester.parse_json``."""
        return parse_json(data, target)

    def get(
        self,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> bytes:
        r"""Send an HTTP GET request, see ``requester.get``."""
        return self._execute(url, HttpMethod.GET, headers=headers, timeout=timeout)

    def delete(
        self,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> bytes:
        r"""Send an HTTP DELETE request, see ``requester.delete``."""
        return self._execute(url, HttpMethod.DELETE, headers=headers, timeout=timeout)

    def options(
        self,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> bytes:
        r"""Send an HTTP OPTIONS request, see ``requester.options``."""
        return self._execute(url, HttpMethod.OPTIONS, headers=headers, timeout=timeout)

    def head(
        self,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> bytes:
        r"""Send an HTTP HEAD request, see ``requester.head``."""
        return self._execute(url, HttpMethod.HEAD, headers=headers, timeout=timeout)

    def post(
        self,
        url: str,
        payload: Any,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> bytes:
        r"""Send an HTTP POST request with a JSON body, see
        ``requester.post``."""
        return self._execute(
            url, HttpMethod.POST, payload=payload, headers=headers, timeout=timeout
        )

    def put(
        self,
        url: str,
        payload: Any,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> bytes:
        r"""Send an HTTP PUT request with a JSON body, see
        ``requester.put``."""
        return self._execute(
            url, HttpMethod.PUT, payload=payload, headers=headers, timeout=timeout
        )

    def patch(
        self,
        url: str,
        payload: Any,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> bytes:
        r"""Send an HTTP PATCH request with a JSON body, see
        ``requester.patch``."""
        return self._execute(
            url, HttpMethod.PATCH, payload=payload, headers=headers, timeout=timeout
        )

    def _execute(
        self,
        url: str,
        method: HttpMethod,
        *,
        payload: Any = None,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> bytes:
        return execute_http_method(
            url=url,
            method=method,
            payload=payload,
            headers=headers,
            timeout=timeout,
            config=self._config,
            client=self._client,
        )
