r"""requester - Convenience helpers for sending HTTP requests.

This package wraps httpx to send HTTP requests and return the raw
response body, with a basic fixed-count retry loop and linear backoff
on transport failures.

Key Features:
    - ``send``: request executor retrying transport failures with a
      linear backoff (0.5s, 1.0s, 1.5s, ...). A non-2xx response fails
      immediately.
    - ``send_json`` / ``parse_json``: JSON encoding of the payload with a
      forced ``Content-Type: application/json``, and JSON decoding of the
      response body.
    - ``get``, ``post``, ``put``, ``patch``, ``delete``, ``options``,
      ``head``: single-attempt helpers for each HTTP method.
    - ``Requester``: caller-held client sharing a ``ClientConfig``.

Example:
    ```pycon
    >>> from requester import RequestSpec, parse_json, send
    >>> body = send(
    ...     RequestSpec(url="https://api.example.com/data", retries=3)
    ... )  # doctest: +SKIP
    >>> data = parse_json(body, dict)  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "BodyReadError",
    "ClientConfig",
    "ConstructionError",
    "HttpMethod",
    "HttpRequestError",
    "RequestSpec",
    "Requester",
    "SerializationError",
    "StatusError",
    "TransportError",
    "UnsupportedMethodError",
    "__version__",
    "delete",
    "encode_json",
    "get",
    "head",
    "options",
    "parse_json",
    "patch",
    "post",
    "put",
    "send",
    "send_json",
]

from importlib.metadata import PackageNotFoundError, version

from requester.client import Requester
from requester.config import ClientConfig
from requester.delete import delete
from requester.exceptions import (
    BodyReadError,
    ConstructionError,
    HttpRequestError,
    SerializationError,
    StatusError,
    TransportError,
    UnsupportedMethodError,
)
from requester.get import get
from requester.head import head
from requester.json_utils import encode_json, parse_json
from requester.method import HttpMethod
from requester.options import options
from requester.patch import patch
from requester.post import post
from requester.put import put
from requester.request import send
from requester.request_spec import RequestSpec
from requester.send_json import send_json

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
