r"""JSON encoding and decoding helpers.

These functions are pure transforms. They never touch the network and
their failures are reported as ``SerializationError``.
"""

from __future__ import annotations

__all__ = ["encode_json", "json_headers", "parse_json"]

import dataclasses
import json
from typing import TYPE_CHECKING, Any, TypeVar, overload

from requester.config import JSON_CONTENT_TYPE
from requester.exceptions import SerializationError

if TYPE_CHECKING:
    from collections.abc import Mapping

T = TypeVar("T")


def json_headers(headers: Mapping[str, str] | None = None) -> dict[str, str]:
    r"""Return a copy of the headers with the JSON content type forced.

    Any ``Content-Type`` header, whatever its case, is replaced.

    Args:
        headers: Optional request headers. The mapping is not modified.

    Returns:
        The new headers.

    Example:
        ```pycon
        >>> from requester.json_utils import json_headers
        >>> json_headers({"content-type": "text/plain", "X-Trace": "1"})
        {'X-Trace': '1', 'Content-Type': 'application/json'}

        ```
    """
    copied = {k: v for k, v in (headers or {}).items() if k.lower() != "content-type"}
    copied["Content-Type"] = JSON_CONTENT_TYPE
    return copied


def encode_json(payload: Any) -> bytes:
    r"""Encode a payload to compact UTF-8 JSON.

    Args:
        payload: The value to encode. Dataclass instances are encoded
            as JSON objects.

    Returns:
        The encoded payload.

    Raises:
        SerializationError: If the payload cannot be encoded.

    Example:
        ```pycon
        >>> from requester.json_utils import encode_json
        >>> encode_json({"name": "widget", "tags": ["a", "b"]})
        b'{"name":"widget","tags":["a","b"]}'

        ```
    """
    if dataclasses.is_dataclass(payload) and not isinstance(payload, type):
        payload = dataclasses.asdict(payload)
    try:
        encoded = json.dumps(payload, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        return encoded.encode("utf-8")
    except (TypeError, ValueError) as exc:
        msg = f"cannot encode payload of type {type(payload).__qualname__} to JSON: {exc}"
        raise SerializationError(msg, cause=exc) from exc


@overload
def parse_json(data: bytes | str, target: None = None) -> Any: ...


@overload
def parse_json(data: bytes | str, target: type[T]) -> T: ...


def parse_json(data: bytes | str, target: type[Any] | None = None) -> Any:
    r"""Decode JSON data into the requested shape.

    Args:
        data: The JSON document, usually a response body.
        target: The expected shape. If None, the decoded value is
            returned as-is. If a dataclass type, it is instantiated
            with the fields of the decoded JSON object. Otherwise the
            decoded value must be an instance of ``target``
            (e.g. ``dict`` or ``list``).

    Returns:
        The decoded value.

    Raises:
        SerializationError: If the data is not valid JSON, or does not
            match ``target``.

    Example:
        ```pycon
        >>> from dataclasses import dataclass
        >>> from requester.json_utils import parse_json
        >>> parse_json(b'{"id": 1}')
        {'id': 1}
        >>> @dataclass
        ... class Item:
        ...     id: int
        ...
        >>> parse_json(b'{"id": 1}', Item)
        Item(id=1)

        ```
    """
    try:
        value = json.loads(data)
    except (TypeError, ValueError) as exc:
        msg = f"cannot decode JSON data: {exc}"
        raise SerializationError(msg, cause=exc) from exc

    if target is None:
        return value
    if dataclasses.is_dataclass(target):
        return _to_dataclass(value, target)
    if not isinstance(value, target):
        msg = (
            f"expected JSON data of type {target.__qualname__}, "
            f"got {type(value).__qualname__}"
        )
        raise SerializationError(msg)
    return value


def _to_dataclass(value: Any, target: type[T]) -> T:
    if not isinstance(value, dict):
        msg = (
            f"expected a JSON object to build {target.__qualname__}, "
            f"got {type(value).__qualname__}"
        )
        raise SerializationError(msg)
    try:
        return target(**value)
    except TypeError as exc:
        msg = f"cannot build {target.__qualname__} from JSON data: {exc}"
        raise SerializationError(msg, cause=exc) from exc
