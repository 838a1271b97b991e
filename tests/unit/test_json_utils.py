from __future__ import annotations

import json
from dataclasses import dataclass

import pytest
from coola.equality import objects_are_equal

from requester.exceptions import SerializationError
from requester.json_utils import encode_json, json_headers, parse_json


@dataclass
class Item:
    id: int
    name: str
    tags: list[str]


#################################
#     Tests for encode_json     #
#################################


def test_encode_json_compact() -> None:
    assert encode_json({"a": 1, "b": [1, 2]}) == b'{"a":1,"b":[1,2]}'


def test_encode_json_matches_json_dumps() -> None:
    payload = {"name": "widget", "price": 12.5, "stock": None, "active": True}
    assert json.loads(encode_json(payload)) == payload


def test_encode_json_unicode() -> None:
    assert encode_json({"city": "Zürich"}) == '{"city":"Zürich"}'.encode()


def test_encode_json_none() -> None:
    assert encode_json(None) == b"null"


def test_encode_json_dataclass() -> None:
    assert encode_json(Item(id=1, name="widget", tags=["a"])) == (
        b'{"id":1,"name":"widget","tags":["a"]}'
    )


def test_encode_json_unserializable() -> None:
    with pytest.raises(SerializationError, match=r"cannot encode payload of type set") as exc_info:
        encode_json({1, 2})
    assert isinstance(exc_info.value.__cause__, TypeError)


def test_encode_json_nan_is_rejected() -> None:
    with pytest.raises(SerializationError, match=r"Out of range float values"):
        encode_json({"value": float("nan")})


################################
#     Tests for parse_json     #
################################


def test_parse_json_no_target() -> None:
    assert objects_are_equal(
        parse_json(b'{"items": [{"id": 1}, {"id": 2}]}'),
        {"items": [{"id": 1}, {"id": 2}]},
    )


def test_parse_json_str() -> None:
    assert parse_json("[1, 2, 3]") == [1, 2, 3]


def test_parse_json_target_dict() -> None:
    assert parse_json(b'{"id": 1}', dict) == {"id": 1}


def test_parse_json_target_list() -> None:
    assert parse_json(b"[1, 2]", list) == [1, 2]


def test_parse_json_target_mismatch() -> None:
    with pytest.raises(SerializationError, match=r"expected JSON data of type dict, got list"):
        parse_json(b"[1, 2]", dict)


def test_parse_json_target_dataclass() -> None:
    assert parse_json(b'{"id": 7, "name": "widget", "tags": ["x"]}', Item) == Item(
        id=7, name="widget", tags=["x"]
    )


def test_parse_json_target_dataclass_missing_field() -> None:
    with pytest.raises(SerializationError, match=r"cannot build Item from JSON data"):
        parse_json(b'{"id": 7}', Item)


def test_parse_json_target_dataclass_not_object() -> None:
    with pytest.raises(SerializationError, match=r"expected a JSON object to build Item, got list"):
        parse_json(b"[7]", Item)


@pytest.mark.parametrize("data", [b"", b"{", b"not json", b"\xff\xfe"])
def test_parse_json_invalid(data: bytes) -> None:
    with pytest.raises(SerializationError, match=r"cannot decode JSON data"):
        parse_json(data)


##################################
#     Tests for json_headers     #
##################################


def test_json_headers_none() -> None:
    assert json_headers() == {"Content-Type": "application/json"}


def test_json_headers_overwrite() -> None:
    assert json_headers({"Content-Type": "text/plain", "Accept": "*/*"}) == {
        "Accept": "*/*",
        "Content-Type": "application/json",
    }


def test_json_headers_overwrite_any_case() -> None:
    assert json_headers({"CONTENT-TYPE": "text/plain"}) == {"Content-Type": "application/json"}


def test_json_headers_copy() -> None:
    headers = {"Content-Type": "text/plain"}
    json_headers(headers)
    assert headers == {"Content-Type": "text/plain"}
