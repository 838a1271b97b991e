from __future__ import annotations

import pytest

from requester.config import ClientConfig
from requester.method import HttpMethod
from requester.request_spec import RequestSpec

TEST_URL = "https://api.example.com/data"


#################################
#     Tests for RequestSpec     #
#################################


def test_request_spec_defaults() -> None:
    spec = RequestSpec(url=TEST_URL)
    assert spec.method == ""
    assert spec.headers == {}
    assert spec.body == b""
    assert spec.timeout == 0.0
    assert spec.retries == 0


def test_request_spec_resolve_defaults() -> None:
    assert RequestSpec(url=TEST_URL).resolve() == RequestSpec(
        url=TEST_URL, method="GET", timeout=10.0, retries=1
    )


def test_request_spec_resolve_keeps_values() -> None:
    spec = RequestSpec(
        url=TEST_URL,
        method="POST",
        headers={"X-Trace": "1"},
        body=b"data",
        timeout=2.0,
        retries=3,
    )
    assert spec.resolve() == spec


def test_request_spec_resolve_config() -> None:
    resolved = RequestSpec(url=TEST_URL).resolve(ClientConfig(timeout=30.0, retries=4))
    assert resolved.timeout == 30.0
    assert resolved.retries == 4


def test_request_spec_resolve_enum_method() -> None:
    assert RequestSpec(url=TEST_URL, method=HttpMethod.PUT).resolve().method is HttpMethod.PUT


def test_request_spec_resolve_does_not_mutate() -> None:
    spec = RequestSpec(url=TEST_URL)
    spec.resolve()
    assert spec == RequestSpec(url=TEST_URL)


def test_request_spec_negative_timeout() -> None:
    with pytest.raises(ValueError, match=r"timeout must be >= 0, got -1.0"):
        RequestSpec(url=TEST_URL, timeout=-1.0)


def test_request_spec_negative_retries() -> None:
    with pytest.raises(ValueError, match=r"retries must be >= 0, got -2"):
        RequestSpec(url=TEST_URL, retries=-2)
