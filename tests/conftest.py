from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import httpx
import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_response() -> httpx.Response:
    """Create a successful response with a JSON body."""
    return httpx.Response(
        200, content=b'{"status":"ok"}', headers={"Content-Type": "application/json"}
    )


@pytest.fixture
def connect_error() -> httpx.ConnectError:
    """Create the error raised when the connection is refused."""
    return httpx.ConnectError("[Errno 111] Connection refused")
