r"""Utility functions for HTTP response handling and error conversion."""

from __future__ import annotations

__all__ = [
    "handle_response",
    "handle_transport_error",
    "is_success",
    "raise_construction_error",
    "raise_final_error",
    "read_body",
]

from requester.utils.exceptions import (
    handle_transport_error,
    raise_construction_error,
    raise_final_error,
)
from requester.utils.response import handle_response, is_success, read_body
