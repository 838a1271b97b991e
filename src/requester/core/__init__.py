r"""Core shared logic of the request helpers.

``requester.core.http_logic`` holds the logic shared by the HTTP verb
helpers and is imported directly by them.
"""

from __future__ import annotations

__all__ = ["validate_backoff_delay", "validate_retries", "validate_timeout"]

from requester.core.validation import (
    validate_backoff_delay,
    validate_retries,
    validate_timeout,
)
