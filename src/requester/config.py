r"""Configuration dataclass and defaults for the request executor.

The defaults are held by an explicitly constructed ``ClientConfig``
object passed to the helpers, instead of a process-wide default
client.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BACKOFF_DELAY",
    "DEFAULT_JSON_RETRIES",
    "DEFAULT_METHOD",
    "DEFAULT_RETRIES",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "JSON_CONTENT_TYPE",
    "ClientConfig",
]

from dataclasses import dataclass, field, replace
from typing import Any

from requester.core.validation import (
    validate_backoff_delay,
    validate_retries,
    validate_timeout,
)

# HTTP method used when the request does not set one
DEFAULT_METHOD = "GET"

# Default timeout in seconds for each attempt
DEFAULT_TIMEOUT = 10.0

# Default number of attempts for raw requests and verb helpers
# One attempt means no retry at all
DEFAULT_RETRIES = 1

# Default number of attempts for JSON requests
DEFAULT_JSON_RETRIES = 2

# Base delay in seconds of the linear backoff between attempts
# Wait time = backoff_delay * (attempt + 1): 0.5s, 1.0s, 1.5s, ...
DEFAULT_BACKOFF_DELAY = 0.5

DEFAULT_USER_AGENT = "python-requester"

JSON_CONTENT_TYPE = "application/json"


@dataclass
class ClientConfig:
    """Configuration for the request executor and its helpers.

    Args:
        timeout: Maximum seconds to wait for each attempt. Must be > 0.
        retries: Number of attempts for raw requests and verb helpers.
            Must be >= 1.
        json_retries: Number of attempts for JSON requests. Must be >= 1.
        backoff_delay: Base delay in seconds of the linear backoff
            between attempts. Must be >= 0.
        user_agent: The ``User-Agent`` header set on fresh clients.
        headers: Extra headers set on fresh clients. Request headers
            are applied on top of them.

    Example:
        ```pycon
        >>> from requester.config import ClientConfig
        >>> config = ClientConfig()
        >>> config.timeout
        10.0
        >>> config.retries, config.json_retries
        (1, 2)
        >>> merged = config.merge(retries=3)
        >>> merged.retries
        3
        >>> config.retries
        1

        ```
    """

    timeout: float = DEFAULT_TIMEOUT
    retries: int = DEFAULT_RETRIES
    json_retries: int = DEFAULT_JSON_RETRIES
    backoff_delay: float = DEFAULT_BACKOFF_DELAY
    user_agent: str = DEFAULT_USER_AGENT
    headers: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_timeout(self.timeout)
        validate_retries(self.retries)
        validate_retries(self.json_retries, name="json_retries")
        validate_backoff_delay(self.backoff_delay)

    def merge(self, **overrides: Any) -> ClientConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied. The current
        instance is left unchanged.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ClientConfig instance with overrides applied.

        Example:
            ```pycon
            >>> from requester.config import ClientConfig
            >>> config = ClientConfig(timeout=5.0)
            >>> config.merge(timeout=None, retries=4)
            ClientConfig(timeout=5.0, retries=4, json_retries=2, backoff_delay=0.5, user_agent='python-requester', headers={})

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def default_headers(self) -> dict[str, str]:
        """Return the headers a fresh client starts with.

        Returns:
            The ``User-Agent`` header followed by the extra headers.
            An extra ``User-Agent`` header overrides ``user_agent``.
        """
        return {"User-Agent": self.user_agent, **self.headers}
