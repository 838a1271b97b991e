r"""Parameter validation utilities for the request executor.

The functions raise ``ValueError`` so invalid parameters are reported
before any network activity.
"""

from __future__ import annotations

__all__ = ["validate_backoff_delay", "validate_retries", "validate_timeout"]


def validate_timeout(timeout: float, *, allow_zero: bool = False) -> None:
    """Validate a timeout expressed in seconds.

    Args:
        timeout: Maximum seconds to wait for the server response.
        allow_zero: If ``True``, ``0`` is accepted. It is used for the
            fields where zero means "use the default value".

    Raises:
        ValueError: If ``timeout`` is negative, or zero when
            ``allow_zero`` is ``False``.

    Example:
        ```pycon
        >>> from requester.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(0, allow_zero=True)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if timeout < 0 or (timeout == 0 and not allow_zero):
        msg = f"timeout must be {'>=' if allow_zero else '>'} 0, got {timeout}"
        raise ValueError(msg)


def validate_retries(retries: int, *, name: str = "retries", allow_zero: bool = False) -> None:
    """Validate an attempt count.

    Args:
        retries: The number of attempts. One means a single attempt
            without any retry.
        name: The parameter name used in the error message.
        allow_zero: If ``True``, ``0`` is accepted. It is used for the
            fields where zero means "use the default value".

    Raises:
        ValueError: If ``retries`` is negative, or zero when
            ``allow_zero`` is ``False``.

    Example:
        ```pycon
        >>> from requester.core.validation import validate_retries
        >>> validate_retries(3)
        >>> validate_retries(0, allow_zero=True)

        ```
    """
    minimum = 0 if allow_zero else 1
    if retries < minimum:
        msg = f"{name} must be >= {minimum}, got {retries}"
        raise ValueError(msg)


def validate_backoff_delay(backoff_delay: float) -> None:
    """Validate the base delay of the linear backoff.

    Args:
        backoff_delay: The base delay in seconds. Must be >= 0.

    Raises:
        ValueError: If ``backoff_delay`` is negative.
    """
    if backoff_delay < 0:
        msg = f"backoff_delay must be >= 0, got {backoff_delay}"
        raise ValueError(msg)
