r"""Linear backoff between the attempts of a request."""

from __future__ import annotations

__all__ = ["LinearBackoff"]

from requester.config import DEFAULT_BACKOFF_DELAY
from requester.core.validation import validate_backoff_delay


class LinearBackoff:
    """Linear backoff strategy.

    Calculates delay as: base_delay * (attempt + 1). The delay is neither
    capped nor jittered.

    Args:
        base_delay: The base delay in seconds (default: 0.5).

    Example:
        ```pycon
        >>> from requester.backoff import LinearBackoff
        >>> backoff = LinearBackoff()
        >>> backoff.calculate(0)  # Before the second attempt
        0.5
        >>> backoff.calculate(1)  # Before the third attempt
        1.0
        >>> backoff.calculate(2)
        1.5

        ```
    """

    def __init__(self, base_delay: float = DEFAULT_BACKOFF_DELAY) -> None:
        validate_backoff_delay(base_delay)
        self.base_delay = base_delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base_delay={self.base_delay})"

    def calculate(self, attempt: int) -> float:
        """Calculate the delay after a failed attempt.

        Args:
            attempt: The index of the failed attempt (0-indexed).

        Returns:
            The delay in seconds before the next attempt.
        """
        return self.base_delay * (attempt + 1)
