r"""Shared test helpers serving canned HTTP responses in-process."""

from __future__ import annotations

__all__ = [
    "TEST_URL",
    "FakeClock",
    "FailingStream",
    "RecordingHandler",
    "SlowStream",
    "TrackingStream",
    "create_client",
    "fresh_client_factory",
]

from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

TEST_URL = "https://api.example.com/data"

# Keep a reference to the real class, tests patch ``httpx.Client``
_HttpxClient = httpx.Client


class RecordingHandler:
    r"""Serve canned outcomes to an ``httpx.MockTransport`` and record
    the received requests.

    Each outcome is either a response, or an exception raised by the
    transport. The last outcome is repeated once the others are
    consumed.

    Args:
        *outcomes: The responses or exceptions to serve, in order.
    """

    def __init__(self, *outcomes: httpx.Response | Exception) -> None:
        self.outcomes = list(outcomes)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    @property
    def attempts(self) -> int:
        return len(self.requests)


class TrackingStream(httpx.SyncByteStream):
    r"""Byte stream recording whether it was closed."""

    def __init__(self, content: bytes = b"") -> None:
        self.content = content
        self.closed = False

    def __iter__(self) -> Iterator[bytes]:
        yield self.content

    def close(self) -> None:
        self.closed = True


class FailingStream(TrackingStream):
    r"""Byte stream failing in the middle of the body."""

    def __iter__(self) -> Iterator[bytes]:
        yield b"partial"
        msg = "connection reset while reading"
        raise httpx.ReadError(msg)


class FakeClock:
    r"""Replacement for ``time.monotonic`` advanced by hand."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class SlowStream(TrackingStream):
    r"""Byte stream sending its body in chunks, advancing ``clock`` by
    ``delay`` seconds before each chunk."""

    def __init__(self, chunks: Iterable[bytes], clock: FakeClock, delay: float) -> None:
        self.chunks = list(chunks)
        super().__init__(b"".join(self.chunks))
        self.clock = clock
        self.delay = delay

    def __iter__(self) -> Iterator[bytes]:
        for chunk in self.chunks:
            self.clock.now += self.delay
            yield chunk


def create_client(handler: Callable[[httpx.Request], httpx.Response], **kwargs) -> httpx.Client:
    r"""Create a real ``httpx.Client`` served by ``handler``."""
    return _HttpxClient(transport=httpx.MockTransport(handler), **kwargs)


def fresh_client_factory(
    handler: Callable[[httpx.Request], httpx.Response],
) -> Callable[..., httpx.Client]:
    r"""Return a replacement for ``httpx.Client`` creating clients served
    by ``handler``, keeping the other constructor arguments."""

    def factory(**kwargs) -> httpx.Client:
        return create_client(handler, **kwargs)

    return factory
