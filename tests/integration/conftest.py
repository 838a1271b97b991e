from __future__ import annotations

import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


class EchoHandler(BaseHTTPRequestHandler):
    r"""Echo the received request as JSON.

    ``/status/<code>`` answers with the given status code and counts the
    requests it received.
    """

    hits: dict[str, int] = {}

    def _handle(self) -> None:
        self.hits[self.path] = self.hits.get(self.path, 0) + 1
        length = int(self.headers.get("Content-Length", 0))
        body = self.rfile.read(length) if length else b""
        status = 200
        if self.path.startswith("/status/"):
            status = int(self.path.rsplit("/", 1)[-1])
        payload = json.dumps(
            {
                "method": self.command,
                "path": self.path,
                "headers": {k.lower(): v for k, v in self.headers.items()},
                "body": body.decode("utf-8"),
            }
        ).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(payload)

    do_GET = do_POST = do_PUT = do_PATCH = do_DELETE = do_OPTIONS = do_HEAD = _handle

    def log_message(self, format: str, *args: object) -> None:  # noqa: A002
        pass


@pytest.fixture
def server_url() -> Generator[str, None, None]:
    """Start a local HTTP server echoing the requests."""
    EchoHandler.hits = {}
    server = ThreadingHTTPServer(("127.0.0.1", 0), EchoHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()


@pytest.fixture
def hits(server_url: str) -> dict[str, int]:
    """Return the number of requests received per path."""
    return EchoHandler.hits


@pytest.fixture
def refused_url() -> str:
    """Return a URL where the connection is refused."""
    server = ThreadingHTTPServer(("127.0.0.1", 0), EchoHandler)
    port = server.server_address[1]
    server.server_close()
    return f"http://127.0.0.1:{port}/fail"


@pytest.fixture(autouse=True)
def _no_proxy(monkeypatch: pytest.MonkeyPatch) -> None:
    """Send the requests to the local server without proxy."""
    for name in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY"):
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(name.lower(), raising=False)
