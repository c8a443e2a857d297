"""
HTTP test fixtures.

Provides canned raw responses and a fake transport that records every
call instead of touching the network.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional

from printnode.schemas.errors import TransportError


def make_raw_response(
    status_code: int = 200,
    body: Any = None,
    *,
    message: str = "OK",
    headers: Optional[dict[str, str]] = None,
) -> bytes:
    """Build a CRLF-framed HTTP/1.1 response. Non-bytes bodies are JSON-encoded."""
    if body is None:
        payload = b""
    elif isinstance(body, bytes):
        payload = body
    else:
        payload = json.dumps(body).encode("utf-8")

    all_headers = {"Content-Type": "application/json"}
    all_headers.update(headers or {})
    lines = [f"HTTP/1.1 {status_code} {message}".rstrip()]
    lines.extend(f"{k}: {v}" for k, v in all_headers.items())
    return "\r\n".join(lines).encode("iso-8859-1") + b"\r\n\r\n" + payload


@dataclass
class RecordedCall:
    method: str
    url: str
    headers: dict[str, str]
    body: Optional[bytes]
    timeout: float

    def json(self) -> Any:
        return json.loads(self.body) if self.body is not None else None


@dataclass
class FakeTransport:
    """
    Transport that replays queued responses in order.

    When the queue is empty it answers 200 with an empty JSON array.
    Queue a TransportError instance to simulate a network failure.
    """
    responses: list[Any] = field(default_factory=list)
    calls: list[RecordedCall] = field(default_factory=list)

    def queue(self, status_code: int = 200, body: Any = None, **kwargs: Any) -> "FakeTransport":
        self.responses.append(make_raw_response(status_code, body, **kwargs))
        return self

    def queue_raw(self, raw: bytes) -> "FakeTransport":
        self.responses.append(raw)
        return self

    def fail(self, message: str = "Connection refused") -> "FakeTransport":
        self.responses.append(TransportError(message))
        return self

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        body: Optional[bytes] = None,
        timeout: float = 4.0,
    ) -> bytes:
        self.calls.append(RecordedCall(method, url, dict(headers), body, timeout))
        if not self.responses:
            return make_raw_response(200, [])
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last_call(self) -> RecordedCall:
        return self.calls[-1]
