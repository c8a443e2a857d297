"""
Response Parser

Turns a raw HTTP/1.x response byte stream into a RawResponse.

The stream is framed the way curl writes it with headers enabled: one
header block per hop of a redirect chain, each terminated by CRLFCRLF,
followed by the final body. Only the last header block is kept.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from requests.structures import CaseInsensitiveDict

from printnode.schemas.errors import MalformedResponse

CRLF = b"\r\n"
HEADER_BOUNDARY = b"\r\n\r\n"
HEADER_ENCODING = "iso-8859-1"

_STATUS_LINE = re.compile(r"^HTTP/(\d+(?:\.\d+)?) (\d{3})(?: (.*))?$")


@dataclass(frozen=True)
class RawResponse:
    """
    Structured decomposition of an HTTP response.

    Header lookups are case-insensitive; a repeated header keeps its last
    value. Headers are a read-only view, and a response is not hashable.
    """
    status_code: int
    status_message: str
    headers: Mapping[str, str] = field(default_factory=CaseInsensitiveDict)
    body: bytes = b""
    http_version: str = "1.1"
    url: str = field(default="", compare=False)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(CaseInsensitiveDict(self.headers)))

    @property
    def ok(self) -> bool:
        """The service's success contract is status 200 only."""
        return self.status_code == 200

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Decode the body as JSON."""
        try:
            return json.loads(self.body)
        except ValueError as e:
            raise MalformedResponse(
                f"Response body is not valid JSON: {e}",
                details={"url": self.url, "status_code": self.status_code},
            ) from e

    def header(self, name: str, default: str | None = None) -> str | None:
        return self.headers.get(name, default)

    def to_bytes(self) -> bytes:
        """Re-serialize as a single HTTP message."""
        status_line = f"HTTP/{self.http_version} {self.status_code}"
        if self.status_message:
            status_line += f" {self.status_message}"
        lines = [status_line]
        lines.extend(f"{name}: {value}" for name, value in self.headers.items())
        head = "\r\n".join(lines).encode(HEADER_ENCODING)
        return head + HEADER_BOUNDARY + self.body


def _parse_header_block(block: bytes) -> tuple[str, int, str, CaseInsensitiveDict]:
    lines = block.decode(HEADER_ENCODING).split("\r\n")

    match = _STATUS_LINE.match(lines[0])
    if not match:
        raise MalformedResponse(
            "No HTTP status line found",
            details={"first_line": lines[0][:200]},
        )
    version, code, message = match.groups()

    headers: CaseInsensitiveDict = CaseInsensitiveDict()
    for line in lines[1:]:
        if not line:
            continue
        name, sep, value = line.partition(":")
        if not sep or not name.strip():
            raise MalformedResponse(
                "Header line has no name/value separator",
                details={"line": line[:200]},
            )
        headers[name.strip()] = value.strip()

    return version, int(code), (message or "").strip(), headers


def _continues(status_code: int, rest: bytes) -> bool:
    """Another header block follows an interim or redirect response."""
    return (status_code < 200 or 300 <= status_code < 400) and rest.startswith(b"HTTP/")


def parse_response(raw: bytes, url: str = "") -> RawResponse:
    """
    Parse a raw response stream.

    Args:
        raw: Status line, headers and body with CRLF line separators
        url: URL the response was fetched from (diagnostics only)

    Returns:
        RawResponse built from the last header block and the body

    Raises:
        MalformedResponse: If no status line is found
    """
    if not raw:
        raise MalformedResponse("Empty response", details={"url": url})

    remaining = raw
    while True:
        block, sep, rest = remaining.partition(HEADER_BOUNDARY)
        if not sep:
            # Headers only, no body.
            block, rest = remaining.rstrip(CRLF), b""
        version, status_code, message, headers = _parse_header_block(block)
        if not _continues(status_code, rest):
            break
        remaining = rest

    return RawResponse(
        status_code=status_code,
        status_message=message,
        headers=headers,
        body=rest,
        http_version=version,
        url=url,
    )
