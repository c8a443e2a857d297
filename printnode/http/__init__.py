"""
HTTP Module

Blocking transport and raw response parsing.
"""

from .parser import RawResponse, parse_response
from .transport import DEFAULT_TIMEOUT, RequestsTransport, Transport, render_response

__all__ = [
    "RawResponse",
    "parse_response",
    "Transport",
    "RequestsTransport",
    "render_response",
    "DEFAULT_TIMEOUT",
]
