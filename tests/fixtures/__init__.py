"""
Test fixtures package for PrintNode client tests.

Usage:
    from fixtures import FakeTransport, make_raw_response

    def test_something():
        transport = FakeTransport().queue(200, [{"id": 1}])
"""

from .http_fixtures import (
    FakeTransport,
    RecordedCall,
    make_raw_response,
)

__all__ = [
    "FakeTransport",
    "RecordedCall",
    "make_raw_response",
]
