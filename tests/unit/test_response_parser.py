"""
Response Parser Unit Tests
Tests for printnode/http/parser.py
"""

import pytest

from printnode.http.parser import RawResponse, parse_response
from printnode.schemas.errors import MalformedResponse


class TestParseResponse:
    """Tests for parse_response()."""

    def test_simple_json_response(self):
        raw = b'HTTP/1.1 200 OK\r\nContent-Type: application/json\r\n\r\n{"a":1}'
        response = parse_response(raw)

        assert response.status_code == 200
        assert response.status_message == "OK"
        assert response.headers["Content-Type"] == "application/json"
        assert response.body == b'{"a":1}'
        assert response.json() == {"a": 1}

    def test_header_lookup_is_case_insensitive(self):
        raw = b"HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\n\r\nhi"
        response = parse_response(raw)

        assert response.header("content-type") == "text/plain"
        assert response.headers["CONTENT-TYPE"] == "text/plain"

    def test_repeated_header_keeps_last_value(self):
        raw = b"HTTP/1.1 200 OK\r\nX-Seq: 1\r\nx-seq: 2\r\n\r\n"
        response = parse_response(raw)

        assert response.header("X-Seq") == "2"

    def test_header_values_are_trimmed(self):
        raw = b"HTTP/1.1 200 OK\r\nX-Pad:    spaced   \r\n\r\n"
        response = parse_response(raw)

        assert response.header("X-Pad") == "spaced"

    def test_header_value_may_contain_colons(self):
        raw = b"HTTP/1.1 200 OK\r\nLocation: https://example.com:8443/x\r\n\r\n"
        response = parse_response(raw)

        assert response.header("Location") == "https://example.com:8443/x"

    def test_multi_word_status_message(self):
        raw = b"HTTP/1.1 404 Not Found\r\n\r\n"
        response = parse_response(raw)

        assert response.status_code == 404
        assert response.status_message == "Not Found"
        assert response.body == b""

    def test_status_line_without_message(self):
        response = parse_response(b"HTTP/2 204\r\n\r\n")

        assert response.status_code == 204
        assert response.status_message == ""
        assert response.http_version == "2"

    def test_body_containing_blank_lines_is_kept_whole(self):
        body = b"line one\r\n\r\nline two"
        raw = b"HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\n\r\n" + body
        response = parse_response(raw)

        assert response.body == body

    def test_redirect_chain_keeps_last_header_block(self):
        raw = (
            b"HTTP/1.1 301 Moved Permanently\r\n"
            b"Location: https://api.printnode.com/whoami\r\n"
            b"X-Hop: first\r\n"
            b"\r\n"
            b"HTTP/1.1 200 OK\r\n"
            b"Content-Type: application/json\r\n"
            b"\r\n"
            b'{"id": 7}'
        )
        response = parse_response(raw)

        assert response.status_code == 200
        assert response.header("X-Hop") is None
        assert response.header("Content-Type") == "application/json"
        assert response.json() == {"id": 7}

    def test_interim_continue_block_is_skipped(self):
        raw = b"HTTP/1.1 100 Continue\r\n\r\nHTTP/1.1 201 Created\r\n\r\n{}"
        response = parse_response(raw)

        assert response.status_code == 201
        assert response.body == b"{}"

    def test_headers_without_boundary(self):
        response = parse_response(b"HTTP/1.1 204 No Content\r\nX-A: b\r\n")

        assert response.status_code == 204
        assert response.header("X-A") == "b"
        assert response.body == b""

    def test_url_is_attached_for_diagnostics(self):
        response = parse_response(b"HTTP/1.1 200 OK\r\n\r\n", url="https://x/y")

        assert response.url == "https://x/y"


class TestMalformedResponses:
    """parse_response() rejects what it cannot frame."""

    def test_empty_stream(self):
        with pytest.raises(MalformedResponse):
            parse_response(b"")

    def test_missing_status_line(self):
        with pytest.raises(MalformedResponse, match="status line"):
            parse_response(b"Content-Type: text/plain\r\n\r\nbody")

    def test_garbage_status_line(self):
        with pytest.raises(MalformedResponse):
            parse_response(b"HTTP/1.1 abc OK\r\n\r\n")

    def test_header_line_without_separator(self):
        with pytest.raises(MalformedResponse, match="separator"):
            parse_response(b"HTTP/1.1 200 OK\r\nnot-a-header\r\n\r\n")

    def test_invalid_json_body(self):
        response = parse_response(b"HTTP/1.1 200 OK\r\n\r\n{not json")
        with pytest.raises(MalformedResponse, match="JSON"):
            response.json()


class TestRawResponse:
    """Tests for RawResponse helpers and re-serialization."""

    def test_ok_is_status_200_only(self):
        assert RawResponse(200, "OK").ok
        assert not RawResponse(201, "Created").ok
        assert not RawResponse(500, "Internal Server Error").ok

    def test_reparse_of_serialized_response_is_identical(self):
        raw = (
            b"HTTP/1.1 403 Forbidden\r\n"
            b"Content-Type: application/json\r\n"
            b"X-Request-Id: abc-123\r\n"
            b"\r\n"
            b'{"code": "Forbidden", "message": "nope"}'
        )
        first = parse_response(raw)
        second = parse_response(first.to_bytes())

        assert second == first
        assert second.headers == first.headers
        assert second.to_bytes() == first.to_bytes()

    def test_reparse_without_message_or_headers(self):
        first = parse_response(b"HTTP/1.1 200\r\n\r\n[]")
        assert parse_response(first.to_bytes()) == first

    def test_headers_are_read_only(self):
        response = parse_response(b"HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\n\r\n")

        with pytest.raises(TypeError):
            response.headers["Content-Type"] = "application/json"
        assert response.header("content-type") == "text/plain"

    def test_response_is_not_hashable(self):
        with pytest.raises(TypeError):
            hash(RawResponse(200, "OK"))

    def test_constructed_headers_are_copied(self):
        source = {"X-Trace": "1"}
        response = RawResponse(200, "OK", headers=source)
        source["X-Trace"] = "2"

        assert response.headers["x-trace"] == "1"
