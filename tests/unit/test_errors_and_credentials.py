"""Unit tests for the error taxonomy and credential rendering."""

import base64

import pytest

from fixtures import make_raw_response

from printnode.credentials import ApiKeyCredentials, Credentials
from printnode.http.parser import parse_response
from printnode.schemas.errors import (
    ErrorCodes,
    HttpFailure,
    InvalidArgument,
    PrintNodeError,
    PrintNodeException,
    TransportError,
)


class TestErrors:

    def test_exception_to_model_and_back(self):
        exc = InvalidArgument("limit should be a number", argument="limit")

        model = exc.to_error_model()
        assert model.code == ErrorCodes.INVALID_ARGUMENT
        assert model.details == {"argument": "limit"}

        again = model.to_exception()
        assert isinstance(again, PrintNodeException)
        assert again.code == ErrorCodes.INVALID_ARGUMENT
        assert str(again) == "limit should be a number"

    def test_error_model_rejects_unknown_fields(self):
        with pytest.raises(ValueError):
            PrintNodeError(code="X", message="m", extra="nope")

    def test_transport_error_keeps_url(self):
        exc = TransportError("timed out", url="https://api.printnode.com/whoami")
        assert exc.details["url"] == "https://api.printnode.com/whoami"
        assert exc.code == ErrorCodes.TRANSPORT_ERROR

    def test_http_failure_exposes_response(self):
        response = parse_response(
            make_raw_response(503, {"message": "down"}, message="Service Unavailable"),
            url="https://api.printnode.com/printers",
        )

        exc = HttpFailure(response)

        assert str(exc) == "HTTP Error (503): Service Unavailable"
        assert exc.status_code == 503
        assert exc.response.json() == {"message": "down"}
        assert exc.details["url"] == "https://api.printnode.com/printers"

    def test_all_errors_share_a_base(self):
        assert issubclass(HttpFailure, PrintNodeException)
        assert issubclass(TransportError, PrintNodeException)


class TestCredentials:

    def test_username_password(self):
        creds = Credentials("user", "secret")
        assert str(creds) == "user:secret"
        assert creds.basic_auth_header() == "Basic " + base64.b64encode(b"user:secret").decode()
        assert "secret" not in repr(creds)

    def test_api_key_has_empty_password(self):
        creds = ApiKeyCredentials("abc123")
        assert str(creds) == "abc123:"
        assert "abc123" not in repr(creds)

    def test_frozen(self):
        creds = ApiKeyCredentials("abc123")
        with pytest.raises(AttributeError):
            creds.username = "other"
