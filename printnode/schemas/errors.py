"""
Error Taxonomy

Purpose: Standard error taxonomy for the PrintNode client.
Defines a Pydantic model for structured error reporting and the Python
exceptions raised by dispatch operations.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from printnode.http.parser import RawResponse


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the client."""

    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"
    HTTP_FAILURE = "HTTP_FAILURE"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    UNKNOWN_OPERATION = "UNKNOWN_OPERATION"
    PRECONDITION_FAILED = "PRECONDITION_FAILED"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class PrintNodeError(BaseModel):
    """
    Structured error model.

    Used when an error has to be reported rather than raised, e.g. as JSON
    output from the command line.
    """

    model_config = ConfigDict(extra="forbid")

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.HTTP_FAILURE],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )

    def to_exception(self) -> "PrintNodeException":
        """Convert this error model to a raisable exception."""
        return PrintNodeException(
            message=self.message,
            code=self.code,
            details=self.details,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class PrintNodeException(Exception):
    """
    Base exception for all PrintNode client errors.

    Carries structured error information and can be converted to a
    PrintNodeError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "PRINTNODE_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> PrintNodeError:
        """Convert this exception to a PrintNodeError model."""
        return PrintNodeError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class TransportError(PrintNodeException):
    """Connection, DNS or timeout failure. Never retried."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if url:
            full_details["url"] = url
        super().__init__(
            message=message,
            code=ErrorCodes.TRANSPORT_ERROR,
            details=full_details,
        )


class MalformedResponse(PrintNodeException):
    """Response bytes or body could not be decoded."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.MALFORMED_RESPONSE,
            details=details,
        )


class HttpFailure(PrintNodeException):
    """
    The service answered with a status other than 200.

    The full response is kept so callers can inspect status and body.
    """

    def __init__(self, response: "RawResponse") -> None:
        self.response = response
        super().__init__(
            message=f"HTTP Error ({response.status_code}): {response.status_message}",
            code=ErrorCodes.HTTP_FAILURE,
            details={
                "status_code": response.status_code,
                "status_message": response.status_message,
                "url": response.url,
            },
        )

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def status_message(self) -> str:
        return self.response.status_message


class ConfigurationError(PrintNodeException):
    """No endpoint mapping exists for an entity type."""

    def __init__(
        self,
        message: str,
        type_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if type_id:
            full_details["type_id"] = type_id
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIGURATION_ERROR,
            details=full_details,
        )


class InvalidArgument(PrintNodeException):
    """Bad caller input: wrong arity, wrong id type, bad offset/limit."""

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if argument:
            full_details["argument"] = argument
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_ARGUMENT,
            details=full_details,
        )


class UnknownOperation(PrintNodeException):
    """An accessor name or type id is not in the operation table."""

    def __init__(
        self,
        message: str,
        name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if name:
            full_details["name"] = name
        super().__init__(
            message=message,
            code=ErrorCodes.UNKNOWN_OPERATION,
            details=full_details,
        )


class PreconditionFailed(PrintNodeException):
    """The operation needs client state that is not currently set."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.PRECONDITION_FAILED,
            details=details,
        )
