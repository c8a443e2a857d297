"""
PrintNode API client.

Usage:
    from printnode import ApiKeyCredentials, RequestDispatcher

    dispatcher = RequestDispatcher(ApiKeyCredentials("my-key"))
    for printer in dispatcher.get_printers():
        print(printer.id, printer.name)
"""

from .config import ClientConfig, EndpointConfig
from .credentials import ApiKeyCredentials, Credentials
from .dispatch import EntityResult, RawResult, RequestDispatcher
from .http import RawResponse, parse_response
from .schemas import (
    ConfigurationError,
    HttpFailure,
    InvalidArgument,
    MalformedResponse,
    PreconditionFailed,
    PrintNodeException,
    TransportError,
    UnknownOperation,
)

__version__ = "0.1.0"

__all__ = [
    "ApiKeyCredentials",
    "Credentials",
    "ClientConfig",
    "EndpointConfig",
    "RequestDispatcher",
    "EntityResult",
    "RawResult",
    "RawResponse",
    "parse_response",
    "PrintNodeException",
    "TransportError",
    "MalformedResponse",
    "HttpFailure",
    "ConfigurationError",
    "InvalidArgument",
    "UnknownOperation",
    "PreconditionFailed",
]
