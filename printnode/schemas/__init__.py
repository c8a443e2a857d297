"""
Schemas

Entity models, request-shaping capabilities, and the error taxonomy.
"""

from .entities import (
    Account,
    ApiKey,
    Client,
    Computer,
    Download,
    ENTITY_MODELS,
    Entity,
    FormatsForCreate,
    FormatsForUpdate,
    HasEndpointArg,
    PrintJob,
    Printer,
    State,
    Tag,
    Whoami,
)
from .errors import (
    ConfigurationError,
    ErrorCodes,
    HttpFailure,
    InvalidArgument,
    MalformedResponse,
    PreconditionFailed,
    PrintNodeError,
    PrintNodeException,
    TransportError,
    UnknownOperation,
)

__all__ = [
    # Entities
    "Entity",
    "ENTITY_MODELS",
    "Account",
    "ApiKey",
    "Client",
    "Computer",
    "Download",
    "PrintJob",
    "Printer",
    "State",
    "Tag",
    "Whoami",
    # Capabilities
    "HasEndpointArg",
    "FormatsForCreate",
    "FormatsForUpdate",
    # Errors
    "ErrorCodes",
    "PrintNodeError",
    "PrintNodeException",
    "TransportError",
    "MalformedResponse",
    "HttpFailure",
    "ConfigurationError",
    "InvalidArgument",
    "UnknownOperation",
    "PreconditionFailed",
]
