"""
Dispatch Module

Endpoint resolution, entity decoding and the request dispatcher.
"""

from .dispatcher import (
    CHILD_BY_EMAIL_HEADER,
    CHILD_BY_ID_HEADER,
    RequestContext,
    RequestDispatcher,
)
from .factory import EntityFactory
from .resolver import EndpointResolver, join_path, with_query
from .results import DispatchResult, EntityResult, RawResult

__all__ = [
    "RequestDispatcher",
    "RequestContext",
    "CHILD_BY_ID_HEADER",
    "CHILD_BY_EMAIL_HEADER",
    "EntityFactory",
    "EndpointResolver",
    "join_path",
    "with_query",
    "DispatchResult",
    "EntityResult",
    "RawResult",
]
