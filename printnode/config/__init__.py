"""
Configuration Module

Endpoint tables and runtime settings for the PrintNode client.
"""

from .endpoints import (
    DEFAULT_API_URL,
    DEFAULT_ENTITY_TYPES,
    DEFAULT_OPERATIONS,
    EndpointConfig,
    EntityTypeDescriptor,
    Operation,
)
from .runtime import ClientConfig

__all__ = [
    "DEFAULT_API_URL",
    "DEFAULT_ENTITY_TYPES",
    "DEFAULT_OPERATIONS",
    "EndpointConfig",
    "EntityTypeDescriptor",
    "Operation",
    "ClientConfig",
]
