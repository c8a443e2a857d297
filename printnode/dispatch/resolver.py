"""
Endpoint Resolver

Maps entity types to URLs and composes sub-resource paths.

Segments are joined with a single "/" and are NOT percent-encoded. Ids,
tag names and other segments must already be URL-safe.
"""

from __future__ import annotations

from typing import Any

from printnode.config.endpoints import EndpointConfig
from printnode.schemas.errors import ConfigurationError


def join_path(base: str, *segments: Any) -> str:
    """Append segments to a URL, one "/" between each."""
    url = base
    for segment in segments:
        url = f"{url}/{segment}"
    return url


def with_query(url: str, params: dict[str, Any]) -> str:
    """Append a query string. Values are written as-is."""
    if not params:
        return url
    query = "&".join(f"{name}={value}" for name, value in params.items())
    return f"{url}?{query}"


class EndpointResolver:
    """
    Resolves URLs against one EndpointConfig.

    Usage:
        resolver = EndpointResolver(EndpointConfig())
        resolver.entity_url("Computer", 12)
        # "https://api.printnode.com/computers/12"
        resolver.related_url("Computer", 12, "Printer")
        # "https://api.printnode.com/computers/12/printers"
    """

    def __init__(self, config: EndpointConfig) -> None:
        self.config = config

    @property
    def api_url(self) -> str:
        return self.config.api_url

    def path_for(self, type_id: str) -> str:
        descriptor = self.config.descriptor(type_id)
        if descriptor is None or descriptor.path is None:
            raise ConfigurationError(
                f'Missing endpoint URL for entity type "{type_id}"',
                type_id=type_id,
            )
        return descriptor.path

    def base_url(self, type_id: str) -> str:
        """Full base URL for an entity type."""
        return self.api_url + self.path_for(type_id)

    def entity_url(self, type_id: str, resource_id: Any = None) -> str:
        """`base/id`, or just `base` when no id is given."""
        base = self.base_url(type_id)
        if resource_id is None:
            return base
        return join_path(base, resource_id)

    def related_url(
        self,
        parent_type: str,
        parent_id: Any,
        child_type: str,
        *segments: Any,
    ) -> str:
        """`base(parent)/parentId/childPath/...segments`."""
        child_path = self.path_for(child_type).strip("/")
        return join_path(self.base_url(parent_type), parent_id, child_path, *segments)

    def fixed_url(self, path: str, query: dict[str, Any] | None = None) -> str:
        """URL for a path that is not tied to an entity type."""
        return with_query(self.api_url + path, query or {})

    @staticmethod
    def paginate(url: str, offset: int, limit: int) -> str:
        return with_query(url, {"offset": offset, "limit": limit})
