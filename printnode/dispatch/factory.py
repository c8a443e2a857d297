"""
Entity Factory

Decodes JSON payloads into typed entities.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from printnode.config.endpoints import EndpointConfig
from printnode.http.parser import RawResponse
from printnode.schemas.entities import Entity
from printnode.schemas.errors import ConfigurationError, MalformedResponse


class EntityFactory:
    """
    Builds entities of a registered type from decoded JSON.

    A list payload yields one entity per element; a single object yields
    a one-element list. Unknown keys are ignored and missing keys are left
    unset, but an element that is not a JSON object, or a field whose
    value cannot be coerced, is a MalformedResponse.
    """

    def __init__(self, config: EndpointConfig) -> None:
        self.config = config

    def model_for(self, type_id: str) -> type[Entity]:
        descriptor = self.config.descriptor(type_id)
        if descriptor is None:
            raise ConfigurationError(
                f'No decoder registered for entity type "{type_id}"',
                type_id=type_id,
            )
        return descriptor.model

    def make(self, type_id: str, payload: Any) -> list[Entity]:
        model = self.model_for(type_id)
        if isinstance(payload, list):
            return [self._decode(model, element, index) for index, element in enumerate(payload)]
        if isinstance(payload, dict):
            return [self._decode(model, payload, 0)]
        raise MalformedResponse(
            f"Expected a JSON object or array for {type_id}, got {type(payload).__name__}",
            details={"type_id": type_id},
        )

    def from_response(self, type_id: str, response: RawResponse) -> list[Entity]:
        return self.make(type_id, response.json())

    @staticmethod
    def _decode(model: type[Entity], element: Any, index: int) -> Entity:
        if not isinstance(element, dict):
            raise MalformedResponse(
                f"Element {index} is not a JSON object",
                details={"type_id": model.entity_type, "index": index},
            )
        try:
            return model.model_validate(element)
        except ValidationError as e:
            raise MalformedResponse(
                f"Element {index} does not decode as {model.entity_type}: {e.error_count()} error(s)",
                details={
                    "type_id": model.entity_type,
                    "index": index,
                    "errors": e.errors(include_url=False, include_context=False),
                },
            ) from e
