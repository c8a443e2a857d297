"""
Endpoint Configuration

Immutable tables that tie entity types to API paths and accessor names to
entity types. A dispatcher receives one EndpointConfig at construction;
nothing here is process-wide mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

from printnode.schemas.entities import (
    Account,
    ApiKey,
    Client,
    Computer,
    Download,
    Entity,
    PrintJob,
    Printer,
    State,
    Tag,
    Whoami,
)

DEFAULT_API_URL = "https://api.printnode.com"

OperationShape = Literal["collection", "related", "states"]


@dataclass(frozen=True)
class EntityTypeDescriptor:
    """
    An entity type and where it lives.

    `path` is relative to the API URL. A type without a path (such as
    State) can be decoded but not addressed directly.
    """
    type_id: str
    model: type[Entity]
    path: Optional[str] = None


@dataclass(frozen=True)
class Operation:
    """
    Named accessor, e.g. "Computers" or "PrintersByComputers".

    `parent_type` is set for related accessors, which address `type_id`
    under one parent resource.
    """
    name: str
    type_id: str
    shape: OperationShape = "collection"
    parent_type: Optional[str] = None


DEFAULT_ENTITY_TYPES: tuple[EntityTypeDescriptor, ...] = (
    EntityTypeDescriptor("Client", Client, "/download/clients"),
    EntityTypeDescriptor("Download", Download, "/download/client"),
    EntityTypeDescriptor("ApiKey", ApiKey, "/account/apikey"),
    EntityTypeDescriptor("Account", Account, "/account"),
    EntityTypeDescriptor("Tag", Tag, "/account/tag"),
    EntityTypeDescriptor("Whoami", Whoami, "/whoami"),
    EntityTypeDescriptor("Computer", Computer, "/computers"),
    EntityTypeDescriptor("Printer", Printer, "/printers"),
    EntityTypeDescriptor("PrintJob", PrintJob, "/printjobs"),
    EntityTypeDescriptor("State", State),
)

DEFAULT_OPERATIONS: tuple[Operation, ...] = (
    Operation("Clients", "Client"),
    Operation("Downloads", "Download"),
    Operation("ApiKeys", "ApiKey"),
    Operation("Account", "Account"),
    Operation("Tags", "Tag"),
    Operation("Whoami", "Whoami"),
    Operation("Computers", "Computer"),
    Operation("Printers", "Printer"),
    Operation("PrintJobs", "PrintJob"),
    Operation("PrintersByComputers", "Printer", "related", parent_type="Computer"),
    Operation("PrintJobsByPrinters", "PrintJob", "related", parent_type="Printer"),
    Operation("PrintJobStates", "State", "states"),
)


@dataclass(frozen=True)
class EndpointConfig:
    """
    Lookup tables for one dispatcher.

    Usage:
        config = EndpointConfig(api_url="https://api.printnode.com")
        config.descriptor("Computer").path   # "/computers"
        config.operation("Computers").type_id  # "Computer"
    """
    api_url: str = DEFAULT_API_URL
    entity_types: tuple[EntityTypeDescriptor, ...] = DEFAULT_ENTITY_TYPES
    operations: tuple[Operation, ...] = DEFAULT_OPERATIONS
    _by_type: dict[str, EntityTypeDescriptor] = field(init=False, repr=False, compare=False)
    _by_model: dict[type, EntityTypeDescriptor] = field(init=False, repr=False, compare=False)
    _by_name: dict[str, Operation] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "api_url", self.api_url.rstrip("/"))
        # Frozen dataclass: indexes are attached once, never mutated after.
        object.__setattr__(self, "entity_types", tuple(self.entity_types))
        object.__setattr__(self, "operations", tuple(self.operations))
        object.__setattr__(self, "_by_type", {d.type_id: d for d in self.entity_types})
        object.__setattr__(self, "_by_model", {d.model: d for d in self.entity_types})
        object.__setattr__(self, "_by_name", {o.name: o for o in self.operations})

    def descriptor(self, type_id: str) -> Optional[EntityTypeDescriptor]:
        return self._by_type.get(type_id)

    def descriptor_for(self, model: type) -> Optional[EntityTypeDescriptor]:
        """Descriptor registered for exactly this class (subclasses do not match)."""
        return self._by_model.get(model)

    def operation(self, name: str) -> Optional[Operation]:
        return self._by_name.get(name)

    def operation_names(self) -> list[str]:
        return [o.name for o in self.operations]

    def with_api_url(self, api_url: str) -> "EndpointConfig":
        return EndpointConfig(
            api_url=api_url,
            entity_types=self.entity_types,
            operations=self.operations,
        )
