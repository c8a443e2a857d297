"""
Entity Models

Typed domain objects decoded from PrintNode API response bodies.

Decoding is structural: unknown keys are ignored and missing keys default
to None, so the service can add fields without breaking older clients.

Some entities shape their own requests. The dispatcher looks for these
optional capabilities:
- HasEndpointArg: supplies a path suffix appended to the entity endpoint
- FormatsForCreate: supplies the POST payload
- FormatsForUpdate: supplies the PATCH payload
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional, Protocol, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# =============================================================================
# Capabilities
# =============================================================================

@runtime_checkable
class HasEndpointArg(Protocol):
    """Entity that addresses itself with a suffix under its endpoint."""

    def endpoint_arg(self) -> Optional[str]:
        ...


@runtime_checkable
class FormatsForCreate(Protocol):
    """Entity that builds its own creation payload."""

    def for_create(self) -> Any:
        ...


@runtime_checkable
class FormatsForUpdate(Protocol):
    """Entity that builds its own update payload."""

    def for_update(self) -> Any:
        ...


# =============================================================================
# Base
# =============================================================================

class Entity(BaseModel):
    """
    Base class for all decoded domain objects.

    Field names are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    entity_type: ClassVar[str] = ""

    def to_payload(self) -> dict[str, Any]:
        """Serialize with wire names, dropping unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


# =============================================================================
# Downloads
# =============================================================================

class Download(Entity):
    """A downloadable client build."""

    entity_type: ClassVar[str] = "Download"

    edition: Optional[str] = None
    version: Optional[str] = None
    os: Optional[str] = None
    filename: Optional[str] = None
    filesize: Optional[int] = None
    sha1: Optional[str] = None
    release_timestamp: Optional[str] = None
    url: Optional[str] = None


class Client(Download):
    """A client build that can be enabled or disabled for the account."""

    entity_type: ClassVar[str] = "Client"

    id: Optional[int] = None
    enabled: Optional[bool] = None

    def endpoint_arg(self) -> Optional[str]:
        return None if self.id is None else str(self.id)

    def for_update(self) -> dict[str, Any]:
        return {"enabled": self.enabled}


# =============================================================================
# Account
# =============================================================================

class ApiKey(Entity):
    """An API key, addressed by its description."""

    entity_type: ClassVar[str] = "ApiKey"

    description: Optional[str] = None
    key: Optional[str] = None

    def endpoint_arg(self) -> Optional[str]:
        return self.description

    def for_create(self) -> None:
        # The description in the path is the whole request.
        return None


class Tag(Entity):
    """An account tag. The body of a write is the bare tag value."""

    entity_type: ClassVar[str] = "Tag"

    name: Optional[str] = None
    value: Optional[Any] = None

    def endpoint_arg(self) -> Optional[str]:
        return self.name

    def for_create(self) -> Any:
        return self.value

    def for_update(self) -> Any:
        return self.value


class Account(Entity):
    """A (child) account."""

    entity_type: ClassVar[str] = "Account"

    id: Optional[int] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    creator_ref: Optional[str] = None
    api_keys: Optional[Any] = Field(default=None, alias="ApiKeys")
    tags: Optional[Any] = Field(default=None, alias="Tags")

    def _account_fields(self) -> dict[str, Any]:
        return self.model_dump(
            by_alias=True,
            exclude_none=True,
            exclude={"id", "api_keys", "tags"},
            mode="json",
        )

    def for_create(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"Account": self._account_fields()}
        if self.api_keys:
            payload["ApiKeys"] = self.api_keys
        if self.tags:
            payload["Tags"] = self.tags
        return payload

    def for_update(self) -> dict[str, Any]:
        return self._account_fields()


class Whoami(Entity):
    """The authenticated (or impersonated) account."""

    entity_type: ClassVar[str] = "Whoami"

    id: Optional[int] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    email: Optional[str] = None
    can_create_sub_accounts: Optional[bool] = None
    creator_email: Optional[str] = None
    creator_ref: Optional[str] = None
    child_accounts: Optional[Any] = None
    credits: Optional[int] = None
    num_computers: Optional[int] = None
    total_prints: Optional[int] = None
    versions: Optional[Any] = None
    connected: Optional[Any] = None
    tags: Optional[Any] = Field(default=None, alias="Tags")
    api_keys: Optional[Any] = Field(default=None, alias="ApiKeys")
    state: Optional[str] = None
    permissions: Optional[Any] = None


# =============================================================================
# Printing
# =============================================================================

class Computer(Entity):
    entity_type: ClassVar[str] = "Computer"

    id: Optional[int] = None
    name: Optional[str] = None
    inet: Optional[str] = None
    inet6: Optional[str] = None
    hostname: Optional[str] = None
    version: Optional[str] = None
    jre: Optional[str] = None
    create_timestamp: Optional[str] = None
    state: Optional[str] = None


class Printer(Entity):
    entity_type: ClassVar[str] = "Printer"

    id: Optional[int] = None
    computer: Optional[Computer] = None
    name: Optional[str] = None
    description: Optional[str] = None
    capabilities: Optional[Any] = None
    is_default: Optional[bool] = Field(default=None, alias="default")
    create_timestamp: Optional[str] = None
    state: Optional[str] = None


class PrintJob(Entity):
    """
    A print job.

    When creating, `printer` may be a Printer or a bare printer id; the
    payload always carries `printerId`.
    """

    entity_type: ClassVar[str] = "PrintJob"

    id: Optional[int] = None
    printer: Optional[Union[Printer, int]] = None
    title: Optional[str] = None
    content_type: Optional[str] = None
    source: Optional[str] = None
    content: Optional[str] = None
    options: Optional[dict[str, Any]] = None
    qty: Optional[int] = None
    expire_after: Optional[int] = None
    authentication: Optional[Any] = None
    create_timestamp: Optional[str] = None
    state: Optional[str] = None

    @property
    def printer_id(self) -> Optional[int]:
        if isinstance(self.printer, Printer):
            return self.printer.id
        return self.printer

    def endpoint_arg(self) -> Optional[str]:
        return None if self.id is None else str(self.id)

    def for_create(self) -> dict[str, Any]:
        payload = self.model_dump(
            by_alias=True,
            exclude_none=True,
            exclude={"id", "printer", "create_timestamp", "state"},
            mode="json",
        )
        payload["printerId"] = self.printer_id
        return payload


class State(Entity):
    """One state transition of a print job."""

    entity_type: ClassVar[str] = "State"

    print_job_id: Optional[int] = None
    state: Optional[str] = None
    message: Optional[str] = None
    data: Optional[Any] = None
    client_version: Optional[str] = None
    create_timestamp: Optional[str] = None
    age: Optional[int] = None


ENTITY_MODELS: tuple[type[Entity], ...] = (
    Client,
    Download,
    ApiKey,
    Account,
    Tag,
    Whoami,
    Computer,
    Printer,
    PrintJob,
    State,
)
