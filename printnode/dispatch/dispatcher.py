"""
Request Dispatcher

Resolves an endpoint, performs one blocking round-trip, parses the raw
response, enforces the status contract, and decodes entities.

A dispatcher is not safe for concurrent mutation: use one instance per
thread, or serialize access to a shared one.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Optional, TYPE_CHECKING

from printnode.config.endpoints import EndpointConfig
from printnode.credentials import ApiKeyCredentials, Credentials
from printnode.http.parser import RawResponse, parse_response
from printnode.http.transport import DEFAULT_TIMEOUT, RequestsTransport, Transport
from printnode.schemas.entities import (
    Entity,
    FormatsForCreate,
    FormatsForUpdate,
    HasEndpointArg,
)
from printnode.schemas.errors import (
    ConfigurationError,
    HttpFailure,
    InvalidArgument,
    PreconditionFailed,
    UnknownOperation,
)

from .factory import EntityFactory
from .resolver import EndpointResolver, join_path
from .results import EntityResult, RawResult

if TYPE_CHECKING:
    from printnode.config.runtime import ClientConfig
    from printnode.receipts import ReceiptRecorder

logger = logging.getLogger(__name__)

CHILD_BY_ID_HEADER = "X-Child-Account-By-Id"
CHILD_BY_EMAIL_HEADER = "X-Child-Account-By-Email"
ACCEPT_ENCODING = "gzip, deflate"

TAG_PATH = "/account/tag"
ACCOUNT_PATH = "/account/"
CLIENT_KEY_PATH = "/client/key"

MAX_RELATED_SEGMENTS = 2


@dataclass
class RequestContext:
    """Per-client state read by every call."""
    api_url: str
    offset: int = 0
    limit: int = 10
    child_account: Optional[tuple[str, str]] = None


def _non_negative_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise InvalidArgument(f"{name} should be a number", argument=name)
    if isinstance(value, int):
        if value < 0:
            raise InvalidArgument(f"{name} should not be negative", argument=name)
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    raise InvalidArgument(f"{name} should be a number, got {value!r}", argument=name)


def _scalar_id(value: Any, operation: str) -> Any:
    """Ids are plain strings or ints."""
    if isinstance(value, bool) or not isinstance(value, (int, str)) or value == "":
        raise InvalidArgument(
            f"Invalid argument passed to {operation}. Expecting a string or int id, "
            f"got {type(value).__name__}",
            argument="id",
        )
    return value


def _header_value(value: str, name: str) -> str:
    """Header values must be single-line Latin-1 text."""
    if any(c in value for c in "\r\n\0"):
        raise InvalidArgument(f"{name} must not contain line breaks", argument=name)
    try:
        value.encode("latin-1")
    except UnicodeEncodeError as e:
        raise InvalidArgument(
            f"{name} cannot be sent as a header value: {e.reason}",
            argument=name,
        ) from e
    return value


def _given(*values: Any) -> tuple[Any, ...]:
    return tuple(v for v in values if v is not None)


class RequestDispatcher:
    """
    Client for the PrintNode API.

    Usage:
        dispatcher = RequestDispatcher(ApiKeyCredentials("my-key"))

        for computer in dispatcher.get_computers():
            print(computer.name)

        printers = dispatcher.get("PrintersByComputers", 12)
        dispatcher.create(PrintJob(printer=34, title="hello", content_type="raw_base64", content="..."))
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        endpoints: Optional[EndpointConfig] = None,
        transport: Optional[Transport] = None,
        timeout: float = DEFAULT_TIMEOUT,
        offset: Any = 0,
        limit: Any = 10,
        recorder: Optional["ReceiptRecorder"] = None,
    ) -> None:
        """
        Initialize the dispatcher.

        Args:
            credentials: Credentials rendered into HTTP Basic auth
            endpoints: Endpoint and operation tables (defaults to the public API)
            transport: Transport executing requests (defaults to RequestsTransport)
            timeout: Per-call timeout in seconds
            offset: Initial pagination offset
            limit: Initial pagination limit
            recorder: Receipt recorder for audit logging
        """
        self.credentials = credentials
        self.endpoints = endpoints or EndpointConfig()
        self.resolver = EndpointResolver(self.endpoints)
        self.factory = EntityFactory(self.endpoints)
        self.transport = transport or RequestsTransport()
        self.timeout = timeout
        self.recorder = recorder
        self.context = RequestContext(api_url=self.endpoints.api_url)
        self.set_offset(offset)
        self.set_limit(limit)

    @classmethod
    def from_config(
        cls,
        config: "ClientConfig",
        *,
        transport: Optional[Transport] = None,
        recorder: Optional["ReceiptRecorder"] = None,
    ) -> "RequestDispatcher":
        """Build a dispatcher from a ClientConfig."""
        if not config.api_key:
            raise ConfigurationError("No API key configured (set PRINTNODE_API_KEY)")

        dispatcher = cls(
            ApiKeyCredentials(config.api_key),
            endpoints=EndpointConfig().with_api_url(config.api_url),
            transport=transport or RequestsTransport(
                verify=config.verify_ssl,
                proxy=config.proxy,
                user_agent=config.user_agent,
            ),
            timeout=config.timeout,
            offset=config.offset,
            limit=config.limit,
            recorder=recorder,
        )
        if config.child_account_id:
            dispatcher.impersonate_by_id(config.child_account_id)
        elif config.child_account_email:
            dispatcher.impersonate_by_email(config.child_account_email)
        return dispatcher

    # -------------------------------------------------------------------------
    # Request context
    # -------------------------------------------------------------------------

    @property
    def offset(self) -> int:
        return self.context.offset

    @property
    def limit(self) -> int:
        return self.context.limit

    def set_offset(self, offset: Any) -> None:
        """Set the offset for GET requests."""
        self.context.offset = _non_negative_int(offset, "offset")

    def set_limit(self, limit: Any) -> None:
        """Set the limit for GET requests."""
        self.context.limit = _non_negative_int(limit, "limit")

    def impersonate_by_id(self, account_id: Any) -> None:
        """Act on behalf of a child account, addressed by id."""
        account_id = _scalar_id(account_id, "impersonate_by_id")
        value = _header_value(str(account_id), "account_id")
        self.context.child_account = (CHILD_BY_ID_HEADER, value)

    def impersonate_by_email(self, email: str) -> None:
        """Act on behalf of a child account, addressed by email."""
        if not isinstance(email, str) or not email:
            raise InvalidArgument("email should be a non-empty string", argument="email")
        self.context.child_account = (CHILD_BY_EMAIL_HEADER, _header_value(email, "email"))

    def clear_impersonation(self) -> None:
        self.context.child_account = None

    @property
    def impersonating(self) -> bool:
        return self.context.child_account is not None

    # -------------------------------------------------------------------------
    # Round-trip
    # -------------------------------------------------------------------------

    def _headers(self, has_body: bool) -> dict[str, str]:
        headers = {
            "Authorization": self.credentials.basic_auth_header(),
            "Accept-Encoding": ACCEPT_ENCODING,
        }
        if has_body:
            headers["Content-Type"] = "application/json"
        if self.context.child_account:
            name, value = self.context.child_account
            headers[name] = value
        return headers

    def _round_trip(self, method: str, url: str, payload: Any = None) -> RawResponse:
        body = None if payload is None else json.dumps(payload).encode("utf-8")
        headers = self._headers(body is not None)

        receipt = None
        if self.recorder:
            receipt = self.recorder.start(method=method, url=url, headers=headers, body=body)

        started = time.monotonic()
        try:
            raw = self.transport.send(
                method,
                url,
                headers=headers,
                body=body,
                timeout=self.timeout,
            )
            response = parse_response(raw, url=url)
        except Exception as e:
            logger.debug(f"{method} {url} failed: {e}")
            if receipt and self.recorder:
                self.recorder.complete(receipt, error=str(e))
            raise

        elapsed_ms = (time.monotonic() - started) * 1000
        logger.debug(f"{method} {url} -> {response.status_code} ({elapsed_ms:.0f} ms)")
        if receipt and self.recorder:
            self.recorder.complete(
                receipt,
                status_code=response.status_code,
                body=response.body,
            )
        return response

    @staticmethod
    def _expect_ok(response: RawResponse) -> RawResponse:
        if response.status_code != 200:
            logger.warning(
                f"{response.url} returned {response.status_code} {response.status_message}"
            )
            raise HttpFailure(response)
        return response

    def _get_entities(self, type_id: str, url: str) -> EntityResult:
        url = self.resolver.paginate(url, self.context.offset, self.context.limit)
        response = self._expect_ok(self._round_trip("GET", url))
        entities = self.factory.from_response(type_id, response)
        return EntityResult(type_id=type_id, entities=tuple(entities), response=response)

    def _require_type(self, type_id: str) -> None:
        if self.endpoints.descriptor(type_id) is None:
            raise UnknownOperation(f'Unknown entity type "{type_id}"', name=type_id)

    # -------------------------------------------------------------------------
    # Entity lookups
    # -------------------------------------------------------------------------

    def get_by_type(self, type_id: str, resource_id: Any = None) -> EntityResult:
        """
        GET the collection of a type, or one resource of it.

        Args:
            type_id: Registered entity type, e.g. "Computer"
            resource_id: Optional id (or id set such as "1,2,3")

        Returns:
            EntityResult of `type_id` entities

        Raises:
            UnknownOperation: If the type is not registered
            InvalidArgument: If the id is not a string or int
            HttpFailure: If the status is not 200
        """
        self._require_type(type_id)
        if resource_id is not None:
            resource_id = _scalar_id(resource_id, f"get_by_type({type_id})")
        return self._get_entities(type_id, self.resolver.entity_url(type_id, resource_id))

    def get_related(
        self,
        parent_type: str,
        parent_id: Any,
        child_type: str,
        *segments: Any,
    ) -> EntityResult:
        """GET `child_type` entities under one parent, e.g. printers of a computer."""
        operation = f"get_related({parent_type}, {child_type})"
        if len(segments) > MAX_RELATED_SEGMENTS:
            raise InvalidArgument(f"Too many arguments given to {operation}.")
        self._require_type(parent_type)
        self._require_type(child_type)
        parent_id = _scalar_id(parent_id, operation)
        segments = tuple(_scalar_id(s, operation) for s in segments)
        url = self.resolver.related_url(parent_type, parent_id, child_type, *segments)
        return self._get_entities(child_type, url)

    def get_print_job_states(self, *args: Any) -> EntityResult:
        """States of all print jobs, or of the given print job (set)."""
        if len(args) > 1:
            raise InvalidArgument("Too many arguments given to get_print_job_states.")
        base = self.resolver.base_url("PrintJob")
        if args:
            url = join_path(base, _scalar_id(args[0], "get_print_job_states"), "states")
        else:
            url = join_path(base, "states")
        return self._get_entities("State", url)

    def get(self, name: str, *args: Any) -> EntityResult:
        """
        Look up a named accessor ("Computers", "PrintJobsByPrinters", ...)
        in the operation table and run it.
        """
        op = self.endpoints.operation(name)
        if op is None:
            raise UnknownOperation(
                f"{type(self).__name__} has no operation named {name!r}",
                name=name,
            )

        if op.shape == "related":
            if not args:
                raise InvalidArgument(f"{name} requires a parent id.")
            return self.get_related(op.parent_type, args[0], op.type_id, *args[1:])
        if op.shape == "states":
            return self.get_print_job_states(*args)

        if len(args) > 1:
            raise InvalidArgument(f"Too many arguments given to get {name}.")
        return self.get_by_type(op.type_id, *args)

    def get_clients(self, client_id: Any = None) -> EntityResult:
        return self.get("Clients", *_given(client_id))

    def get_downloads(self, download_id: Any = None) -> EntityResult:
        return self.get("Downloads", *_given(download_id))

    def get_api_keys(self, description: Any = None) -> EntityResult:
        return self.get("ApiKeys", *_given(description))

    def get_account(self, account_id: Any = None) -> EntityResult:
        return self.get("Account", *_given(account_id))

    def get_tags(self, name: Any = None) -> EntityResult:
        return self.get("Tags", *_given(name))

    def get_whoami(self) -> EntityResult:
        return self.get("Whoami")

    def get_computers(self, computer_id: Any = None) -> EntityResult:
        return self.get("Computers", *_given(computer_id))

    def get_printers(self, printer_id: Any = None) -> EntityResult:
        return self.get("Printers", *_given(printer_id))

    def get_print_jobs(self, print_job_id: Any = None) -> EntityResult:
        return self.get("PrintJobs", *_given(print_job_id))

    def get_printers_by_computers(self, computer_id: Any, *segments: Any) -> EntityResult:
        return self.get("PrintersByComputers", computer_id, *segments)

    def get_print_jobs_by_printers(self, printer_id: Any, *segments: Any) -> EntityResult:
        return self.get("PrintJobsByPrinters", printer_id, *segments)

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def _entity_url(self, entity: Entity, operation: str, require_arg: bool = False) -> str:
        if not isinstance(entity, Entity):
            raise InvalidArgument(
                f"Invalid argument type passed to {operation}. "
                f"Expecting Entity got {type(entity).__name__}"
            )
        descriptor = self.endpoints.descriptor_for(type(entity))
        if descriptor is None:
            raise ConfigurationError(
                f'Missing endpoint URL for entity "{type(entity).__name__}"'
            )
        url = self.resolver.base_url(descriptor.type_id)
        if isinstance(entity, HasEndpointArg):
            arg = entity.endpoint_arg()
            if arg is not None:
                url = join_path(url, arg)
            elif require_arg:
                raise InvalidArgument(
                    f"{type(entity).__name__} passed to {operation} does not identify a resource"
                )
        return url

    def create(self, entity: Entity) -> RawResult:
        """POST an entity."""
        url = self._entity_url(entity, "create")
        if isinstance(entity, FormatsForCreate):
            payload = entity.for_create()
        else:
            payload = entity.to_payload()
        return RawResult(self._expect_ok(self._round_trip("POST", url, payload)))

    def update(self, entity: Entity) -> RawResult:
        """PATCH an entity."""
        url = self._entity_url(entity, "update", require_arg=True)
        if isinstance(entity, FormatsForUpdate):
            payload = entity.for_update()
        else:
            payload = entity.to_payload()
        return RawResult(self._expect_ok(self._round_trip("PATCH", url, payload)))

    def remove(self, entity: Entity) -> RawResult:
        """DELETE an entity."""
        url = self._entity_url(entity, "remove", require_arg=True)
        return RawResult(self._expect_ok(self._round_trip("DELETE", url)))

    def delete_tag(self, name: str) -> RawResult:
        """Delete a tag (of the impersonated child account, if any)."""
        if not isinstance(name, str) or not name:
            raise InvalidArgument("tag name should be a non-empty string", argument="name")
        url = join_path(self.resolver.fixed_url(TAG_PATH), name)
        return RawResult(self._expect_ok(self._round_trip("DELETE", url)))

    def delete_account(self) -> RawResult:
        """
        Delete the impersonated child account.

        Raises:
            PreconditionFailed: If no child account is being impersonated
        """
        if self.context.child_account is None:
            raise PreconditionFailed(
                "No child authentication set - cannot delete your own account."
            )
        url = self.resolver.fixed_url(ACCOUNT_PATH)
        return RawResult(self._expect_ok(self._round_trip("DELETE", url)))

    def get_client_key(self, uuid: str, edition: str, version: str) -> RawResult:
        """
        Fetch a client key. The response is returned as-is, whatever its
        status; the caller inspects it.
        """
        url = self.resolver.fixed_url(
            f"{CLIENT_KEY_PATH}/{uuid}",
            {"edition": edition, "version": version},
        )
        return RawResult(self._round_trip("GET", url))
