"""
Receipt Models

Schemas for recording round-trips to the PrintNode API. A receipt keeps
what was asked, what came back, and how long it took, without storing
credentials.
"""

from __future__ import annotations

import hashlib
import json
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


def hash_canonical(data: Any) -> str:
    """SHA-256 of the canonical JSON form, 0x-prefixed."""
    encoded = json.dumps(data, sort_keys=True, separators=(",", ":"), default=str)
    return "0x" + hashlib.sha256(encoded.encode("utf-8")).hexdigest()


def hash_bytes(data: bytes) -> str:
    return "0x" + hashlib.sha256(data).hexdigest()


class ReceiptTiming(BaseModel):
    """
    Timing information for a receipt.

    Excluded from hashing.
    """

    model_config = ConfigDict(extra="forbid")

    started_at: Optional[datetime] = Field(
        default=None,
        description="When the request started",
    )
    ended_at: Optional[datetime] = Field(
        default=None,
        description="When the request completed",
    )
    duration_ms: Optional[float] = Field(
        default=None,
        description="Duration in milliseconds",
    )


class HTTPReceipt(BaseModel):
    """
    Receipt for one HTTP round-trip.
    """

    model_config = ConfigDict(extra="forbid")

    receipt_id: str = Field(
        ...,
        description="Unique identifier for this receipt",
    )
    method: str = Field(
        ...,
        description="HTTP method (GET, POST, etc.)",
    )
    url: str = Field(
        ...,
        description="Request URL",
    )
    request: dict[str, Any] = Field(
        ...,
        description="Request summary (no credentials)",
    )
    status_code: Optional[int] = Field(
        default=None,
        description="Response status code",
    )
    response_size: Optional[int] = Field(
        default=None,
        description="Response body length in bytes",
    )
    request_hash: Optional[str] = Field(
        default=None,
        description="Hash of the canonical request (0x-prefixed)",
    )
    response_hash: Optional[str] = Field(
        default=None,
        description="Hash of the response body (0x-prefixed)",
    )
    timing: ReceiptTiming = Field(
        default_factory=ReceiptTiming,
        description="Timing metadata",
    )
    error: Optional[str] = Field(
        default=None,
        description="Error message if the round-trip failed",
    )

    @property
    def is_successful(self) -> bool:
        """Completed without a transport error and with status 200."""
        return self.error is None and self.status_code == 200
