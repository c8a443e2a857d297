"""
Receipt Recorder

Records every round-trip made by a RequestDispatcher.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Optional

from .models import HTTPReceipt, ReceiptTiming, hash_bytes, hash_canonical

# Headers that never end up in a receipt.
_REDACTED_HEADERS = {"authorization"}


class ReceiptRecorder:
    """
    Records receipts for HTTP round-trips.

    Usage:
        recorder = ReceiptRecorder()
        dispatcher = RequestDispatcher(credentials, recorder=recorder)
        dispatcher.get_computers()

        for receipt in recorder.get_receipts():
            print(receipt.method, receipt.url, receipt.status_code)
    """

    def __init__(self) -> None:
        self._receipts: list[HTTPReceipt] = []
        self._in_progress: dict[str, HTTPReceipt] = {}

    def start(
        self,
        *,
        method: str,
        url: str,
        headers: Optional[dict[str, str]] = None,
        body: Optional[bytes] = None,
    ) -> HTTPReceipt:
        """Start recording a request."""
        request = {
            "method": method,
            "url": url,
            "headers": {
                k: v for k, v in (headers or {}).items()
                if k.lower() not in _REDACTED_HEADERS
            },
            "body_hash": hash_bytes(body) if body is not None else None,
        }

        receipt = HTTPReceipt(
            receipt_id=f"rc_http_{uuid.uuid4().hex[:12]}",
            method=method,
            url=url,
            request=request,
            request_hash=hash_canonical(request),
            timing=ReceiptTiming(started_at=datetime.now(timezone.utc)),
        )

        self._in_progress[receipt.receipt_id] = receipt
        return receipt

    def complete(
        self,
        receipt: HTTPReceipt,
        *,
        status_code: Optional[int] = None,
        body: Optional[bytes] = None,
        error: Optional[str] = None,
    ) -> HTTPReceipt:
        """
        Complete a receipt with the response or the error.

        Args:
            receipt: The receipt to complete
            status_code: Response status, when a response was received
            body: Response body, when a response was received
            error: Error message if the round-trip failed

        Returns:
            The completed receipt
        """
        now = datetime.now(timezone.utc)
        receipt.timing.ended_at = now
        if receipt.timing.started_at:
            delta = now - receipt.timing.started_at
            receipt.timing.duration_ms = delta.total_seconds() * 1000

        if status_code is not None:
            receipt.status_code = status_code
        if body is not None:
            receipt.response_size = len(body)
            receipt.response_hash = hash_bytes(body)
        if error is not None:
            receipt.error = error

        self._in_progress.pop(receipt.receipt_id, None)
        self._receipts.append(receipt)
        return receipt

    def get_receipts(self) -> list[HTTPReceipt]:
        """All completed receipts, oldest first."""
        return list(self._receipts)

    @property
    def pending(self) -> int:
        return len(self._in_progress)

    def clear(self) -> None:
        self._receipts.clear()
        self._in_progress.clear()
