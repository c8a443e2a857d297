"""
Receipts Module

Audit receipts for HTTP round-trips.
"""

from .models import HTTPReceipt, ReceiptTiming
from .recorder import ReceiptRecorder

__all__ = [
    "HTTPReceipt",
    "ReceiptTiming",
    "ReceiptRecorder",
]
