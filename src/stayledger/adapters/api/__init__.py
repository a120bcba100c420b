"""Public interface for the record API adapter."""

from __future__ import annotations

from .client import ApiRecordRepository, RecordApiError
from .schema import InvoiceListResponse, InvoicePayload, InvoicePayloadInput
from .translator import parse_financial_record

__all__ = [
    "ApiRecordRepository",
    "InvoiceListResponse",
    "InvoicePayload",
    "InvoicePayloadInput",
    "RecordApiError",
    "parse_financial_record",
]
