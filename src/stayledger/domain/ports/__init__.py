"""Domain port definitions for adapters."""

from __future__ import annotations

from .records import FinancialRecordRepository, RecordQuery

__all__ = [
    "FinancialRecordRepository",
    "RecordQuery",
]
