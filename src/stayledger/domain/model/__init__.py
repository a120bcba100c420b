"""Public domain model surface."""

from __future__ import annotations

from stayledger.domain.model.enums import LifecycleStatus, RecordType
from stayledger.domain.model.records import BookingId, FinancialRecord, RecordId

__all__ = [
    "BookingId",
    "FinancialRecord",
    "LifecycleStatus",
    "RecordId",
    "RecordType",
]
