"""Financial record snapshots supplied by the external record store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from .enums import LifecycleStatus

if TYPE_CHECKING:
    from datetime import datetime
    from decimal import Decimal

RecordId: TypeAlias = int
BookingId: TypeAlias = int


@dataclass(frozen=True, slots=True, kw_only=True)
class FinancialRecord:
    """Read-only snapshot of one invoice-like record.

    ``record_number``, ``status``, ``issued_at`` and ``booking_id`` are kept as
    supplied so that malformed values survive translation; the reconciliation
    core decides how to interpret them. The remaining fields are carried through
    for filtering and display only.
    """

    id: RecordId
    record_number: str | None = None
    status: str | None = None
    issued_at: datetime | str | None = None
    booking_id: BookingId | str | None = None

    receipt_number: str | None = None
    owner_id: int | None = None
    property_id: int | None = None
    property_title: str | None = None
    total: Decimal | None = None
    net_payable: Decimal | None = None

    @property
    def lifecycle_status(self) -> LifecycleStatus:
        return LifecycleStatus.parse(self.status)
