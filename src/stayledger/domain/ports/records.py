"""Ports for reading financial records from the external record store."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datetime import datetime
    from decimal import Decimal

    from stayledger.domain.model import FinancialRecord, LifecycleStatus


@dataclass(frozen=True, slots=True, kw_only=True)
class RecordQuery:
    """Caller-supplied filters forwarded to a record store.

    The reconciliation core never interprets these; it reconciles whatever
    sequence the store returns. An empty ``statuses`` tuple means any status.
    """

    statuses: tuple[LifecycleStatus, ...] = ()
    issued_from: datetime | None = None
    issued_to: datetime | None = None
    search: str | None = None
    owner_id: int | None = None
    property_id: int | None = None
    min_amount: Decimal | None = None
    max_amount: Decimal | None = None

    @property
    def has_search(self) -> bool:
        return bool(self.search and self.search.strip())

    @property
    def search_term(self) -> str | None:
        return self.search.strip() if self.has_search and self.search else None

    def with_statuses(self, *statuses: LifecycleStatus) -> RecordQuery:
        return replace(self, statuses=tuple(statuses))

    def without_search(self) -> RecordQuery:
        return replace(self, search=None)


@runtime_checkable
class FinancialRecordRepository(Protocol):
    """Read-only access to financial records matching a query."""

    def find(self, query: RecordQuery) -> list[FinancialRecord]: ...


__all__ = ["FinancialRecordRepository", "RecordQuery"]
