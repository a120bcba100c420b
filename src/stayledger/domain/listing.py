"""Application services for invoice list views.

Browse mode collapses mirror records so each booking shows once; search mode
returns every matching record so a free-text query can surface either mirror.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING, Final

from stayledger.domain.model import LifecycleStatus
from stayledger.domain.reconciliation import collapse

if TYPE_CHECKING:
    from collections.abc import Iterable

    from stayledger.domain.model import FinancialRecord, RecordId
    from stayledger.domain.ports import FinancialRecordRepository, RecordQuery

log = getLogger(__name__)

NEW_STATUSES: Final[tuple[LifecycleStatus, ...]] = (
    LifecycleStatus.REQUESTED,
    LifecycleStatus.VERIFIED,
)
COUNTED_STATUSES: Final[tuple[LifecycleStatus, ...]] = (
    LifecycleStatus.REQUESTED,
    LifecycleStatus.VERIFIED,
    LifecycleStatus.APPROVED,
    LifecycleStatus.PAID,
    LifecycleStatus.REJECTED,
)
ALL_COUNT_KEY: Final[str] = ""
NEW_COUNT_KEY: Final[str] = "NEW"


class ListingMode(StrEnum):
    """How a list view treats mirror records."""

    BROWSE = "browse"
    SEARCH = "search"

    @classmethod
    def for_query(cls, query: RecordQuery) -> ListingMode:
        return cls.SEARCH if query.has_search else cls.BROWSE


@dataclass(slots=True)
class InvoiceListing:
    """Records to display plus how they were produced."""

    records: list[FinancialRecord]
    mode: ListingMode
    fetched: int

    @property
    def collapsed(self) -> int:
        return self.fetched - len(self.records)


def list_representatives(
    repository: FinancialRecordRepository,
    query: RecordQuery,
    *,
    mode: ListingMode | None = None,
) -> InvoiceListing:
    """Fetch records for ``query`` and apply the list-view policy for ``mode``.

    ``mode`` defaults to :meth:`ListingMode.for_query`, i.e. search mode only when
    the query carries free text.
    """

    effective_mode = mode or ListingMode.for_query(query)
    records = repository.find(query)
    fetched = len(records)

    if effective_mode is ListingMode.SEARCH:
        log.debug("Search mode: returning %s record(s) without collapsing", fetched)
        return InvoiceListing(records=records, mode=effective_mode, fetched=fetched)

    representatives = collapse(records)
    log.debug(
        "Browse mode: collapsed %s record(s) into %s booking(s)",
        fetched,
        len(representatives),
    )
    return InvoiceListing(records=representatives, mode=effective_mode, fetched=fetched)


def count_by_status(
    repository: FinancialRecordRepository,
    query: RecordQuery,
) -> dict[str, int]:
    """Return browse-mode record counts keyed by status label.

    Keys are ``""`` for all statuses, each status in :data:`COUNTED_STATUSES`, and
    ``"NEW"`` for the combined requested/verified bucket. Search text on
    ``query`` is ignored.
    """

    base = query.without_search()
    counts: dict[str, int] = {}
    counts[ALL_COUNT_KEY] = _browse_count(repository, base.with_statuses())
    for status in COUNTED_STATUSES:
        counts[status.value] = _browse_count(repository, base.with_statuses(status))
    counts[NEW_COUNT_KEY] = _browse_count(repository, base.with_statuses(*NEW_STATUSES))
    return counts


def merge_by_id(*batches: Iterable[FinancialRecord]) -> list[FinancialRecord]:
    """Concatenate record batches, keeping the first record seen for each id."""

    seen: set[RecordId] = set()
    merged: list[FinancialRecord] = []
    for batch in batches:
        for record in batch:
            if record.id in seen:
                continue
            seen.add(record.id)
            merged.append(record)
    return merged


def _browse_count(repository: FinancialRecordRepository, query: RecordQuery) -> int:
    return len(list_representatives(repository, query, mode=ListingMode.BROWSE).records)


__all__ = [
    "ALL_COUNT_KEY",
    "COUNTED_STATUSES",
    "NEW_COUNT_KEY",
    "NEW_STATUSES",
    "InvoiceListing",
    "ListingMode",
    "count_by_status",
    "list_representatives",
    "merge_by_id",
]
