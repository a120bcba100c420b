"""Application orchestration entry points."""

from __future__ import annotations

from contextlib import contextmanager
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from stayledger.adapters.api import ApiRecordRepository
from stayledger.adapters.sqlalchemy import (
    SqlAlchemyFinancialRecordRepository,
    is_started,
    read_session,
    shutdown,
    startup,
)
from stayledger.domain.listing import count_by_status, list_representatives

if TYPE_CHECKING:
    from collections.abc import Iterator

    from stayledger.domain.listing import InvoiceListing, ListingMode
    from stayledger.domain.ports import FinancialRecordRepository, RecordQuery


log = getLogger(__name__)


class RecordSource(StrEnum):
    """Where financial records are read from."""

    API = "api"
    DATABASE = "db"


def list_invoices(
    query: RecordQuery,
    *,
    source: RecordSource = RecordSource.API,
    mode: ListingMode | None = None,
    repository: FinancialRecordRepository | None = None,
) -> InvoiceListing:
    """List representative invoices for ``query`` from the configured source."""

    with _repository_scope(source, repository) as active_repository:
        listing = list_representatives(active_repository, query, mode=mode)
    log.info(
        "Listed %s record(s) in %s mode (fetched=%s, source=%s)",
        len(listing.records),
        listing.mode,
        listing.fetched,
        source,
    )
    return listing


def invoice_status_counts(
    query: RecordQuery,
    *,
    source: RecordSource = RecordSource.API,
    repository: FinancialRecordRepository | None = None,
) -> dict[str, int]:
    """Return per-status representative counts for ``query``."""

    with _repository_scope(source, repository) as active_repository:
        return count_by_status(active_repository, query)


@contextmanager
def _repository_scope(
    source: RecordSource,
    repository: FinancialRecordRepository | None,
) -> Iterator[FinancialRecordRepository]:
    if repository is not None:
        yield repository
        return

    if source is RecordSource.API:
        yield ApiRecordRepository()
        return

    started_here = not is_started()
    if started_here:
        startup()
    try:
        with read_session() as session:
            yield SqlAlchemyFinancialRecordRepository(session)
    finally:
        if started_here:
            shutdown()
