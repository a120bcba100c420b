"""Read-only repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ColumnElement, func, or_, select

from stayledger.adapters.sqlalchemy.mappings import booking_table, invoice_table, property_table
from stayledger.domain.model import FinancialRecord
from stayledger.domain.ports import FinancialRecordRepository

if TYPE_CHECKING:
    from sqlalchemy import Row, Select
    from sqlalchemy.orm import Session

    from stayledger.domain.ports import RecordQuery


class SqlAlchemyFinancialRecordRepository(FinancialRecordRepository):
    """Query invoices joined to their booking and property.

    Rows come back newest id first, matching the console's list endpoint.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def find(self, query: RecordQuery) -> list[FinancialRecord]:
        stmt = self._select().where(*self._predicates(query)).order_by(invoice_table.c.id.desc())
        return [_record_from_row(row) for row in self.session.execute(stmt)]

    def _select(self) -> Select[tuple[object, ...]]:
        joined = invoice_table.outerjoin(
            booking_table, invoice_table.c.booking_id == booking_table.c.id
        ).outerjoin(property_table, booking_table.c.property_id == property_table.c.id)
        return select(
            invoice_table.c.id,
            invoice_table.c.invoice_number,
            invoice_table.c.receipt_number,
            invoice_table.c.status,
            invoice_table.c.issued_at,
            invoice_table.c.owner_id,
            invoice_table.c.booking_id,
            invoice_table.c.total,
            invoice_table.c.net_payable,
            booking_table.c.property_id,
            property_table.c.title.label("property_title"),
        ).select_from(joined)

    def _predicates(self, query: RecordQuery) -> list[ColumnElement[bool]]:
        predicates: list[ColumnElement[bool]] = []
        if query.statuses:
            predicates.append(
                func.upper(invoice_table.c.status).in_([status.value for status in query.statuses])
            )
        if query.issued_from is not None:
            predicates.append(invoice_table.c.issued_at >= query.issued_from)
        if query.issued_to is not None:
            predicates.append(invoice_table.c.issued_at <= query.issued_to)
        if query.owner_id is not None:
            predicates.append(invoice_table.c.owner_id == query.owner_id)
        if query.property_id is not None:
            predicates.append(booking_table.c.property_id == query.property_id)
        if query.min_amount is not None:
            predicates.append(invoice_table.c.total >= query.min_amount)
        if query.max_amount is not None:
            predicates.append(invoice_table.c.total <= query.max_amount)
        if query.search_term is not None:
            term = query.search_term
            # Wildcards in user text match literally.
            predicates.append(
                or_(
                    invoice_table.c.invoice_number.icontains(term, autoescape=True),
                    invoice_table.c.receipt_number.icontains(term, autoescape=True),
                    property_table.c.title.icontains(term, autoescape=True),
                )
            )
        return predicates


def _record_from_row(row: Row[tuple[object, ...]]) -> FinancialRecord:
    mapping = row._mapping  # noqa: SLF001
    return FinancialRecord(
        id=mapping["id"],
        record_number=mapping["invoice_number"],
        status=mapping["status"],
        issued_at=mapping["issued_at"],
        booking_id=mapping["booking_id"],
        receipt_number=mapping["receipt_number"],
        owner_id=mapping["owner_id"],
        property_id=mapping["property_id"],
        property_title=mapping["property_title"],
        total=mapping["total"],
        net_payable=mapping["net_payable"],
    )
