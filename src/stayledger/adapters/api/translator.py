"""Translate record API payloads into domain records."""

from __future__ import annotations

from stayledger.domain.model import FinancialRecord
from stayledger.domain.reconciliation import parse_issued_at

from .schema import InvoicePayload, InvoicePayloadInput


def _ensure_invoice_payload(payload: InvoicePayloadInput) -> InvoicePayload:
    if isinstance(payload, InvoicePayload):
        return payload
    return InvoicePayload.model_validate(payload)


def parse_financial_record(payload: InvoicePayloadInput) -> FinancialRecord:
    """Build a :class:`FinancialRecord` from one API invoice item.

    Unparseable ``issuedAt`` values are kept as the raw string.
    """

    invoice = _ensure_invoice_payload(payload)
    booking = invoice.booking
    property_payload = booking.property if booking is not None else None

    property_id: int | None = None
    if property_payload is not None:
        property_id = property_payload.id
    elif booking is not None:
        property_id = booking.property_id

    return FinancialRecord(
        id=invoice.id,
        record_number=invoice.invoice_number,
        status=invoice.status,
        issued_at=parse_issued_at(invoice.issued_at) or invoice.issued_at,
        booking_id=invoice.effective_booking_id,
        receipt_number=invoice.receipt_number,
        owner_id=invoice.owner_id,
        property_id=property_id,
        property_title=property_payload.title if property_payload is not None else None,
        total=invoice.total,
        net_payable=invoice.net_payable,
    )
