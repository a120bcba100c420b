from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError

from stayledger.adapters.api import InvoicePayload, parse_financial_record
from stayledger.domain.model import LifecycleStatus

from tests.support.api import invoice_item


def test_parse_financial_record_maps_api_fields() -> None:
    record = parse_financial_record(invoice_item(7, number="OINV-202401-42-3", status="requested"))

    assert record.id == 7
    assert record.record_number == "OINV-202401-42-3"
    assert record.status == "requested"
    assert record.lifecycle_status is LifecycleStatus.REQUESTED
    assert record.issued_at == datetime(2024, 1, 1, tzinfo=UTC)
    assert record.booking_id == 42
    assert record.owner_id == 5
    assert record.property_id == 9
    assert record.property_title == "Seaside Villa"
    assert record.total == Decimal("120.00")
    assert record.net_payable == Decimal("102.00")


def test_parse_financial_record_keeps_malformed_timestamp_raw() -> None:
    record = parse_financial_record(invoice_item(1, issued_at="sometime last week"))

    assert record.issued_at == "sometime last week"


def test_parse_financial_record_falls_back_to_nested_booking_id() -> None:
    payload = invoice_item(1)
    payload["bookingId"] = None
    payload["booking"] = {"id": 77, "propertyId": 4}

    record = parse_financial_record(payload)

    assert record.booking_id == 77
    assert record.property_id == 4
    assert record.property_title is None


def test_parse_financial_record_tolerates_missing_optional_fields() -> None:
    record = parse_financial_record({"id": 3, "invoiceNumber": "  ", "total": ""})

    assert record.record_number is None
    assert record.status is None
    assert record.issued_at is None
    assert record.booking_id is None
    assert record.total is None


def test_invoice_payload_stringifies_non_text_identifiers() -> None:
    payload = InvoicePayload.model_validate({"id": 1, "bookingId": 12.5, "issuedAt": 1700000000})

    assert payload.booking_id == "12.5"
    assert payload.issued_at == "1700000000"


def test_invoice_payload_requires_an_id() -> None:
    with pytest.raises(ValidationError):
        InvoicePayload.model_validate({"invoiceNumber": "INV-1"})
