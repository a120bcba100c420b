"""Pydantic models describing the record API payloads."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


def _raw_text(value: object) -> object:
    if value is None or isinstance(value, str):
        return _blank_to_none(value)
    return str(value)


def _raw_identifier(value: object) -> object:
    if value is None or isinstance(value, (int, str)):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return str(value)


class RecordApiBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class PropertyPayload(RecordApiBaseModel):
    id: int
    title: str | None = None


class BookingPayload(RecordApiBaseModel):
    id: int | str | None = None
    property_id: int | None = Field(default=None, alias="propertyId")
    property: PropertyPayload | None = None

    _normalize_id = field_validator("id", mode="before")(_raw_identifier)


class InvoicePayload(RecordApiBaseModel):
    id: int
    invoice_number: str | None = Field(default=None, alias="invoiceNumber")
    receipt_number: str | None = Field(default=None, alias="receiptNumber")
    status: str | None = None
    # Kept raw; malformed timestamps are tolerated downstream.
    issued_at: str | None = Field(default=None, alias="issuedAt")
    owner_id: int | None = Field(default=None, alias="ownerId")
    booking_id: int | str | None = Field(default=None, alias="bookingId")
    booking: BookingPayload | None = None
    total: Decimal | None = None
    net_payable: Decimal | None = Field(default=None, alias="netPayable")

    _normalize_blanks = field_validator(
        "invoice_number",
        "receipt_number",
        "status",
        "total",
        "net_payable",
        mode="before",
    )(_blank_to_none)
    _normalize_issued_at = field_validator("issued_at", mode="before")(_raw_text)
    _normalize_booking_id = field_validator("booking_id", mode="before")(_raw_identifier)

    @property
    def effective_booking_id(self) -> int | str | None:
        if self.booking_id is not None:
            return self.booking_id
        if self.booking is not None:
            return self.booking.id
        return None


class InvoiceListResponse(RecordApiBaseModel):
    total: int
    page: int = 1
    page_size: int = Field(default=50, alias="pageSize")
    items: list[InvoicePayload] = Field(default_factory=list)


class ErrorResponse(RecordApiBaseModel):
    error: str
    detail: str | None = None


InvoicePayloadInput = InvoicePayload | Mapping[str, object]
