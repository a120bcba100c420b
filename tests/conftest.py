from __future__ import annotations

import os
from datetime import UTC, datetime
from decimal import Decimal
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine, insert
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import Session, sessionmaker

from stayledger.adapters.sqlalchemy import (
    booking_table,
    create_all_tables,
    invoice_table,
    property_table,
    shutdown,
    startup,
)

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    create_all_tables(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    session_factory = sessionmaker(bind=sqlite_engine, future=True)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded_engine(sqlite_engine: Engine) -> Engine:
    """Two properties, three bookings, and the invoices the console would hold for them."""

    with sqlite_engine.begin() as connection:
        connection.execute(
            insert(property_table),
            [
                {"id": 1, "title": "Seaside Villa"},
                {"id": 2, "title": "Mountain Cabin"},
            ],
        )
        connection.execute(
            insert(booking_table),
            [
                {"id": 42, "property_id": 1},
                {"id": 43, "property_id": 2},
                {"id": 44, "property_id": 1},
            ],
        )
        connection.execute(
            insert(invoice_table),
            [
                _invoice(1, "INV-202401-42", "PAID", _day(1, 1), 42, "120"),
                _invoice(2, "OINV-202401-42-7", "REQUESTED", _day(1, 2), 42, "100"),
                _invoice(3, "INV-202402-43", "VERIFIED", _day(2, 1), 43, "80"),
                _invoice(4, "OINV-202402-43-8", "draft", _day(2, 2), 43, "70"),
                _invoice(5, "INV-202403-44", "requested", _day(3, 1), 44, "300"),
                _invoice(6, "MISC-1", "PAID", None, None, None),
            ],
        )
    return sqlite_engine


@pytest.fixture
def managed_engine(seeded_engine: Engine) -> Iterator[Engine]:
    """Register the seeded engine with the session lifecycle helpers."""

    startup(engine=seeded_engine, force=True)
    try:
        yield seeded_engine
    finally:
        shutdown()


def _day(month: int, day: int) -> datetime:
    return datetime(2024, month, day, tzinfo=UTC)


def _invoice(
    record_id: int,
    number: str,
    status: str,
    issued_at: datetime | None,
    booking_id: int | None,
    total: str | None,
) -> dict[str, object]:
    owner_id = 7 if number.startswith("OINV-") else None
    return {
        "id": record_id,
        "invoice_number": number,
        "receipt_number": f"RCPT-{record_id}" if number.startswith("INV-") else None,
        "status": status,
        "issued_at": issued_at,
        "owner_id": owner_id,
        "booking_id": booking_id,
        "total": Decimal(total) if total is not None else None,
        "net_payable": None,
    }
