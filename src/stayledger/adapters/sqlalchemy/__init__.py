"""SQLAlchemy adapter package for stayledger."""

from __future__ import annotations

from .mappings import (
    booking_table,
    create_all_tables,
    invoice_table,
    metadata,
    property_table,
)
from .repositories import SqlAlchemyFinancialRecordRepository
from .session import StartupError, is_started, read_session, shutdown, startup

__all__ = [
    "SqlAlchemyFinancialRecordRepository",
    "StartupError",
    "booking_table",
    "create_all_tables",
    "invoice_table",
    "is_started",
    "metadata",
    "property_table",
    "read_session",
    "shutdown",
    "startup",
]
