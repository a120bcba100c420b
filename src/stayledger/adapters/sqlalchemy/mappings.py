"""SQLAlchemy table metadata for the external record store.

The store is owned by the booking console; these tables describe the columns
this package reads. ``create_all_tables`` exists for tests and local setups.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import (
    Column,
    DateTime,
    Dialect,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    TypeDecorator,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)

property_table = Table(
    "property",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("title", String(255), nullable=True),
)

booking_table = Table(
    "booking",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("property_id", Integer, ForeignKey("property.id"), nullable=True, index=True),
)

invoice_table = Table(
    "invoice",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("invoice_number", String(64), nullable=True, index=True),
    Column("receipt_number", String(64), nullable=True),
    Column("status", String(32), nullable=True, index=True),
    Column("issued_at", UTCDateTime(), nullable=True, index=True),
    Column("owner_id", Integer, nullable=True, index=True),
    Column("booking_id", Integer, ForeignKey("booking.id"), nullable=True, index=True),
    Column("total", Numeric(14, 2), nullable=True),
    Column("net_payable", Numeric(14, 2), nullable=True),
)


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the record store metadata."""

    log.info("Creating all tables")
    metadata.create_all(engine)
