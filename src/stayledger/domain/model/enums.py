"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class RecordType(StrEnum):
    """Kind of financial record, derived from its record-number prefix."""

    CUSTOMER_PAYMENT = "customer_payment"
    OWNER_CLAIM = "owner_claim"
    OTHER = "other"


class LifecycleStatus(StrEnum):
    """Approval-pipeline stage of a financial record."""

    DRAFT = "DRAFT"
    REQUESTED = "REQUESTED"
    VERIFIED = "VERIFIED"
    APPROVED = "APPROVED"
    PAID = "PAID"
    PROCESSING = "PROCESSING"
    REJECTED = "REJECTED"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, value: str | None) -> LifecycleStatus:
        """Normalise a raw status label; anything unrecognised maps to ``UNKNOWN``."""

        if value is None:
            return cls.UNKNOWN
        normalized = str(value).strip().upper()
        try:
            return cls(normalized)
        except ValueError:
            return cls.UNKNOWN
