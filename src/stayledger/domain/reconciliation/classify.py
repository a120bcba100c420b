"""Record classification by record-number prefix."""

from __future__ import annotations

from typing import Final

from stayledger.domain.model import RecordType

OWNER_CLAIM_PREFIX: Final[str] = "OINV-"
CUSTOMER_PAYMENT_PREFIX: Final[str] = "INV-"


def classify(record_number: str | None) -> RecordType:
    """Return the record type encoded in ``record_number`` (case-insensitive)."""

    normalized = "" if record_number is None else str(record_number).upper()
    if normalized.startswith(OWNER_CLAIM_PREFIX):
        return RecordType.OWNER_CLAIM
    if normalized.startswith(CUSTOMER_PAYMENT_PREFIX):
        return RecordType.CUSTOMER_PAYMENT
    return RecordType.OTHER
