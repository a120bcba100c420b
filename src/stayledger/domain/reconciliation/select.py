"""Representative selection between two records of the same booking.

Rules are evaluated in order and the first definitive answer wins:

1. owner claim vs. non-claim: a draft claim yields to the other record, any
   other claim supersedes it
2. lifecycle precedence (higher :func:`score` wins)
3. recency (later ``issued_at`` wins when both are comparable)
4. identity (greater ``id`` wins, ``a`` on equality)
"""

from __future__ import annotations

import math
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Protocol

from stayledger.domain.model import LifecycleStatus, RecordType

from .classify import classify
from .lifecycle import score

if TYPE_CHECKING:
    from stayledger.domain.model import FinancialRecord


class PickRepresentative(Protocol):
    """Choose which of two same-booking records represents the booking."""

    def __call__(self, a: FinancialRecord, b: FinancialRecord) -> FinancialRecord: ...


def pick_better(a: FinancialRecord, b: FinancialRecord) -> FinancialRecord:
    """Return whichever of ``a`` and ``b`` should represent their booking.

    Always returns one of the two inputs and never raises, whatever the state of
    their status or timestamp fields.
    """

    claim_decision = _pick_by_claim(a, b)
    if claim_decision is not None:
        return claim_decision

    score_a = score(a.status)
    score_b = score(b.status)
    if score_a != score_b:
        return a if score_a > score_b else b

    issued_a = issued_timestamp(a.issued_at)
    issued_b = issued_timestamp(b.issued_at)
    if issued_a is not None and issued_b is not None and issued_a != issued_b:
        return a if issued_a > issued_b else b

    return a if a.id >= b.id else b


def issued_timestamp(value: datetime | str | None) -> float | None:
    """Return ``value`` as POSIX seconds, or ``None`` when it is not comparable."""

    parsed = parse_issued_at(value)
    if parsed is None:
        return None
    try:
        timestamp = parsed.timestamp()
    except (OverflowError, OSError, ValueError):
        return None
    return timestamp if math.isfinite(timestamp) else None


def parse_issued_at(value: object) -> datetime | None:
    """Return ``value`` as an aware datetime, or ``None`` if it cannot be read.

    Naive values are interpreted as UTC. Strings must be ISO-8601; a trailing
    ``Z`` and date-only forms are accepted.
    """

    parsed: datetime | None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        parsed = _parse_iso_datetime(value)
    else:
        parsed = None
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed


def _pick_by_claim(a: FinancialRecord, b: FinancialRecord) -> FinancialRecord | None:
    type_a = classify(a.record_number)
    type_b = classify(b.record_number)
    if type_a is type_b:
        return None
    if type_a is RecordType.OWNER_CLAIM:
        claim, other = a, b
    elif type_b is RecordType.OWNER_CLAIM:
        claim, other = b, a
    else:
        return None

    if claim.lifecycle_status is LifecycleStatus.DRAFT:
        return other
    return claim


def _parse_iso_datetime(value: str) -> datetime | None:
    normalized = value.strip()
    if not normalized:
        return None
    if normalized.endswith(("Z", "z")):
        normalized = normalized[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(normalized)
    except ValueError:
        return None
