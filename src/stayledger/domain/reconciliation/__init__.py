"""Invoice reconciliation core.

Pure functions that collapse a booking's customer-payment and owner-claim
records into one representative record:

1) classify records by record-number prefix
2) score lifecycle statuses
3) pick the better of two same-booking records
4) fold a record sequence into one representative per booking
"""

from __future__ import annotations

from .classify import CUSTOMER_PAYMENT_PREFIX, OWNER_CLAIM_PREFIX, classify
from .collapse import collapse, parse_booking_id
from .lifecycle import STATUS_WEIGHTS, score
from .select import PickRepresentative, issued_timestamp, parse_issued_at, pick_better

__all__ = [
    "CUSTOMER_PAYMENT_PREFIX",
    "OWNER_CLAIM_PREFIX",
    "STATUS_WEIGHTS",
    "PickRepresentative",
    "classify",
    "collapse",
    "issued_timestamp",
    "parse_booking_id",
    "parse_issued_at",
    "pick_better",
    "score",
]
