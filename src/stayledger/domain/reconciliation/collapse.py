"""Collapse mirror records into one representative per booking."""

from __future__ import annotations

import re
from logging import getLogger
from typing import TYPE_CHECKING

from .select import pick_better

if TYPE_CHECKING:
    from collections.abc import Iterable

    from stayledger.domain.model import BookingId, FinancialRecord

    from .select import PickRepresentative

log = getLogger(__name__)

_BOOKING_ID_TEXT = re.compile(r"([+-]?\d+)(?:\.(\d+))?", re.ASCII)


def collapse(
    records: Iterable[FinancialRecord],
    *,
    pick: PickRepresentative = pick_better,
) -> list[FinancialRecord]:
    """Return one representative record per booking.

    Bookings appear in the order of their first record in ``records``; which
    record wins a booking never changes that order. Records without a usable
    booking id are dropped.
    """

    best_by_booking: dict[BookingId, FinancialRecord] = {}
    first_seen: dict[BookingId, int] = {}
    dropped = 0

    for index, record in enumerate(records):
        booking_id = parse_booking_id(record.booking_id)
        if booking_id is None:
            dropped += 1
            continue
        current = best_by_booking.get(booking_id)
        if current is None:
            first_seen[booking_id] = index
            best_by_booking[booking_id] = record
            continue
        best_by_booking[booking_id] = pick(current, record)

    if dropped:
        log.debug("Dropped %s record(s) without a valid booking id", dropped)

    ordered = sorted(first_seen, key=first_seen.__getitem__)
    return [best_by_booking[booking_id] for booking_id in ordered]


def parse_booking_id(value: object) -> BookingId | None:
    """Return ``value`` as a positive booking id, or ``None`` if it is unusable.

    Strings must be plain ASCII decimal numbers; integral forms such as ``"42.0"``
    are accepted like the float ``42.0``.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        booking_id = value
    elif isinstance(value, float):
        if not value.is_integer():
            return None
        booking_id = int(value)
    elif isinstance(value, str):
        match = _BOOKING_ID_TEXT.fullmatch(value.strip())
        if match is None:
            return None
        whole, fraction = match.groups()
        if fraction and fraction.strip("0"):
            return None
        booking_id = int(whole)
    else:
        return None
    return booking_id if booking_id > 0 else None
