# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from datetime import UTC, datetime
from decimal import Decimal, InvalidOperation
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from stayledger.app import RecordSource, invoice_status_counts, list_invoices
from stayledger.config import configure_logging
from stayledger.domain.listing import NEW_STATUSES, ListingMode
from stayledger.domain.model import LifecycleStatus
from stayledger.domain.ports import RecordQuery
from stayledger.domain.reconciliation import classify, parse_issued_at

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from stayledger.domain.model import FinancialRecord

log = logging.getLogger(__name__)

_SELECTABLE_STATUSES = tuple(
    status.value for status in LifecycleStatus if status is not LifecycleStatus.UNKNOWN
)


def _add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--source",
        choices=[source.value for source in RecordSource],
        default=RecordSource.API.value,
        help="Where to read financial records from (default: %(default)s)",
    )
    parser.add_argument(
        "--start",
        type=str,
        help="ISO-8601 timestamp (UTC) marking the inclusive start of the issue window",
    )
    parser.add_argument(
        "--end",
        type=str,
        help="ISO-8601 timestamp (UTC) marking the inclusive end of the issue window",
    )
    parser.add_argument("--owner-id", type=int, help="Only records of this owner")
    parser.add_argument("--property-id", type=int, help="Only records of this property")
    parser.add_argument("--min-amount", type=str, help="Lower bound on the record total")
    parser.add_argument("--max-amount", type=str, help="Upper bound on the record total")


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile booking invoices for list views")
    subparsers = parser.add_subparsers(dest="command", required=True)

    invoices = subparsers.add_parser(
        "invoices", help="List one representative invoice per booking"
    )
    _add_filter_arguments(invoices)
    status_group = invoices.add_mutually_exclusive_group()
    status_group.add_argument(
        "--status",
        action="append",
        type=str.upper,
        choices=_SELECTABLE_STATUSES,
        help="Only records in this lifecycle status (repeatable)",
    )
    status_group.add_argument(
        "--new",
        action="store_true",
        help="Only new records (requested or verified)",
    )
    invoices.add_argument("--search", type=str, help="Free-text search term")
    invoices.add_argument(
        "--mode",
        choices=[mode.value for mode in ListingMode],
        help="Force browse (collapsed) or search (all matches) mode",
    )

    counts = subparsers.add_parser("counts", help="Show representative counts per status")
    _add_filter_arguments(counts)

    return parser.parse_args(list(argv))


def _parse_timestamp(value: str) -> datetime:
    parsed = parse_issued_at(value)
    if parsed is None:
        raise ValueError(f"Invalid ISO timestamp: {value}")
    return parsed.astimezone(UTC)


def _parse_amount(value: str | None) -> Decimal | None:
    if value is None:
        return None
    try:
        amount = Decimal(value.strip())
    except InvalidOperation as exc:
        raise ValueError(f"Invalid amount: {value}") from exc
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value}")
    return amount


def _build_query(args: argparse.Namespace) -> RecordQuery:
    start = _parse_timestamp(args.start) if args.start else None
    end = _parse_timestamp(args.end) if args.end else None
    if start and end and start > end:
        raise ValueError("Time window start must be before end")

    min_amount = _parse_amount(args.min_amount)
    max_amount = _parse_amount(args.max_amount)
    if min_amount is not None and max_amount is not None and min_amount > max_amount:
        raise ValueError("Minimum amount must not exceed maximum amount")

    statuses: tuple[LifecycleStatus, ...] = ()
    if getattr(args, "new", False):
        statuses = NEW_STATUSES
    elif getattr(args, "status", None):
        statuses = tuple(dict.fromkeys(LifecycleStatus(value) for value in args.status))

    return RecordQuery(
        statuses=statuses,
        issued_from=start,
        issued_to=end,
        search=getattr(args, "search", None),
        owner_id=args.owner_id,
        property_id=args.property_id,
        min_amount=min_amount,
        max_amount=max_amount,
    )


def _record_to_json(record: FinancialRecord) -> str:
    payload = asdict(record)
    payload["record_type"] = classify(record.record_number).value
    return json.dumps(payload, default=_json_default, sort_keys=True)


def _json_default(value: object) -> object:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    parsed_args: argparse.Namespace
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        query = _build_query(parsed_args)
        source = RecordSource(parsed_args.source)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "invoices":
            mode = ListingMode(parsed_args.mode) if parsed_args.mode else None
            listing = list_invoices(query, source=source, mode=mode)
            for record in listing.records:
                print(_record_to_json(record))
        elif parsed_args.command == "counts":
            counts = invoice_status_counts(query, source=source)
            print(json.dumps(counts, sort_keys=True))
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error while listing invoices")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console-script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
