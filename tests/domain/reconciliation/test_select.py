from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from stayledger.domain.reconciliation import issued_timestamp, parse_issued_at, pick_better
from tests.support.records import claim, make_record, payment


def test_draft_claim_yields_to_customer_payment() -> None:
    paid = payment(id=1, status="PAID")
    draft = claim(id=2, status="DRAFT", issued_at="2030-01-01")

    assert pick_better(paid, draft) is paid
    assert pick_better(draft, paid) is paid


def test_draft_claim_check_is_case_insensitive() -> None:
    rejected = payment(id=1, status="REJECTED")
    draft = claim(id=2, status="draft")

    assert pick_better(draft, rejected) is rejected


def test_submitted_claim_supersedes_customer_payment() -> None:
    paid = payment(id=1, status="PAID")
    requested = claim(id=2, status="REQUESTED")

    assert pick_better(paid, requested) is requested
    assert pick_better(requested, paid) is requested


def test_claim_with_unknown_status_still_supersedes_payment() -> None:
    paid = payment(id=9, status="PAID")
    odd_claim = claim(id=1, status="ON_HOLD")

    assert pick_better(paid, odd_claim) is odd_claim


def test_claim_rule_ignores_pairs_without_exactly_one_claim() -> None:
    other = make_record(id=1, record_number="RCT-1", status="APPROVED")
    paid = payment(id=2, status="PAID")

    assert pick_better(other, paid) is paid
    assert pick_better(paid, other) is paid


def test_two_claims_fall_through_to_lifecycle() -> None:
    draft = claim(id=5, status="DRAFT")
    requested = claim(id=1, status="REQUESTED")

    assert pick_better(draft, requested) is requested


def test_lifecycle_precedence_ignores_timestamps() -> None:
    approved = payment(id=1, status="APPROVED", issued_at="2024-01-01")
    verified = payment(id=2, status="VERIFIED", issued_at="2024-06-01")

    assert pick_better(approved, verified) is approved
    assert pick_better(verified, approved) is approved


def test_recency_breaks_equal_scores() -> None:
    older = payment(id=9, status="PAID", issued_at="2024-01-01T10:00:00Z")
    newer = payment(id=1, status="PAID", issued_at="2024-01-02T10:00:00Z")

    assert pick_better(older, newer) is newer
    assert pick_better(newer, older) is newer


def test_recency_compares_mixed_datetime_and_string_values() -> None:
    as_string = payment(id=1, status="PAID", issued_at="2024-03-01T12:00:00+02:00")
    as_datetime = payment(id=2, status="PAID", issued_at=datetime(2024, 3, 1, 11, tzinfo=UTC))

    assert pick_better(as_string, as_datetime) is as_datetime


def test_identity_breaks_full_ties() -> None:
    low = payment(id=5, status="PAID", issued_at="2024-01-01")
    high = payment(id=9, status="PAID", issued_at="2024-01-01")

    assert pick_better(low, high) is high
    assert pick_better(high, low) is high


def test_identity_prefers_first_argument_on_equal_ids() -> None:
    first = payment(id=5, status="PAID")
    second = payment(id=5, status="PAID")

    assert pick_better(first, second) is first


@pytest.mark.parametrize("bad_value", ["not-a-date", "", None, "2024-13-45"])
def test_unparseable_timestamp_falls_through_to_identity(bad_value: str | None) -> None:
    broken = payment(id=9, status="PAID", issued_at=bad_value)
    valid = payment(id=5, status="PAID", issued_at="2099-01-01")

    assert pick_better(broken, valid) is broken
    assert pick_better(valid, broken) is broken


def test_pick_better_does_not_mutate_inputs() -> None:
    a = payment(id=1, status="PAID")
    b = claim(id=2, status="REQUESTED")
    before = (repr(a), repr(b))

    pick_better(a, b)

    assert (repr(a), repr(b)) == before


def test_parse_issued_at_reads_date_only_and_zulu_values() -> None:
    assert parse_issued_at("2024-01-02") == datetime(2024, 1, 2, tzinfo=UTC)
    assert parse_issued_at("2024-01-02T03:04:05Z") == datetime(2024, 1, 2, 3, 4, 5, tzinfo=UTC)


def test_parse_issued_at_keeps_explicit_offsets() -> None:
    parsed = parse_issued_at("2024-01-02T03:00:00+03:00")

    assert parsed is not None
    assert parsed.utcoffset() == timedelta(hours=3)
    assert parsed == datetime(2024, 1, 2, tzinfo=UTC)


def test_issued_timestamp_treats_naive_values_as_utc() -> None:
    naive = datetime(2024, 1, 1, 12)
    aware = datetime(2024, 1, 1, 14, tzinfo=timezone(timedelta(hours=2)))

    assert issued_timestamp(naive) == issued_timestamp(aware)


def test_issued_timestamp_rejects_non_temporal_values() -> None:
    assert issued_timestamp(1700000000) is None  # type: ignore[arg-type]
    assert issued_timestamp("yesterday") is None
