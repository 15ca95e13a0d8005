"""Tests for ledger running balances and month grouping."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from backoffice.models import Posting, PostingType
from backoffice.services.ledger import (
    account_balance,
    accumulate,
    month_bounds,
    select_types,
    validate_posting,
)


@pytest.fixture
def scenario_postings(posting_factory):
    return [
        posting_factory(PostingType.OPENING_BALANCE, 1000, date(2025, 1, 1)),
        posting_factory(PostingType.CHARGE, 50, date(2025, 1, 15)),
        posting_factory(PostingType.PAYMENT, 500, date(2025, 2, 3)),
    ]


def test_running_balances(scenario_postings):
    result = accumulate(scenario_postings)
    assert [p.running_balance for p in result.ordered] == [1000, 950, 1450]
    assert result.balance == 1450


def test_month_buckets_newest_first(scenario_postings):
    feb, jan = accumulate(scenario_postings).buckets

    assert (feb.from_date, feb.to_date) == (date(2025, 2, 1), date(2025, 2, 28))
    assert feb.closing_balance == 1450
    assert feb.total_credit == 500
    assert feb.total_debit == 0

    assert (jan.from_date, jan.to_date) == (date(2025, 1, 1), date(2025, 1, 31))
    assert jan.closing_balance == 950
    assert jan.total_credit == 1000
    assert jan.total_debit == 50
    assert jan.label == "January 2025"


def test_input_order_does_not_matter(scenario_postings):
    shuffled = [scenario_postings[2], scenario_postings[0], scenario_postings[1]]
    assert [p.running_balance for p in accumulate(shuffled).ordered] == [1000, 950, 1450]


def test_inputs_are_not_modified(scenario_postings):
    accumulate(scenario_postings)
    assert all(p.running_balance is None for p in scenario_postings)


def test_same_timestamp_keeps_insertion_order(posting_factory):
    same_day = datetime(2025, 3, 10, 12, 0)
    postings = [
        posting_factory(PostingType.CREDIT, 30, same_day, comments="first"),
        posting_factory(PostingType.FEE, 25, same_day, comments="second"),
        posting_factory(PostingType.REFUND, 70, same_day, comments="third"),
    ]
    ordered = accumulate(postings).ordered
    assert [p.comments for p in ordered] == ["first", "second", "third"]
    assert [p.running_balance for p in ordered] == [30, 5, 75]


def test_empty_ledger():
    result = accumulate([])
    assert result.ordered == []
    assert result.buckets == []
    assert result.balance == 0


def test_cents_do_not_drift(posting_factory):
    postings = [posting_factory(PostingType.CREDIT, 0.1, date(2025, 1, d)) for d in range(1, 11)]
    assert accumulate(postings).balance == 1.0


def test_months_follow_the_utc_instant_used_for_ordering(posting_factory):
    # 2025-01-31 19:30 UTC, written in a +05:00 zone
    payment = posting_factory(
        PostingType.PAYMENT, 100, datetime(2025, 2, 1, 0, 30, tzinfo=timezone(timedelta(hours=5)))
    )
    charge = posting_factory(PostingType.CHARGE, 10, datetime(2025, 1, 31, 22, 0, tzinfo=timezone.utc))
    result = accumulate([charge, payment])

    assert [p.running_balance for p in result.ordered] == [100, 90]
    (january,) = result.buckets
    assert january.label == "January 2025"
    assert january.closing_balance == result.balance == 90


def test_starting_balance_carries_into_running_balances(posting_factory):
    result = accumulate(
        [posting_factory(PostingType.CHARGE, 40, date(2025, 4, 2))], starting_balance=100.5
    )
    assert result.ordered[0].running_balance == 60.5
    assert result.buckets[0].closing_balance == 60.5
    assert result.balance == 60.5


def test_leap_february_bounds():
    assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))


def test_negative_amount_is_rejected_by_the_model():
    with pytest.raises(ValidationError):
        Posting(
            posting_id=1,
            account_id=1,
            posting_type=PostingType.CHARGE,
            posted_at=datetime(2025, 1, 1),
            debit=-5,
        )


def test_posting_with_both_sides_is_rejected():
    posting = Posting(
        posting_id=1,
        account_id=1,
        posting_type=PostingType.PAYMENT,
        posted_at=datetime(2025, 1, 1),
        debit=5,
        credit=5,
    )
    with pytest.raises(ValueError, match="exactly one"):
        accumulate([posting])


def test_posting_with_no_amount_is_rejected():
    posting = Posting(
        posting_id=1, account_id=1, posting_type=PostingType.PAYMENT, posted_at=datetime(2025, 1, 1)
    )
    with pytest.raises(ValueError):
        validate_posting(posting)


def test_posting_on_the_wrong_side_is_rejected():
    posting = Posting(
        posting_id=1,
        account_id=1,
        posting_type=PostingType.CHARGE,
        posted_at=datetime(2025, 1, 1),
        credit=20,
    )
    with pytest.raises(ValueError, match="cannot be a credit"):
        validate_posting(posting)


def test_for_type_places_amount_by_type():
    charge = Posting.for_type(
        PostingType.CHARGE, 40, posted_at=datetime(2025, 1, 1), posting_id=1, account_id=1
    )
    refund = Posting.for_type(
        PostingType.REFUND, 40, posted_at=datetime(2025, 1, 1), posting_id=2, account_id=1
    )
    assert (charge.debit, charge.credit) == (40, 0)
    assert (refund.debit, refund.credit) == (0, 40)
    assert charge.amount == refund.amount == 40


def test_select_types(scenario_postings):
    assert [p.posting_type for p in select_types(scenario_postings, [PostingType.PAYMENT])] == [
        PostingType.PAYMENT
    ]
    assert select_types(scenario_postings, None) == scenario_postings
    assert select_types(scenario_postings, []) == []


def test_account_balance_reports_latest_payment(posting_factory):
    postings = [
        posting_factory(PostingType.PAYMENT, 100, date(2025, 1, 5)),
        posting_factory(PostingType.PAYMENT, 200, date(2025, 2, 5)),
        posting_factory(PostingType.CHARGE, 20, date(2025, 2, 9)),
    ]
    summary = account_balance(accumulate(postings))
    assert summary.balance == 280
    assert summary.last_payment.credit == 200


def test_account_balance_without_payments():
    assert account_balance(accumulate([])).last_payment is None


_types = st.sampled_from(list(PostingType))
_postings = st.lists(
    st.tuples(_types, st.integers(1, 100_000), st.dates(date(2024, 1, 1), date(2025, 12, 28))),
    max_size=30,
)


def _build(raw, first_id=0):
    return [
        Posting.for_type(
            kind,
            cents / 100,
            posted_at=datetime(day.year, day.month, day.day),
            posting_id=first_id + i,
            account_id=1,
        )
        for i, (kind, cents, day) in enumerate(raw)
    ]


@given(_postings)
def test_buckets_fold_to_the_running_balance(raw):
    postings = _build(raw)
    result = accumulate(postings)

    assert sum(len(b.postings) for b in result.buckets) == len(postings)
    assert [b.from_date for b in result.buckets] == sorted(
        (b.from_date for b in result.buckets), reverse=True
    )
    if result.ordered:
        assert result.buckets[0].closing_balance == result.ordered[-1].running_balance
    for older, newer in zip(result.buckets[1:], result.buckets):
        delta = round(newer.total_credit - newer.total_debit, 2)
        assert round(older.closing_balance + delta, 2) == newer.closing_balance


@given(_postings, st.integers(0, 30))
def test_consecutive_periods_fold_to_the_whole_ledger(raw, split):
    raw = sorted(raw, key=lambda item: item[2])
    split = min(split, len(raw))
    earlier, later = raw[:split], raw[split:]

    whole = accumulate(_build(raw))
    first = accumulate(_build(earlier))
    second = accumulate(_build(later, first_id=split), starting_balance=first.balance)

    assert second.balance == whole.balance
    assert [p.running_balance for p in first.ordered + second.ordered] == [
        p.running_balance for p in whole.ordered
    ]
