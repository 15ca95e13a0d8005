"""Tests for the seeded ledger generator."""

from __future__ import annotations

from datetime import date

from backoffice.models import PostingType
from backoffice.services.ledger import accumulate, validate_posting
from backoffice.services.mock_ledger import AMOUNT_RANGES, FIRST_POSTING_ID, generate_postings

TODAY = date(2026, 3, 15)


def test_same_seed_same_postings():
    first = generate_postings(1, seed=42, today=TODAY)
    second = generate_postings(1, seed=42, today=TODAY)
    assert [p.model_dump() for p in first] == [p.model_dump() for p in second]


def test_different_seed_differs():
    first = generate_postings(1, seed=1, today=TODAY)
    second = generate_postings(1, seed=2, today=TODAY)
    assert [p.model_dump() for p in first] != [p.model_dump() for p in second]


def test_postings_span_requested_months():
    postings = generate_postings(3, months=2, seed=5, today=TODAY)
    months = {(p.posted_at.year, p.posted_at.month) for p in postings}
    assert months == {(2026, 1), (2026, 2), (2026, 3)}
    assert all(p.account_id == 3 for p in postings)
    assert all(1 <= p.posted_at.day <= 28 for p in postings)


def test_month_counts_and_sequential_ids():
    postings = generate_postings(1, months=0, seed=9, today=TODAY, first_id=500)
    assert 2 <= len(postings) <= 9
    assert [p.posting_id for p in postings] == list(range(500, 500 + len(postings)))


def test_generated_postings_are_valid_and_in_range():
    postings = generate_postings(1, months=12, seed=3, today=TODAY)
    for posting in postings:
        validate_posting(posting)
        low, high = AMOUNT_RANGES[posting.posting_type]
        assert low <= posting.amount <= high
    accumulate(postings)


def test_charges_carry_reference_and_response_comment():
    postings = generate_postings(1, months=12, types=[PostingType.CHARGE], seed=11, today=TODAY)
    assert postings
    for posting in postings:
        assert posting.posting_type == PostingType.CHARGE
        assert 5000 <= posting.reference_id <= 5999
        assert posting.comments.startswith("Survey responses - ")


def test_type_subset_is_respected():
    wanted = {PostingType.PAYMENT, PostingType.FEE}
    postings = generate_postings(1, types=wanted, seed=4, today=TODAY)
    assert {p.posting_type for p in postings} <= wanted


def test_empty_type_list_generates_nothing():
    assert generate_postings(1, types=[], seed=1, today=TODAY) == []


def test_default_first_id():
    assert generate_postings(1, seed=1, today=TODAY)[0].posting_id == FIRST_POSTING_ID


def test_year_boundary_months():
    postings = generate_postings(1, months=1, seed=8, today=date(2026, 1, 20))
    assert {(p.posted_at.year, p.posted_at.month) for p in postings} == {(2025, 12), (2026, 1)}
