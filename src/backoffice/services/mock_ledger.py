"""Seeded ledger generator standing in for the billing backend."""

from __future__ import annotations

import random
from datetime import date, datetime
from typing import Iterable, Optional

from ..models.posting import Posting, PostingType

# Inclusive amount ranges per type, in whole currency units.
AMOUNT_RANGES: dict[PostingType, tuple[int, int]] = {
    PostingType.OPENING_BALANCE: (1000, 1000),
    PostingType.PAYMENT: (100, 599),
    PostingType.CHARGE: (50, 249),
    PostingType.CREDIT: (25, 124),
    PostingType.DEBIT: (10, 84),
    PostingType.REFUND: (50, 199),
    PostingType.CHARGE_CANCELED: (30, 129),
    PostingType.PROMOTION: (100, 299),
    PostingType.FEE: (25, 25),
}

COMMENTS: dict[PostingType, str] = {
    PostingType.OPENING_BALANCE: "Initial account balance",
    PostingType.PAYMENT: "Online payment",
    PostingType.CREDIT: "Account credit adjustment",
    PostingType.DEBIT: "Administrative adjustment",
    PostingType.REFUND: "Payment refund",
    PostingType.PROMOTION: "Promotional credit",
    PostingType.FEE: "Account activation fee",
}

FIRST_POSTING_ID = 1001


def _month_start(today: date, months_ago: int) -> date:
    index = today.year * 12 + (today.month - 1) - months_ago
    return date(index // 12, index % 12 + 1, 1)


def generate_postings(
    account_id: int,
    *,
    months: int = 6,
    types: Optional[Iterable[PostingType | int]] = None,
    seed: Optional[int] = None,
    today: Optional[date] = None,
    first_id: int = FIRST_POSTING_ID,
) -> list[Posting]:
    """Generate postings for the last ``months`` months plus the current one.

    Each month receives 2-9 postings on days 1-28. Charges and charge
    cancellations reference a charge id; charges describe the responses billed.
    The same ``seed`` and ``today`` always produce the same postings.
    """

    rng = random.Random(seed)
    today = today or date.today()
    pool = [PostingType(t) for t in types] if types is not None else list(AMOUNT_RANGES)
    if not pool:
        return []

    postings: list[Posting] = []
    posting_id = first_id
    for months_ago in range(months, -1, -1):
        start = _month_start(today, months_ago)
        for _ in range(rng.randint(2, 9)):
            posting_type = rng.choice(pool)
            low, high = AMOUNT_RANGES[posting_type]
            posted_at = datetime(start.year, start.month, rng.randint(1, 28))

            comments = COMMENTS.get(posting_type, "")
            reference_id = None
            if posting_type in (PostingType.CHARGE, PostingType.CHARGE_CANCELED):
                reference_id = rng.randint(5000, 5999)
            if posting_type == PostingType.CHARGE:
                comments = f"Survey responses - {rng.randint(100, 599)} responses"

            postings.append(
                Posting.for_type(
                    posting_type,
                    float(rng.randint(low, high)),
                    posted_at=posted_at,
                    posting_id=posting_id,
                    account_id=account_id,
                    comments=comments,
                    reference_id=reference_id,
                )
            )
            posting_id += 1

    return postings
