"""Running-balance accumulation and month grouping for account ledgers."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from ..logging_config import get_logger
from ..models.posting import Posting, PostingType
from .values import from_cents, to_cents, to_timestamp, to_utc

logger = get_logger(__name__)


@dataclass(frozen=True)
class MonthBucket:
    """Postings of one calendar month with their totals."""

    from_date: date
    to_date: date
    postings: list[Posting]
    total_debit: float
    total_credit: float
    closing_balance: float

    @property
    def label(self) -> str:
        return self.from_date.strftime("%B %Y")


@dataclass(frozen=True)
class LedgerResult:
    """Chronological postings with running balances, plus month buckets newest first."""

    ordered: list[Posting]
    buckets: list[MonthBucket]
    balance: float = 0.0


@dataclass(frozen=True)
class AccountBalance:
    """Current balance and the most recent fund (payment) posting."""

    balance: float
    last_payment: Optional[Posting] = None


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return the first and last calendar day of a month."""

    _, last_day = calendar.monthrange(year, month)
    return date(year, month, 1), date(year, month, last_day)


def validate_posting(posting: Posting) -> None:
    """Reject postings whose amounts contradict the debit-or-credit rule."""

    debit, credit = to_cents(posting.debit), to_cents(posting.credit)
    if debit < 0 or credit < 0:
        raise ValueError(f"Posting {posting.posting_id} has a negative amount")
    if (debit == 0) == (credit == 0):
        raise ValueError(
            f"Posting {posting.posting_id} must carry exactly one non-zero debit or credit"
        )
    if PostingType(posting.posting_type).is_credit != (credit > 0):
        side = "credit" if credit > 0 else "debit"
        raise ValueError(
            f"Posting {posting.posting_id} of type {posting.posting_type.name} cannot be a {side}"
        )


def select_types(
    postings: Iterable[Posting], types: Optional[Iterable[PostingType | int]]
) -> list[Posting]:
    """Keep postings whose type is in ``types``; ``None`` keeps everything."""

    items = list(postings)
    if types is None:
        return items
    wanted = {PostingType(t) for t in types}
    return [p for p in items if p.posting_type in wanted]


def accumulate(postings: Iterable[Posting], starting_balance: float = 0.0) -> LedgerResult:
    """Fill running balances in date order and group postings by month.

    Postings are ordered by ``posted_at`` ascending; postings sharing a timestamp
    keep their input order. Months are taken from the UTC instant, the same
    instant that orders the postings. ``starting_balance`` carries the closing
    balance of an earlier period into this one. The inputs are not modified.
    """

    items = list(postings)
    for posting in items:
        validate_posting(posting)

    chronological = sorted(items, key=lambda p: to_timestamp(p.posted_at))

    balance = to_cents(starting_balance)
    ordered: list[Posting] = []
    for posting in chronological:
        balance += to_cents(posting.credit) - to_cents(posting.debit)
        ordered.append(posting.model_copy(update={"running_balance": from_cents(balance)}))

    grouped: dict[tuple[int, int], list[Posting]] = {}
    for posting in ordered:
        instant = to_utc(posting.posted_at)
        grouped.setdefault((instant.year, instant.month), []).append(posting)

    buckets: list[MonthBucket] = []
    for (year, month) in sorted(grouped, reverse=True):
        month_postings = grouped[(year, month)]
        from_date, to_date = month_bounds(year, month)
        buckets.append(
            MonthBucket(
                from_date=from_date,
                to_date=to_date,
                postings=month_postings,
                total_debit=from_cents(sum((to_cents(p.debit) for p in month_postings), Decimal(0))),
                total_credit=from_cents(sum((to_cents(p.credit) for p in month_postings), Decimal(0))),
                closing_balance=month_postings[-1].running_balance,
            )
        )

    logger.debug(
        "Ledger accumulated",
        extra={"postings": len(ordered), "months": len(buckets), "balance": str(balance)},
    )
    return LedgerResult(ordered=ordered, buckets=buckets, balance=from_cents(balance))


def account_balance(result: LedgerResult) -> AccountBalance:
    """Summarize a ledger as its final balance and latest payment."""

    payments = [p for p in result.ordered if p.posting_type == PostingType.PAYMENT]
    return AccountBalance(balance=result.balance, last_payment=payments[-1] if payments else None)
