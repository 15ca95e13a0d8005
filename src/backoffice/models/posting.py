"""SQLModel data model for account ledger postings."""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum
from typing import Any, Optional

from sqlmodel import Field, SQLModel


class PostingType(IntEnum):
    """Ledger posting types, keyed by the platform's transaction type ids."""

    OPENING_BALANCE = 1
    PAYMENT = 2
    CHARGE = 3
    CREDIT = 4
    DEBIT = 5
    REFUND = 6
    CHARGE_CANCELED = 7
    PROMOTION = 9
    FEE = 10

    @property
    def is_credit(self) -> bool:
        """True when postings of this type add to the balance."""
        return self in CREDIT_TYPES

    @property
    def label(self) -> str:
        return POSTING_TYPE_LABELS[self]


CREDIT_TYPES = frozenset(
    {
        PostingType.OPENING_BALANCE,
        PostingType.PAYMENT,
        PostingType.CREDIT,
        PostingType.REFUND,
        PostingType.CHARGE_CANCELED,
        PostingType.PROMOTION,
    }
)
DEBIT_TYPES = frozenset(set(PostingType) - CREDIT_TYPES)

POSTING_TYPE_LABELS = {
    PostingType.OPENING_BALANCE: "Starting balance",
    PostingType.PAYMENT: "Payment",
    PostingType.CHARGE: "Charge",
    PostingType.CREDIT: "Credit",
    PostingType.DEBIT: "Debit",
    PostingType.REFUND: "Refund",
    PostingType.CHARGE_CANCELED: "Charge canceled",
    PostingType.PROMOTION: "Promotion code",
    PostingType.FEE: "Activation fee",
}


class Posting(SQLModel):
    """A single dated ledger entry carrying either a debit or a credit."""

    posting_id: int
    account_id: int
    posting_type: PostingType
    posted_at: datetime
    debit: float = Field(default=0.0, ge=0)
    credit: float = Field(default=0.0, ge=0)
    running_balance: Optional[float] = Field(
        default=None, description="Derived by the ledger accumulator"
    )
    comments: str = Field(default="", max_length=255)
    reference_id: Optional[int] = None

    @classmethod
    def for_type(
        cls,
        posting_type: PostingType,
        amount: float,
        *,
        posted_at: datetime,
        posting_id: int,
        account_id: int,
        **fields: Any,
    ) -> "Posting":
        """Build a posting with ``amount`` on the side its type dictates."""

        posting_type = PostingType(posting_type)
        side = "credit" if posting_type.is_credit else "debit"
        return cls(
            posting_id=posting_id,
            account_id=account_id,
            posting_type=posting_type,
            posted_at=posted_at,
            **{side: amount},
            **fields,
        )

    @property
    def amount(self) -> float:
        return self.credit or self.debit

    @property
    def type_label(self) -> str:
        return self.posting_type.label
