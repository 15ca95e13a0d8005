"""SQLModel record exports."""

from .account import Account
from .invoice import Invoice
from .posting import CREDIT_TYPES, DEBIT_TYPES, Posting, PostingType
from .survey import Collector, Survey
from .user import User

__all__ = [
    "Account",
    "Collector",
    "CREDIT_TYPES",
    "DEBIT_TYPES",
    "Invoice",
    "Posting",
    "PostingType",
    "Survey",
    "User",
]
