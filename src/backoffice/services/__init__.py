"""Table, ledger and record-store services."""

from .ledger import AccountBalance, LedgerResult, MonthBucket, accumulate, account_balance
from .table import (
    InvalidSortField,
    Page,
    QueryResult,
    QueryState,
    SortSpec,
    TableSchema,
    query,
    toggle_sort,
)

__all__ = [
    "AccountBalance",
    "InvalidSortField",
    "LedgerResult",
    "MonthBucket",
    "Page",
    "QueryResult",
    "QueryState",
    "SortSpec",
    "TableSchema",
    "accumulate",
    "account_balance",
    "query",
    "toggle_sort",
]
