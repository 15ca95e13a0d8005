"""Filtering, sorting, and pagination for record tables.

The pipeline is a pure function of ``(records, state, schema)``. Table state
(search text, sort, page) lives in an immutable :class:`QueryState` that
callers replace on every interaction instead of mutating.
"""

from __future__ import annotations

import math
from functools import cmp_to_key
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Generic, Iterable, Mapping, Optional, Sequence, TypeVar

from ..devtools import dev_log
from ..logging_config import get_logger
from .values import FieldKind, compare, fold_text

logger = get_logger(__name__)

T = TypeVar("T")

ASC = "asc"
DESC = "desc"
_DIRECTIONS = (ASC, DESC)

DEFAULT_PAGE_SIZE = 25


class InvalidSortField(KeyError):
    """Raised when a table is sorted on a field its records do not carry."""


def get_attribute(record: Any, name: str) -> Any:
    """Look up ``name`` on a mapping or an attribute-bearing record.

    Raises ``KeyError`` when the record does not carry the attribute.
    """

    if isinstance(record, Mapping):
        return record[name]
    try:
        return getattr(record, name)
    except AttributeError as exc:
        raise KeyError(name) from exc


@dataclass(frozen=True)
class SortSpec:
    """Sort field and direction."""

    field: str
    direction: str = ASC

    def __post_init__(self) -> None:
        if self.direction not in _DIRECTIONS:
            raise ValueError(f"Sort direction must be 'asc' or 'desc', got {self.direction!r}")

    @property
    def descending(self) -> bool:
        return self.direction == DESC


def toggle_sort(current: Optional[SortSpec], selected: str) -> SortSpec:
    """Return the sort after the user selects ``selected``.

    Selecting the active field flips its direction; any other field starts ascending.
    """

    if current is not None and current.field == selected:
        return SortSpec(selected, ASC if current.descending else DESC)
    return SortSpec(selected, ASC)


@dataclass(frozen=True)
class Page:
    """A zero-based page window."""

    index: int = 0
    size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"Page size must be positive, got {self.size}")

    @property
    def start(self) -> int:
        return self.index * self.size

    @property
    def stop(self) -> int:
        return self.start + self.size


@dataclass(frozen=True)
class PaginationInfo:
    """Pagination metadata rendered next to a table."""

    total_items: int
    total_pages: int
    current_page: int
    start_index: int
    end_index: int
    has_next_page: bool
    has_prev_page: bool


def pagination_info(total_items: int, page: Page) -> PaginationInfo:
    """Compute page counts and bounds for ``total_items`` rows."""

    return PaginationInfo(
        total_items=total_items,
        total_pages=math.ceil(total_items / page.size),
        current_page=page.index,
        start_index=page.start,
        end_index=min(page.stop, total_items),
        has_next_page=page.stop < total_items,
        has_prev_page=page.index > 0,
    )


@dataclass(frozen=True)
class QueryState:
    """Everything a table needs to produce its current rows."""

    search: str = ""
    sort: Optional[SortSpec] = None
    page: Page = field(default_factory=Page)

    @property
    def is_searching(self) -> bool:
        return bool(self.search.strip())

    def with_search(self, text: str) -> "QueryState":
        """New search text; the page resets to the first one."""
        return replace(self, search=text, page=Page(0, self.page.size))

    def with_sort(self, selected: str) -> "QueryState":
        """Toggle sorting on ``selected``; the page resets to the first one."""
        return replace(self, sort=toggle_sort(self.sort, selected), page=Page(0, self.page.size))

    def with_page(self, index: int) -> "QueryState":
        return replace(self, page=Page(index, self.page.size))

    def with_page_size(self, size: int) -> "QueryState":
        return replace(self, page=Page(0, size))


@dataclass(frozen=True)
class TableSchema(Generic[T]):
    """Per-record-type table capabilities.

    ``search_fields`` is the allow-list consulted by free-text search.
    ``sort_fields`` maps sortable fields to their comparison kind; when empty,
    any field the records carry may be sorted with kind inference.
    """

    name: str
    search_fields: tuple[str, ...]
    sort_fields: Mapping[str, FieldKind] = field(default_factory=dict)
    default_sort: Optional[SortSpec] = None
    getter: Callable[[T, str], Any] = get_attribute

    def kind_for(self, name: str) -> FieldKind:
        if not self.sort_fields:
            return FieldKind.AUTO
        if name not in self.sort_fields:
            raise InvalidSortField(f"{self.name} table cannot sort on {name!r}")
        return self.sort_fields[name]


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """One page of rows plus the count of rows that matched the search."""

    items: list[T]
    total_matched: int
    pagination: PaginationInfo
    is_searching: bool = False

    @property
    def has_results(self) -> bool:
        return self.total_matched > 0


def filter_records(records: Iterable[T], search: str, schema: TableSchema[T]) -> list[T]:
    """Keep records where any allow-listed field contains ``search`` (case-insensitive)."""

    items = list(records)
    if not search or not search.strip():
        return items

    needle = search.casefold()

    def _matches(record: T) -> bool:
        for name in schema.search_fields:
            try:
                haystack = fold_text(schema.getter(record, name))
            except KeyError:
                continue
            if haystack is not None and needle in haystack:
                return True
        return False

    return [record for record in items if _matches(record)]


def sort_records(records: Iterable[T], sort: Optional[SortSpec], schema: TableSchema[T]) -> list[T]:
    """Stable sort on ``sort.field``; ties keep their input order."""

    items = list(records)
    if sort is None:
        return items

    try:
        kind = schema.kind_for(sort.field)
        values = [schema.getter(record, sort.field) for record in items]
    except KeyError as exc:
        dev_log(
            None,
            "Sort requested on a missing field",
            exc=exc,
            context={"table": schema.name, "field": sort.field},
        )
        if isinstance(exc, InvalidSortField):
            raise
        raise InvalidSortField(f"{schema.name} records do not carry {sort.field!r}") from exc

    # reverse=True keeps equal values in input order
    order = sorted(
        range(len(items)),
        key=cmp_to_key(lambda i, j: compare(values[i], values[j], kind)),
        reverse=sort.descending,
    )
    return [items[i] for i in order]


def paginate(items: Sequence[T], page: Page) -> list[T]:
    """Return the rows inside ``page``; out-of-range pages are empty."""

    if page.index < 0:
        return []
    return list(items[page.start : page.stop])


def query(records: Iterable[T], state: QueryState, schema: TableSchema[T]) -> QueryResult[T]:
    """Filter, then sort, then paginate ``records``."""

    filtered = filter_records(records, state.search, schema)
    ordered = sort_records(filtered, state.sort or schema.default_sort, schema)
    items = paginate(ordered, state.page)
    logger.debug(
        "Table query",
        extra={
            "table": schema.name,
            "matched": len(filtered),
            "page": state.page.index,
            "returned": len(items),
        },
    )
    return QueryResult(
        items=items,
        total_matched=len(filtered),
        pagination=pagination_info(len(filtered), state.page),
        is_searching=state.is_searching,
    )
