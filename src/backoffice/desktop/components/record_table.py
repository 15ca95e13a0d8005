"""Data table rendering of a table query result."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Optional, Sequence

import flet as ft

from ...services.table import QueryResult, QueryState, get_attribute
from .widgets import empty_state

EMPTY_MESSAGE = "No records found"


@dataclass(frozen=True)
class TableColumn:
    """A rendered column: the record field, its header and an optional formatter."""

    field: str
    label: str
    numeric: bool = False
    sortable: bool = True
    formatter: Optional[Callable[[Any], str]] = None

    def render(self, value: Any) -> str:
        if self.formatter is not None:
            return self.formatter(value)
        return format_cell(value)


def format_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Enum):
        return str(value.name).replace("_", " ").title()
    return str(value)


def pagination_caption(result: QueryResult) -> str:
    """Caption such as ``Showing 26-50 of 120``."""

    info = result.pagination
    if not result.items:
        return f"Showing 0 of {info.total_items}"
    return f"Showing {info.start_index + 1}-{info.end_index} of {info.total_items}"


def build_record_table(
    result: QueryResult,
    columns: Sequence[TableColumn],
    *,
    state: Optional[QueryState] = None,
    on_sort: Optional[Callable[[str], None]] = None,
    getter: Callable[[Any, str], Any] = get_attribute,
) -> ft.Control:
    """Render one page of ``result``.

    A result with no matching records renders the empty-state placeholder
    instead of a table. Clicking a sortable header calls ``on_sort(field)``.
    """

    if not result.has_results:
        return empty_state(EMPTY_MESSAGE)

    sort = state.sort if state is not None else None
    data_columns = []
    for column in columns:
        handler = None
        if on_sort is not None and column.sortable:
            handler = lambda _e, field=column.field: on_sort(field)
        data_columns.append(
            ft.DataColumn(ft.Text(column.label), numeric=column.numeric, on_sort=handler)
        )

    rows = [
        ft.DataRow(
            cells=[ft.DataCell(ft.Text(column.render(getter(record, column.field)))) for column in columns]
        )
        for record in result.items
    ]

    sort_index = None
    if sort is not None:
        fields = [column.field for column in columns]
        if sort.field in fields:
            sort_index = fields.index(sort.field)

    table = ft.DataTable(
        columns=data_columns,
        rows=rows,
        sort_column_index=sort_index,
        sort_ascending=not sort.descending if sort is not None else True,
        heading_row_height=40,
        data_row_min_height=36,
    )

    return ft.Column(
        [
            ft.Row([table], scroll=ft.ScrollMode.AUTO),
            ft.Text(pagination_caption(result), size=12, color=ft.Colors.ON_SURFACE_VARIANT),
        ],
        spacing=8,
    )
