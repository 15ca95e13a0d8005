"""Flet controls for console pages."""

from .breadcrumb_bar import build_breadcrumb_bar
from .ledger_panel import build_ledger_panel
from .record_table import TableColumn, build_record_table
from .widgets import build_card, empty_state

__all__ = [
    "TableColumn",
    "build_breadcrumb_bar",
    "build_card",
    "build_ledger_panel",
    "build_record_table",
    "empty_state",
]
