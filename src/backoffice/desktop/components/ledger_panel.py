"""Month-by-month ledger rendering for the account transactions tab."""

from __future__ import annotations

import flet as ft

from ...services.ledger import LedgerResult, MonthBucket
from ...services.values import format_money
from .widgets import build_card, empty_state

EMPTY_MESSAGE = "No transactions for this account"


def bucket_summary(bucket: MonthBucket) -> str:
    return (
        f"Debits {format_money(bucket.total_debit)} · "
        f"Credits {format_money(bucket.total_credit)} · "
        f"Closing {format_money(bucket.closing_balance)}"
    )


def _bucket_table(bucket: MonthBucket) -> ft.DataTable:
    return ft.DataTable(
        columns=[
            ft.DataColumn(ft.Text("Date")),
            ft.DataColumn(ft.Text("Type")),
            ft.DataColumn(ft.Text("Comments")),
            ft.DataColumn(ft.Text("Debit"), numeric=True),
            ft.DataColumn(ft.Text("Credit"), numeric=True),
            ft.DataColumn(ft.Text("Balance"), numeric=True),
        ],
        rows=[
            ft.DataRow(
                cells=[
                    ft.DataCell(ft.Text(posting.posted_at.strftime("%Y-%m-%d"))),
                    ft.DataCell(ft.Text(posting.type_label)),
                    ft.DataCell(ft.Text(posting.comments)),
                    ft.DataCell(ft.Text(format_money(posting.debit) if posting.debit else "")),
                    ft.DataCell(ft.Text(format_money(posting.credit) if posting.credit else "")),
                    ft.DataCell(ft.Text(format_money(posting.running_balance))),
                ]
            )
            for posting in bucket.postings
        ],
    )


def build_ledger_panel(result: LedgerResult) -> ft.Control:
    """One card per month bucket, newest month first, under the current balance."""

    if not result.buckets:
        return empty_state(EMPTY_MESSAGE)

    cards = [
        build_card(bucket.label, _bucket_table(bucket), subtitle=bucket_summary(bucket))
        for bucket in result.buckets
    ]
    header = ft.Text(
        f"Current balance {format_money(result.balance)}", size=20, weight=ft.FontWeight.BOLD
    )
    return ft.Column([header, *cards], spacing=12, scroll=ft.ScrollMode.AUTO)
