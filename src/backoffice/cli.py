"""Command line entry points for the back-office console."""

from __future__ import annotations

from typing import Any, Optional, Sequence

import click

from . import devtools
from .config import BaseConfig
from .logging_config import get_logger, setup_logging
from .navigation.breadcrumbs import BreadcrumbContext, page_title, resolve, with_home_default
from .navigation.tabs import requested_tab
from .services.ledger import accumulate, account_balance
from .services.mock_ledger import generate_postings
from .services.record_store import ENTITY_TYPES, seed_demo_store
from .services.table import ASC, DESC, InvalidSortField, Page, QueryState, SortSpec, get_attribute, query
from .services.table_schemas import schema_for
from .services.values import format_money

logger = get_logger(__name__)

# Columns printed by ``backoffice table`` for each entity type.
TABLE_COLUMNS: dict[str, tuple[str, ...]] = {
    "users": ("user_id", "user_name", "email", "status", "insert_date"),
    "accounts": ("account_id", "account_name", "owner_user_name", "service_package_name", "status"),
    "surveys": ("survey_id", "name", "account_name", "status", "total_votes"),
    "collectors": ("collector_id", "name", "survey_name", "status", "started", "completed"),
    "invoices": ("invoice_number", "account_name", "invoice_date", "status", "amount"),
    "postings": ("posting_id", "posted_at", "type_label", "debit", "credit", "comments"),
}


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if hasattr(value, "strftime"):
        return value.strftime("%Y-%m-%d")
    return str(value)


def _render_rows(records: Sequence[Any], fields: Sequence[str]) -> list[str]:
    table = [list(fields)] + [[_cell(get_attribute(r, f)) for f in fields] for r in records]
    widths = [max(len(row[i]) for row in table) for i in range(len(fields))]
    return ["  ".join(cell.ljust(w) for cell, w in zip(row, widths)).rstrip() for row in table]


@click.group()
@click.pass_context
def main(ctx: click.Context) -> None:
    """Back-office console tools."""

    config = BaseConfig()
    devtools.configure(config)
    setup_logging(config)
    ctx.obj = config


@main.command("table")
@click.argument("entity", type=click.Choice(ENTITY_TYPES))
@click.option("--search", default="", help="Free-text search")
@click.option("--sort", "sort_field", default=None, help="Field to sort on")
@click.option("--desc", is_flag=True, default=False, help="Sort descending")
@click.option("--page", default=1, type=click.IntRange(min=1), show_default=True)
@click.option("--size", default=None, type=click.IntRange(min=1), help="Rows per page")
@click.pass_obj
def table_command(
    config: BaseConfig,
    entity: str,
    search: str,
    sort_field: Optional[str],
    desc: bool,
    page: int,
    size: Optional[int],
) -> None:
    """List ENTITY records from the demo store."""

    store = seed_demo_store()
    state = QueryState(
        search=search,
        sort=SortSpec(sort_field, DESC if desc else ASC) if sort_field else None,
        page=Page(page - 1, size or config.PAGE_SIZE),
    )
    try:
        result = query(store.list(entity), state, schema_for(entity))
    except InvalidSortField as exc:
        raise click.BadParameter(str(exc.args[0]), param_hint="--sort") from exc

    info = result.pagination
    click.echo(
        f"{entity}: {result.total_matched} matched, page {page} of {max(info.total_pages, 1)}"
    )
    if not result.items:
        click.echo("No records found")
        return
    for line in _render_rows(result.items, TABLE_COLUMNS[entity]):
        click.echo(line)


@main.command("breadcrumbs")
@click.argument("path")
@click.option("--tab", default=None, help="Active tab key (defaults to ?tab= in PATH)")
@click.option("--user-name", default=None)
@click.option("--account-name", default=None)
@click.option("--collector-name", default=None)
def breadcrumbs_command(
    path: str,
    tab: Optional[str],
    user_name: Optional[str],
    account_name: Optional[str],
    collector_name: Optional[str],
) -> None:
    """Print the breadcrumb trail for PATH."""

    if tab is None and "?" in path:
        tab = requested_tab(path.split("?", 1)[1])

    context = BreadcrumbContext(active_tab=tab)
    for kind, name in (("user", user_name), ("account", account_name), ("collector", collector_name)):
        if name:
            context = context.with_entity_name(kind, name)

    items = resolve(path, context)
    click.echo(f"Title: {page_title(items)}")
    for item in with_home_default(items):
        click.echo(f"{item.label} -> {item.path}" if item.navigable else item.label)


@main.command("ledger")
@click.option("--account", "account_id", default=1, show_default=True, type=int)
@click.option("--seed", default=7, show_default=True, type=int)
@click.option("--months", default=6, show_default=True, type=click.IntRange(min=0))
def ledger_command(account_id: int, seed: int, months: int) -> None:
    """Print a generated ledger for an account, newest month first."""

    postings = generate_postings(account_id, months=months, seed=seed)
    result = accumulate(postings)
    summary = account_balance(result)

    click.echo(f"Account {account_id} balance: {format_money(summary.balance)}")
    if summary.last_payment is not None:
        click.echo(
            f"Last payment: {format_money(summary.last_payment.credit)} "
            f"on {summary.last_payment.posted_at:%Y-%m-%d}"
        )
    for bucket in result.buckets:
        click.echo("")
        click.echo(
            f"{bucket.label}: debits {format_money(bucket.total_debit)}, "
            f"credits {format_money(bucket.total_credit)}, "
            f"closing {format_money(bucket.closing_balance)}"
        )
        for posting in bucket.postings:
            click.echo(
                f"  {posting.posted_at:%Y-%m-%d}  {posting.type_label:<16} "
                f"{format_money(-posting.debit if posting.debit else posting.credit):>12}  "
                f"{format_money(posting.running_balance):>12}"
            )
    logger.info("Ledger printed", extra={"account_id": account_id, "postings": len(result.ordered)})


if __name__ == "__main__":  # pragma: no cover
    main()
