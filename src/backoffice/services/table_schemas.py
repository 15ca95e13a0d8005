"""Table schemas for the console's record lists."""

from __future__ import annotations

from ..models import Account, Collector, Invoice, Posting, Survey, User
from .table import SortSpec, TableSchema
from .values import FieldKind as K

USER_TABLE: TableSchema[User] = TableSchema(
    name="users",
    search_fields=("user_name", "email"),
    sort_fields={
        "user_id": K.NUMBER,
        "user_name": K.TEXT,
        "email": K.TEXT,
        "is_active": K.BOOLEAN,
        "insert_date": K.INSTANT,
        "last_login_date": K.INSTANT,
    },
    default_sort=SortSpec("user_id"),
)

ACCOUNT_TABLE: TableSchema[Account] = TableSchema(
    name="accounts",
    search_fields=("account_name", "owner_user_name", "company_name", "contact_email"),
    sort_fields={
        "account_id": K.NUMBER,
        "account_name": K.TEXT,
        "owner_user_name": K.TEXT,
        "service_package_name": K.TEXT,
        "status": K.TEXT,
        "is_active": K.BOOLEAN,
        "insert_date": K.INSTANT,
        "plan_expiration_date": K.INSTANT,
    },
    default_sort=SortSpec("account_id"),
)

SURVEY_TABLE: TableSchema[Survey] = TableSchema(
    name="surveys",
    search_fields=("name", "account_name", "type_name"),
    sort_fields={
        "survey_id": K.NUMBER,
        "name": K.TEXT,
        "account_name": K.TEXT,
        "status": K.TEXT,
        "total_votes": K.NUMBER,
        "insert_date": K.INSTANT,
    },
    default_sort=SortSpec("insert_date", "desc"),
)

COLLECTOR_TABLE: TableSchema[Collector] = TableSchema(
    name="collectors",
    search_fields=("name", "account_name", "survey_name"),
    sort_fields={
        "collector_id": K.NUMBER,
        "name": K.TEXT,
        "account_name": K.TEXT,
        "survey_name": K.TEXT,
        "status": K.TEXT,
        "started": K.NUMBER,
        "completed": K.NUMBER,
        "insert_date": K.INSTANT,
        "last_response_date": K.INSTANT,
    },
    default_sort=SortSpec("collector_id"),
)

INVOICE_TABLE: TableSchema[Invoice] = TableSchema(
    name="invoices",
    search_fields=("invoice_number", "account_name", "status"),
    sort_fields={
        "invoice_id": K.NUMBER,
        "invoice_number": K.TEXT,
        "account_name": K.TEXT,
        "invoice_date": K.INSTANT,
        "from_date": K.INSTANT,
        "status": K.TEXT,
        "amount": K.NUMBER,
    },
    default_sort=SortSpec("invoice_date", "desc"),
)

POSTING_TABLE: TableSchema[Posting] = TableSchema(
    name="postings",
    search_fields=("comments", "type_label"),
    sort_fields={
        "posting_id": K.NUMBER,
        "posted_at": K.INSTANT,
        "posting_type": K.NUMBER,
        "debit": K.NUMBER,
        "credit": K.NUMBER,
        "running_balance": K.NUMBER,
    },
    default_sort=SortSpec("posted_at", "desc"),
)

SCHEMAS: dict[str, TableSchema] = {
    schema.name: schema
    for schema in (
        USER_TABLE,
        ACCOUNT_TABLE,
        SURVEY_TABLE,
        COLLECTOR_TABLE,
        INVOICE_TABLE,
        POSTING_TABLE,
    )
}


def schema_for(entity_type: str) -> TableSchema:
    """Return the table schema registered for ``entity_type``."""

    try:
        return SCHEMAS[entity_type]
    except KeyError:
        raise KeyError(f"Unknown entity type: {entity_type!r}") from None
