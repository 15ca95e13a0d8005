"""In-memory record store used in place of the platform REST backend."""

from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Iterable, Mapping, Optional

from ..logging_config import get_logger
from ..models import Account, Collector, Invoice, Survey, User
from .ledger import month_bounds
from .mock_ledger import FIRST_POSTING_ID, generate_postings
from .table import filter_records
from .table_schemas import schema_for

logger = get_logger(__name__)

ENTITY_TYPES = ("users", "accounts", "surveys", "collectors", "invoices", "postings")

DATE_FIELDS = {
    "users": "insert_date",
    "accounts": "insert_date",
    "surveys": "insert_date",
    "collectors": "insert_date",
    "invoices": "invoice_date",
    "postings": "posted_at",
}


@dataclass(frozen=True)
class RecordQuery:
    """Server-side narrowing applied before records reach a table."""

    search: str = ""
    status: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    account_id: Optional[int] = None


def _as_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    return value


class InMemoryRecordStore:
    """Typed records grouped by entity type."""

    def __init__(self, records: Optional[Mapping[str, Iterable[Any]]] = None) -> None:
        self._records: dict[str, list[Any]] = {name: [] for name in ENTITY_TYPES}
        for entity_type, items in (records or {}).items():
            self._bucket(entity_type).extend(items)

    def _bucket(self, entity_type: str) -> list[Any]:
        try:
            return self._records[entity_type]
        except KeyError:
            raise KeyError(f"Unknown entity type: {entity_type!r}") from None

    def count(self, entity_type: str) -> int:
        return len(self._bucket(entity_type))

    def list(self, entity_type: str, query: Optional[RecordQuery] = None) -> list[Any]:
        """Return records of ``entity_type`` matching ``query``."""

        query = query or RecordQuery()
        schema = schema_for(entity_type)
        records = filter_records(self._bucket(entity_type), query.search, schema)

        if query.status is not None:
            wanted = query.status.casefold()
            records = [
                r for r in records if str(getattr(r, "status", "")).casefold() == wanted
            ]

        if query.account_id is not None:
            records = [r for r in records if getattr(r, "account_id", None) == query.account_id]

        if query.date_from is not None or query.date_to is not None:
            date_field = DATE_FIELDS[entity_type]

            def _in_range(record: Any) -> bool:
                value = _as_date(getattr(record, date_field, None))
                if value is None:
                    return False
                if query.date_from is not None and value < query.date_from:
                    return False
                if query.date_to is not None and value > query.date_to:
                    return False
                return True

            records = [r for r in records if _in_range(r)]

        logger.debug(
            "Record store list",
            extra={"entity_type": entity_type, "returned": len(records)},
        )
        return records


_FIRST_NAMES = ["alice", "bob", "carl", "dana", "erin", "farid", "grace", "hiro", "ines", "jonas"]
_COMPANIES = ["Acme Research", "Blue Harbor", "Civic Pulse", "Delta Insights", "Evergreen Labs"]
_PLANS = ["Free", "Basic", "Pro", "Enterprise"]
_ACCOUNT_STATUSES = ["enabled", "enabled", "enabled", "disabled", "expired", "suspended"]
_INVOICE_STATUSES = ["draft", "open", "paid", "paid", "void"]


def seed_demo_store(seed: int = 7, *, today: Optional[date] = None) -> InMemoryRecordStore:
    """Build a deterministic demo dataset for every entity type."""

    rng = random.Random(seed)
    today = today or date.today()
    base = datetime(today.year, today.month, today.day, 9, 0)

    users = []
    for index, first in enumerate(_FIRST_NAMES, start=1):
        users.append(
            User(
                user_id=index,
                user_name=first,
                email=f"{first}@{rng.choice(['example.com', 'test.com'])}",
                display_name=first.title(),
                is_active=rng.random() > 0.2,
                status=rng.choice(["active", "active", "disabled", "pending"]),
                insert_date=base - timedelta(days=rng.randint(1, 400)),
                last_login_date=base - timedelta(days=rng.randint(0, 30)),
            )
        )

    accounts = []
    for index, company in enumerate(_COMPANIES, start=1):
        owner = users[(index - 1) % len(users)]
        status = rng.choice(_ACCOUNT_STATUSES)
        accounts.append(
            Account(
                account_id=index,
                account_name=company,
                owner_user_name=owner.user_name,
                company_name=company,
                contact_email=owner.email,
                service_package_name=rng.choice(_PLANS),
                is_active=status == "enabled",
                status=status,
                insert_date=base - timedelta(days=rng.randint(30, 700)),
            )
        )

    surveys, collectors, invoices, postings = [], [], [], []
    for account in accounts:
        for n in range(rng.randint(1, 3)):
            survey = Survey(
                survey_id=len(surveys) + 1,
                name=f"{account.account_name} survey {n + 1}",
                account_id=account.account_id,
                account_name=account.account_name,
                type_name=rng.choice(["Survey", "Poll", "Quiz"]),
                status=rng.choice(["open", "closed", "draft"]),
                total_votes=rng.randint(0, 2000),
                insert_date=base - timedelta(days=rng.randint(1, 300)),
            )
            surveys.append(survey)
            started = rng.randint(0, 800)
            collectors.append(
                Collector(
                    collector_id=len(collectors) + 1,
                    name=f"Web link {len(collectors) + 1}",
                    account_id=account.account_id,
                    account_name=account.account_name,
                    survey_id=survey.survey_id,
                    survey_name=survey.name,
                    status=rng.choice(["open", "closed"]),
                    started=started,
                    completed=rng.randint(0, started),
                    insert_date=survey.insert_date,
                )
            )

        for months_ago in range(1, 4):
            index = today.year * 12 + (today.month - 1) - months_ago
            from_date, to_date = month_bounds(index // 12, index % 12 + 1)
            invoice_id = len(invoices) + 1
            invoices.append(
                Invoice(
                    invoice_id=invoice_id,
                    invoice_number=f"INV-{invoice_id:05d}",
                    account_id=account.account_id,
                    account_name=account.account_name,
                    from_date=from_date,
                    to_date=to_date,
                    invoice_date=to_date + timedelta(days=1),
                    status=rng.choice(_INVOICE_STATUSES),
                    amount=float(rng.randint(20, 900)),
                )
            )

        postings.extend(
            generate_postings(
                account.account_id,
                seed=rng.randint(0, 10_000),
                today=today,
                first_id=len(postings) + FIRST_POSTING_ID,
            )
        )

    return InMemoryRecordStore(
        {
            "users": users,
            "accounts": accounts,
            "surveys": surveys,
            "collectors": collectors,
            "invoices": invoices,
            "postings": postings,
        }
    )
