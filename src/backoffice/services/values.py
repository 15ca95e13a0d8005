"""Value coercion helpers shared by the table pipeline and the ledger.

Sort keys are built per field kind so that a single column always orders the
same way regardless of which record type it came from:

- text compares case-insensitively,
- booleans order ``False`` before ``True``,
- dates and datetimes compare by instant (ISO-8601 strings are parsed),
- ``None`` sorts after every present value.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from numbers import Number
from typing import Any, Callable, Optional

CENTS = Decimal("0.01")


class FieldKind(str, Enum):
    """How a column's values are compared."""

    AUTO = "auto"
    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    INSTANT = "instant"


SortKey = tuple

# Present values rank before missing ones; the kind rank keeps mixed columns totally ordered.
_PRESENT, _MISSING = 0, 1
_RANK_NUMBER, _RANK_INSTANT, _RANK_TEXT = 0, 1, 2


def parse_instant(value: str) -> datetime:
    """Parse an ISO-8601 date or datetime string, accepting a trailing ``Z``."""

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = f"{text[:-1]}+00:00"
    return datetime.fromisoformat(text)


def to_utc(value: date | datetime | str) -> datetime:
    """Return an aware UTC datetime for a date, datetime or ISO string.

    Naive values are read as UTC so the result does not depend on the host zone.
    """

    if isinstance(value, str):
        value = parse_instant(value)
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_timestamp(value: date | datetime | str) -> float:
    """Return the POSIX instant for a date, datetime or ISO string."""

    return to_utc(value).timestamp()


def fold_text(value: Any) -> Optional[str]:
    """Case-fold a value for substring matching; ``None`` stays ``None``."""

    if value is None:
        return None
    if isinstance(value, Enum):
        value = value.value
    return str(value).casefold()


def _text_key(value: Any) -> SortKey:
    return (_PRESENT, _RANK_TEXT, fold_text(value))


def _number_key(value: Any) -> SortKey:
    return (_PRESENT, _RANK_NUMBER, value)


def _boolean_key(value: Any) -> SortKey:
    return (_PRESENT, _RANK_NUMBER, 1 if value else 0)


def _instant_key(value: Any) -> SortKey:
    return (_PRESENT, _RANK_INSTANT, to_timestamp(value))


def _auto_key(value: Any) -> SortKey:
    if isinstance(value, bool):
        return _boolean_key(value)
    if isinstance(value, (date, datetime)):
        return _instant_key(value)
    if isinstance(value, Number):
        return _number_key(value)
    return _text_key(value)


_KEY_BUILDERS: dict[FieldKind, Callable[[Any], SortKey]] = {
    FieldKind.AUTO: _auto_key,
    FieldKind.TEXT: _text_key,
    FieldKind.NUMBER: _number_key,
    FieldKind.BOOLEAN: _boolean_key,
    FieldKind.INSTANT: _instant_key,
}


def sort_key(value: Any, kind: FieldKind = FieldKind.AUTO) -> SortKey:
    """Return a comparable key for ``value`` under the comparison rules of ``kind``."""

    if value is None:
        return (_MISSING, 0, 0)
    return _KEY_BUILDERS[FieldKind(kind)](value)


def compare(left: Any, right: Any, kind: FieldKind = FieldKind.AUTO) -> int:
    """Three-way comparison of two column values (-1, 0 or 1)."""

    a, b = sort_key(left, kind), sort_key(right, kind)
    return (a > b) - (a < b)


def to_cents(amount: float | int | Decimal | None) -> Decimal:
    """Convert a money amount to an exact two-place decimal."""

    if amount is None:
        return Decimal("0.00")
    return Decimal(str(amount)).quantize(CENTS, rounding=ROUND_HALF_UP)


def from_cents(amount: Decimal) -> float:
    return float(amount.quantize(CENTS, rounding=ROUND_HALF_UP))


def format_money(amount: Optional[float]) -> str:
    """Format an amount as ``$1,234.50``; negatives get a leading minus."""

    if amount is None:
        return ""
    cents = to_cents(amount)
    sign = "-" if cents < 0 else ""
    return f"{sign}${abs(cents):,.2f}"
