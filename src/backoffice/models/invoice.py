"""SQLModel data model for billing invoices."""

from __future__ import annotations

from datetime import date

from sqlmodel import Field, SQLModel


class Invoice(SQLModel):
    """An invoice issued to an account for a billing period."""

    invoice_id: int
    invoice_number: str = Field(max_length=32)
    account_id: int
    account_name: str = ""
    from_date: date
    to_date: date
    invoice_date: date
    status: str = Field(default="open", description="draft | open | paid | void")
    amount: float = 0.0
    currency: str = Field(default="USD", max_length=3, description="ISO-4217 currency code")
