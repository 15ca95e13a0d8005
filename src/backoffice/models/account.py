"""SQLModel data model for customer accounts."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class Account(SQLModel):
    """A customer account owning surveys, collectors and a billing ledger."""

    account_id: int
    account_name: str = Field(max_length=128)
    owner_user_name: Optional[str] = Field(default=None, max_length=128)
    company_name: Optional[str] = Field(default=None, max_length=128)
    contact_email: Optional[str] = Field(default=None, max_length=255)
    service_package_name: str = Field(default="Free", description="Current plan")
    is_active: bool = True
    status: str = Field(default="enabled", description="enabled | disabled | expired | suspended")
    insert_date: datetime
    plan_expiration_date: Optional[datetime] = None
