"""SQLModel data model for back-office user records."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class User(SQLModel):
    """A platform user as listed in the Users table."""

    user_id: int = Field(description="Platform user identifier")
    user_name: str = Field(max_length=128)
    email: str = Field(default="", max_length=255)
    display_name: Optional[str] = Field(default=None, max_length=128)
    country_name: Optional[str] = Field(default=None, max_length=64)
    is_active: bool = True
    status: str = Field(default="active", description="active | disabled | pending")
    insert_date: datetime
    last_login_date: Optional[datetime] = None
