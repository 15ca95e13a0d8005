"""SQLModel data models for surveys and their collectors."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class Survey(SQLModel):
    """A survey (``opinion`` in the platform API) owned by an account."""

    survey_id: int
    name: str = Field(max_length=255)
    account_id: int
    account_name: str = ""
    type_name: str = Field(default="Survey", description="Survey type display name")
    status: str = Field(default="open", description="open | closed | draft")
    is_active: bool = True
    total_votes: int = 0
    insert_date: datetime


class Collector(SQLModel):
    """A response-collection channel attached to a survey."""

    collector_id: int
    name: str = Field(max_length=255)
    account_id: int
    account_name: str = ""
    survey_id: int
    survey_name: str = ""
    status: str = Field(default="open", description="open | closed")
    started: int = 0
    completed: int = 0
    is_active: bool = True
    insert_date: datetime
    last_response_date: Optional[datetime] = None
