"""Pytest configuration and shared fixtures for backoffice tests.

This module provides record factories, a seeded demo store, and an isolated
configuration so tests never write logs into the working directory.
"""

from __future__ import annotations

import itertools
import logging
from datetime import date, datetime
from typing import Any

import pytest
from hypothesis import HealthCheck, settings

from backoffice import devtools
from backoffice.logging_config import ROOT_LOGGER_NAME
from backoffice.models import Account, Posting, PostingType, User
from backoffice.services.record_store import seed_demo_store

# Fixed "today" for anything date-relative.
TODAY = date(2026, 3, 15)

# Property tests share the autouse config fixture, which holds no per-example state.
settings.register_profile(
    "backoffice",
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("backoffice")


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Point configuration at a temporary data dir and reset dev diagnostics.

    Returns:
        Path: The data directory used by the test
    """

    data_dir = tmp_path / "instance"
    monkeypatch.setenv("BACKOFFICE_DATA_DIR", str(data_dir))
    monkeypatch.setenv("BACKOFFICE_DEV_MODE", "true")
    monkeypatch.delenv("BACKOFFICE_PAGE_SIZE", raising=False)
    monkeypatch.delenv("BACKOFFICE_LOG_LEVEL", raising=False)
    devtools.configure(None)
    yield data_dir
    devtools.configure(None)
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        handler.close()
    root.handlers.clear()


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def user_factory():
    """Factory for creating users.

    Returns:
        Callable: Function that builds User instances
    """

    ids = itertools.count(1)

    def _create_user(user_name: str = "tester", **fields: Any) -> User:
        """Create a user with sensible defaults.

        Args:
            user_name: Login name
            **fields: Overrides for any other User field

        Returns:
            User: New user instance
        """
        fields.setdefault("user_id", next(ids))
        fields.setdefault("email", f"{user_name}@example.com")
        fields.setdefault("insert_date", datetime(2025, 1, 1, 9, 0))
        return User(user_name=user_name, **fields)

    return _create_user


@pytest.fixture
def account_factory():
    """Factory for creating accounts.

    Returns:
        Callable: Function that builds Account instances
    """

    ids = itertools.count(1)

    def _create_account(account_name: str = "Test Account", **fields: Any) -> Account:
        fields.setdefault("account_id", next(ids))
        fields.setdefault("insert_date", datetime(2025, 1, 1, 9, 0))
        return Account(account_name=account_name, **fields)

    return _create_account


@pytest.fixture
def posting_factory():
    """Factory for creating ledger postings.

    Returns:
        Callable: Function that builds Posting instances with the amount on
        the side dictated by the posting type
    """

    ids = itertools.count(1)

    def _create_posting(
        posting_type: PostingType,
        amount: float,
        posted_at: datetime | date,
        account_id: int = 1,
        **fields: Any,
    ) -> Posting:
        """Create a posting.

        Args:
            posting_type: Ledger posting type
            amount: Positive amount, placed on the debit or credit side
            posted_at: Posting date; plain dates are taken at midnight
            account_id: Owning account

        Returns:
            Posting: New posting instance
        """
        if not isinstance(posted_at, datetime):
            posted_at = datetime(posted_at.year, posted_at.month, posted_at.day)
        return Posting.for_type(
            posting_type,
            amount,
            posted_at=posted_at,
            posting_id=next(ids),
            account_id=account_id,
            **fields,
        )

    return _create_posting


@pytest.fixture
def demo_store():
    """Deterministic seeded store anchored at ``TODAY``."""

    return seed_demo_store(seed=7, today=TODAY)

