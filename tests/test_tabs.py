"""Tests for ``?tab=`` query parameter handling."""

from __future__ import annotations

from urllib.parse import parse_qs

from backoffice.navigation.tabs import (
    TAB_NAMES,
    active_tab_index,
    active_tab_name,
    query_with_tab,
    requested_tab,
    tab_index,
    tab_name,
)


def test_missing_tab_selects_first():
    assert active_tab_index("") == 0
    assert active_tab_name("?foo=1") == "details"


def test_known_tab_selects_its_index():
    assert active_tab_index("?tab=billing") == TAB_NAMES.index("billing")


def test_unknown_tab_selects_first():
    assert active_tab_index("tab=nope") == 0


def test_selecting_a_tab_keeps_other_params():
    query = query_with_tab("page=2&tab=users", TAB_NAMES.index("invoices"))
    assert parse_qs(query) == {"page": ["2"], "tab": ["invoices"]}


def test_selecting_the_default_tab_drops_the_param():
    assert query_with_tab("tab=billing&page=2", 0) == "page=2"


def test_out_of_range_index_leaves_query_unchanged():
    assert query_with_tab("tab=billing", 99) == "tab=billing"


def test_index_name_lookup():
    assert tab_name(1) == "users"
    assert tab_name(-1) is None
    assert tab_name(len(TAB_NAMES)) is None
    assert tab_index("transactions") == TAB_NAMES.index("transactions")
    assert tab_index("unknown") == 0


def test_custom_tab_names_and_param():
    names = ("details", "messages", "history")
    assert active_tab_index("view=history", names, param="view") == 2


def test_requested_tab_returns_raw_value():
    assert requested_tab("?tab=messages&x=1") == "messages"
    assert requested_tab("tab=") is None
    assert requested_tab("x=1") is None
