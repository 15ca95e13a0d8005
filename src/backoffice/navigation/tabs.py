"""Tab selection persisted in the page's ``?tab=`` query parameter."""

from __future__ import annotations

from typing import Optional, Sequence
from urllib.parse import parse_qsl, urlencode

from .routes import ACCOUNT_TABS

TAB_PARAM = "tab"

# Order matches the account details page; index 0 is the default tab.
TAB_NAMES: tuple[str, ...] = tuple(ACCOUNT_TABS)


def _pairs(query: str) -> list[tuple[str, str]]:
    return parse_qsl(query.lstrip("?"), keep_blank_values=True)


def active_tab_index(
    query: str, tab_names: Sequence[str] = TAB_NAMES, param: str = TAB_PARAM
) -> int:
    """Index of the tab named in ``query``; missing or unknown tabs select 0."""

    for key, value in _pairs(query):
        if key == param:
            return tab_names.index(value) if value in tab_names else 0
    return 0


def active_tab_name(
    query: str, tab_names: Sequence[str] = TAB_NAMES, param: str = TAB_PARAM
) -> str:
    return tab_names[active_tab_index(query, tab_names, param)]


def query_with_tab(
    query: str, tab_index: int, tab_names: Sequence[str] = TAB_NAMES, param: str = TAB_PARAM
) -> str:
    """Return ``query`` with the tab parameter updated; other parameters are kept.

    The default tab (index 0) drops the parameter. Indices past the end leave
    the query unchanged.
    """

    pairs = _pairs(query)
    if tab_index == 0:
        pairs = [(k, v) for k, v in pairs if k != param]
    elif 0 < tab_index < len(tab_names):
        pairs = [(k, v) for k, v in pairs if k != param] + [(param, tab_names[tab_index])]
    return urlencode(pairs)


def tab_name(index: int, tab_names: Sequence[str] = TAB_NAMES) -> Optional[str]:
    """Tab name for ``index``, or None when out of range."""

    if 0 <= index < len(tab_names):
        return tab_names[index]
    return None


def tab_index(name: str, tab_names: Sequence[str] = TAB_NAMES) -> int:
    return tab_names.index(name) if name in tab_names else 0


def requested_tab(query: str, param: str = TAB_PARAM) -> Optional[str]:
    """Raw tab key named in ``query``, unvalidated."""

    for key, value in _pairs(query):
        if key == param:
            return value or None
    return None
