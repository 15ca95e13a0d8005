"""Breadcrumb trail resolution for the current page."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Mapping, Optional, Sequence
from urllib.parse import urlencode

from .routes import DEFAULT_ROUTE_TABLE, CompiledRoute, RouteTable
from .tabs import TAB_PARAM

HOME_LABEL = "Home"
DEFAULT_PAGE_TITLE = "Admin Dashboard"


@dataclass(frozen=True)
class BreadcrumbItem:
    """A crumb label with the path it navigates to, if any."""

    label: str
    path: Optional[str] = None

    @property
    def navigable(self) -> bool:
        return self.path is not None


@dataclass(frozen=True)
class BreadcrumbContext:
    """Page data known at render time.

    ``entity_names`` maps an entity kind (``user``, ``account``, ``collector``)
    to the display name fetched for the current page; it fills in as lookups
    complete, and resolution is simply re-run on the next render.
    """

    custom_items: Optional[Sequence[BreadcrumbItem]] = None
    entity_names: Mapping[str, str] = field(default_factory=dict)
    active_tab: Optional[str] = None

    def with_entity_name(self, kind: str, name: str) -> "BreadcrumbContext":
        return replace(self, entity_names={**self.entity_names, kind: name})

    def with_tab(self, tab: Optional[str]) -> "BreadcrumbContext":
        return replace(self, active_tab=tab)


def resolve(
    path: str,
    context: Optional[BreadcrumbContext] = None,
    table: RouteTable = DEFAULT_ROUTE_TABLE,
) -> list[BreadcrumbItem]:
    """Build the breadcrumb trail for ``path``.

    Returns an empty list when the path matches no route or its parent links loop.
    The last crumb never carries a path.
    """

    context = context or BreadcrumbContext()
    if context.custom_items:
        return list(context.custom_items)

    match = table.match(path)
    if match is None:
        return []
    chain = table.ancestors(match.route)
    if not chain:
        return []

    items: list[BreadcrumbItem] = []
    parent_path: Optional[str] = None
    for index, route in enumerate(chain):
        if index and route.node.parent_tab:
            items.append(_parent_tab_crumb(chain[index - 1], route.node.parent_tab, parent_path))

        crumb_path = route.pattern.build(match.params)
        name = context.entity_names.get(route.entity_kind) if route.entity_kind else None
        if index < len(chain) - 1:
            items.append(BreadcrumbItem(name or route.node.label, crumb_path))
        else:
            if name:
                items.append(BreadcrumbItem(name))
            items.append(BreadcrumbItem(route.node.tab_label(context.active_tab)))
        parent_path = crumb_path
    return items


def _parent_tab_crumb(parent: CompiledRoute, tab: str, parent_path: Optional[str]) -> BreadcrumbItem:
    """Crumb for the parent page opened on the tab that lists the child."""

    label = parent.node.tabs.get(tab, tab.title())
    if parent_path is None:
        return BreadcrumbItem(label)
    return BreadcrumbItem(label, f"{parent_path}?{urlencode({TAB_PARAM: tab})}")


def with_home_default(items: Sequence[BreadcrumbItem]) -> list[BreadcrumbItem]:
    """Substitute a single Home crumb for an empty trail."""

    return list(items) if items else [BreadcrumbItem(HOME_LABEL)]


def page_title(items: Sequence[BreadcrumbItem]) -> str:
    """Title for the page: the last crumb's label."""

    return items[-1].label if items else DEFAULT_PAGE_TITLE
