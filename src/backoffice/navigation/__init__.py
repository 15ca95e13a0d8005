"""Route table, breadcrumb resolution and tab state for console pages."""

from .breadcrumbs import (
    BreadcrumbContext,
    BreadcrumbItem,
    page_title,
    resolve,
    with_home_default,
)
from .routes import DEFAULT_ROUTE_TABLE, RouteNode, RouteTable

__all__ = [
    "BreadcrumbContext",
    "BreadcrumbItem",
    "DEFAULT_ROUTE_TABLE",
    "RouteNode",
    "RouteTable",
    "page_title",
    "resolve",
    "with_home_default",
]
