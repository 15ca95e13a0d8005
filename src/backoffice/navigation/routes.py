"""Route table for the console and its compiled path matchers.

Route patterns are split once, at table construction, into literal and
``:param`` segments. Matching a request path is then a segment-by-segment
comparison; nothing is re-parsed per call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Mapping, Optional, Union

from ..devtools import dev_log
from ..logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_TAB = "details"

# Literal segment preceding a trailing parameter -> entity kind shown by that page.
ENTITY_SEGMENTS = {
    "users": "user",
    "accounts": "account",
    "collectors": "collector",
}


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Param:
    name: str


Segment = Union[Literal, Param]


def split_path(path: str) -> tuple[str, ...]:
    """Split a request path into segments, ignoring query, fragment and extra slashes."""

    bare = path.split("#", 1)[0].split("?", 1)[0]
    return tuple(part for part in bare.split("/") if part)


def normalize_path(path: str) -> str:
    return "/" + "/".join(split_path(path))


@dataclass(frozen=True)
class RoutePattern:
    """A path pattern such as ``/accounts/:id`` split into tagged segments."""

    segments: tuple[Segment, ...]

    @classmethod
    def parse(cls, pattern: str) -> "RoutePattern":
        segments: list[Segment] = []
        for part in split_path(pattern):
            if part.startswith(":"):
                if len(part) == 1:
                    raise ValueError(f"Unnamed parameter in route pattern {pattern!r}")
                segments.append(Param(part[1:]))
            else:
                segments.append(Literal(part))
        return cls(tuple(segments))

    @property
    def is_dynamic(self) -> bool:
        return any(isinstance(s, Param) for s in self.segments)

    @property
    def entity_kind(self) -> Optional[str]:
        """Entity shown by a detail page: a trailing parameter after a known collection."""
        if len(self.segments) < 2:
            return None
        *_, collection, last = self.segments
        if isinstance(last, Param) and isinstance(collection, Literal):
            return ENTITY_SEGMENTS.get(collection.text)
        return None

    def match(self, parts: tuple[str, ...]) -> Optional[dict[str, str]]:
        """Return captured parameters when ``parts`` fits this pattern."""
        if len(parts) != len(self.segments):
            return None
        params: dict[str, str] = {}
        for segment, part in zip(self.segments, parts):
            if isinstance(segment, Param):
                params[segment.name] = part
            elif segment.text != part:
                return None
        return params

    def build(self, params: Mapping[str, str]) -> Optional[str]:
        """Fill parameters into the pattern; ``None`` when one is not known."""
        parts = []
        for segment in self.segments:
            if isinstance(segment, Param):
                if segment.name not in params:
                    return None
                parts.append(params[segment.name])
            else:
                parts.append(segment.text)
        return "/" + "/".join(parts)


@dataclass(frozen=True)
class RouteNode:
    """A declared page: path pattern, crumb label, parent page and tab labels.

    ``parent_tab`` names the parent's tab that lists this page; the trail then
    shows that tab between the parent and this page.
    """

    path: str
    label: str
    parent: Optional[str] = None
    tabs: Mapping[str, str] = field(default_factory=dict)
    parent_tab: Optional[str] = None

    def tab_label(self, active_tab: Optional[str]) -> str:
        """Label of the page when shown with ``active_tab`` selected."""
        if not self.tabs:
            return self.label
        if active_tab is not None and active_tab in self.tabs:
            return self.tabs[active_tab]
        return self.tabs.get(DEFAULT_TAB, "Details")


@dataclass(frozen=True)
class CompiledRoute:
    node: RouteNode
    pattern: RoutePattern

    @property
    def key(self) -> str:
        return normalize_path(self.node.path)

    @property
    def entity_kind(self) -> Optional[str]:
        return self.pattern.entity_kind


@dataclass(frozen=True)
class RouteMatch:
    route: CompiledRoute
    params: Mapping[str, str] = field(default_factory=dict)


class RouteTable:
    """Declared routes in declaration order, compiled for matching."""

    def __init__(self, nodes: Iterable[RouteNode]):
        self._routes: list[CompiledRoute] = []
        self._by_key: dict[str, CompiledRoute] = {}
        for node in nodes:
            route = CompiledRoute(node, RoutePattern.parse(node.path))
            if route.key in self._by_key:
                raise ValueError(f"Duplicate route: {node.path}")
            self._routes.append(route)
            self._by_key[route.key] = route

    def __iter__(self) -> Iterator[CompiledRoute]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def get(self, path: str) -> Optional[CompiledRoute]:
        """Return the route declared with exactly ``path``."""
        return self._by_key.get(normalize_path(path))

    def match(self, path: str) -> Optional[RouteMatch]:
        """Find the route for a request path.

        An exact declaration wins; otherwise the first dynamic route (in
        declaration order) whose pattern fits the path is used.
        """
        exact = self.get(path)
        if exact is not None:
            return RouteMatch(exact)

        parts = split_path(path)
        candidates = []
        for route in self._routes:
            if not route.pattern.is_dynamic:
                continue
            params = route.pattern.match(parts)
            if params is not None:
                candidates.append(RouteMatch(route, params))

        if not candidates:
            return None
        if len(candidates) > 1:
            dev_log(
                None,
                "Ambiguous route match, using first declared",
                context={
                    "path": path,
                    "candidates": ",".join(c.route.node.path for c in candidates),
                },
            )
        return candidates[0]

    def ancestors(self, route: CompiledRoute) -> Optional[list[CompiledRoute]]:
        """Return the chain from the root page down to ``route``.

        A parent path that names no declared route ends the chain. ``None`` is
        returned when the parent links loop.
        """
        chain: list[CompiledRoute] = []
        seen: set[str] = set()
        current: Optional[CompiledRoute] = route
        while current is not None:
            if current.key in seen:
                logger.warning("Route parent cycle detected", extra={"route": route.node.path})
                return None
            seen.add(current.key)
            chain.append(current)
            parent = current.node.parent
            current = self.get(parent) if parent else None
        chain.reverse()
        return chain


USER_TABS = {
    "details": "User Details",
    "messages": "Messages",
    "accounts": "Related Accounts",
    "history": "History",
    "password": "Password Reset",
}

ACCOUNT_TABS = {
    "details": "Account Details",
    "users": "Users",
    "surveys": "Surveys",
    "collectors": "Collectors",
    "billing": "Billing",
    "transactions": "Transaction History",
    "payment": "Make a Payment",
    "charges": "Charges",
    "recurring": "Recurring",
    "uninvoiced": "UnInvoiced List",
    "invoices": "Invoices",
}

DEFAULT_ROUTES: tuple[RouteNode, ...] = (
    RouteNode("/dashboard", "Dashboard"),
    RouteNode("/users", "Users"),
    RouteNode("/users/:id", "User Details", parent="/users", tabs=USER_TABS),
    RouteNode("/accounts", "Accounts"),
    RouteNode("/accounts/:id", "Account Details", parent="/accounts", tabs=ACCOUNT_TABS),
    RouteNode(
        "/accounts/:id/collectors/:collectorId",
        "Collector Details",
        parent="/accounts/:id",
        parent_tab="collectors",
    ),
    RouteNode("/surveys", "Surveys"),
    RouteNode("/surveys/:id", "Survey Details", parent="/surveys"),
    RouteNode("/polls", "Polls"),
    RouteNode("/collectors", "Collectors"),
    RouteNode("/collectors/:id", "Collector Details", parent="/collectors"),
    RouteNode("/payments", "Payments"),
    RouteNode("/invoices", "Invoices"),
    RouteNode("/invoices/new", "Create Invoice", parent="/invoices"),
    RouteNode("/invoices/:id", "Invoice Details", parent="/invoices"),
    RouteNode("/billing/invoices", "Billing"),
    RouteNode("/billing/invoice-list", "Invoice List", parent="/billing/invoices"),
    RouteNode("/reports", "Reports"),
    RouteNode("/settings", "Settings"),
    RouteNode("/setup", "System"),
    RouteNode("/setup/plans", "Plans", parent="/setup"),
    RouteNode("/setup/plans/:id", "Plan Details", parent="/setup/plans"),
    RouteNode("/setup/jobs", "Jobs", parent="/setup"),
    RouteNode("/system/events", "System Events", parent="/setup"),
    RouteNode("/navigation", "Navigation Guide"),
)

DEFAULT_ROUTE_TABLE = RouteTable(DEFAULT_ROUTES)
