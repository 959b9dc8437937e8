"""
Static host to route table and the resolver on top of it
"""

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from gateway.models.routing import HostRoute
from gateway.utils.hosts import canonicalize_host

DEFAULT_ROUTES: Mapping[str, str] = MappingProxyType({
    "mango.com": "site-mango",
    "apple.com": "site-apple",
})

RouteEntries = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


class RouteTable:
    """
    Read-only mapping of canonical host key to route identifier

    Hosts are canonicalized on the way in, so configuration may use any
    casing or carry a port. Later entries win when two hosts canonicalize
    to the same key. Hosts that canonicalize to "" are dropped.
    """

    __slots__ = ("_routes",)

    def __init__(self, entries: RouteEntries = ()):
        items = entries.items() if isinstance(entries, Mapping) else entries
        routes: Dict[str, str] = {}
        for host, route in items:
            key = canonicalize_host(host)
            if key:
                routes[key] = route
        self._routes = MappingProxyType(routes)

    @classmethod
    def default(cls) -> "RouteTable":
        return cls(DEFAULT_ROUTES)

    def lookup(self, key: str) -> Optional[str]:
        """Exact match on an already canonical key"""
        return self._routes.get(key)

    def resolve(self, raw_host: str) -> Optional[HostRoute]:
        return resolve_host(raw_host, self)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._routes)

    def __contains__(self, key: object) -> bool:
        return key in self._routes

    def __iter__(self) -> Iterator[str]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"RouteTable({dict(self._routes)!r})"


def resolve_host(raw_host: str, table: RouteTable) -> Optional[HostRoute]:
    """
    Resolve a raw Host header value against a route table

    Returns:
        HostRoute for a known host, None when the host is empty or unmapped
    """
    key = canonicalize_host(raw_host)
    if not key:
        return None

    route = table.lookup(key)
    if route is None:
        return None

    return HostRoute(host=key, route=route)
