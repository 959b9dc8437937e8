"""
Utility modules for the gateway
"""

from .hosts import canonicalize_host, split_host_port
from .route_table import DEFAULT_ROUTES, RouteTable, resolve_host
from .config import GatewaySettings, get_gateway_settings

__all__ = [
    "canonicalize_host",
    "split_host_port",
    "DEFAULT_ROUTES",
    "RouteTable",
    "resolve_host",
    "GatewaySettings",
    "get_gateway_settings"
]
