"""
Data models for the gateway
"""

from .routing import HostRoute, HealthResponse

__all__ = [
    "HostRoute",
    "HealthResponse"
]
