"""
API routes for the gateway
"""

from . import health, hosts

__all__ = ["health", "hosts"]
