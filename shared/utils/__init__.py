"""
Shared utilities for the vhost gateway services

This package contains common utilities used by the gateway and echo service.
"""

from .logger import setup_logging, init_logging, get_logger

__all__ = [
    "setup_logging",
    "init_logging",
    "get_logger",
]

__version__ = "1.0.0"
