"""
Virtual host routing gateway
"""

__version__ = "1.0.0"
