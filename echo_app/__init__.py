"""
Identity echo backend used to check gateway routing end to end
"""

__version__ = "1.0.0"
