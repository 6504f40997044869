"""
Base exception.
"""


class TomError(Exception):
    """Base exception for the TOM theatre assistant."""
    pass
