"""
Record store exceptions.
"""

from .base import TomError


class NotFoundError(TomError):
    """Exception raised when an update or delete targets an unknown id."""
    pass
