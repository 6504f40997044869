"""
Query intent enums.
"""

from enum import Enum


class QueryType(str, Enum):
    """Classified purpose of a chat query."""

    TODAY = "today"
    TOMORROW = "tomorrow"
    LIST = "list"
    BY_SURGEON = "by_surgeon"
    BY_THEATRE = "by_theatre"
    DEFAULT = "default"
    ERROR = "error"
