"""
Utility modules for the TOM theatre assistant.
"""

from .date import DateParser, coerce_datetime
from .logging import configure_logging, get_logger

__all__ = [
    "DateParser",
    "coerce_datetime",
    "configure_logging",
    "get_logger",
]
