"""
Custom exceptions for the TOM theatre assistant.
"""

from .base import TomError
from .collaborator import ConfigurationError, UpstreamError
from .records import NotFoundError

__all__ = [
    "TomError",
    "ConfigurationError",
    "UpstreamError",
    "NotFoundError",
]
