"""
API request handlers.
"""

from .chat import ChatHandler
from .health import HealthHandler
from .speech import SpeechHandler

__all__ = [
    "ChatHandler",
    "HealthHandler",
    "SpeechHandler",
]
