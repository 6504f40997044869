"""
API layer for the TOM theatre assistant.
"""

from .app import create_app
from .handlers import ChatHandler, HealthHandler, SpeechHandler
from .middleware import SecurityHeaders, LoggingMiddleware

__all__ = [
    "create_app",
    "ChatHandler",
    "HealthHandler",
    "SpeechHandler",
    "SecurityHeaders",
    "LoggingMiddleware",
]
