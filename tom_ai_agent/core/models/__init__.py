"""
Core data models for the TOM theatre assistant.
"""

from .case import TheatreCase, TheatreStaff
from .query import QueryIntent, QueryContext, DateRange
from .chat import ChatResult
from .audit import AuditRecord
from .status import HealthCheck, StoreStatus, GenerationInfo, SpeechInfo, SystemStatus

__all__ = [
    "TheatreCase",
    "TheatreStaff",
    "QueryIntent",
    "QueryContext",
    "DateRange",
    "ChatResult",
    "AuditRecord",
    "HealthCheck",
    "StoreStatus",
    "GenerationInfo",
    "SpeechInfo",
    "SystemStatus",
]
