"""
Service layer for the TOM theatre assistant.
"""

from .audit import AuditLogService
from .generation import AzureOpenAIService
from .orchestration import ServiceOrchestrator, build_orchestrator
from .records import BaseRecordStore, ManualEntryStore, SQLiteRecordStore, create_record_store
from .speech import AzureSpeechService

__all__ = [
    "AuditLogService",
    "AzureOpenAIService",
    "ServiceOrchestrator",
    "build_orchestrator",
    "BaseRecordStore",
    "ManualEntryStore",
    "SQLiteRecordStore",
    "create_record_store",
    "AzureSpeechService",
]
