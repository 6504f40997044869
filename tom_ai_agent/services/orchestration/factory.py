"""
Wires the orchestrator from application settings.
"""

from typing import Optional

from ...config import ExternalAPIConfig, RecordStoreConfig, Settings, get_settings
from ..audit import AuditLogService
from ..generation import AzureOpenAIService
from ..records import create_record_store
from ..speech import AzureSpeechService
from .orchestrator import ServiceOrchestrator


def build_orchestrator(settings: Optional[Settings] = None) -> ServiceOrchestrator:
    """Create a ServiceOrchestrator with every collaborator built from ``settings``."""
    settings = settings or get_settings()
    api_config = ExternalAPIConfig.from_settings(settings)

    return ServiceOrchestrator(
        record_store=create_record_store(RecordStoreConfig.from_settings(settings)),
        generation=AzureOpenAIService(api_config),
        speech=AzureSpeechService(api_config),
        audit=AuditLogService(settings.audit_log_path),
    )
