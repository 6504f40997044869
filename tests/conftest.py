"""
Pytest configuration and fixtures.
"""

import pytest
from datetime import datetime
from unittest.mock import Mock, AsyncMock
import pytz

from tom_ai_agent.core.enums import EPRSystem
from tom_ai_agent.core.models import GenerationInfo, HealthCheck, SpeechInfo
from tom_ai_agent.services.audit import AuditLogService
from tom_ai_agent.services.generation import AzureOpenAIService
from tom_ai_agent.services.orchestration import ServiceOrchestrator
from tom_ai_agent.services.records import ManualEntryStore
from tom_ai_agent.services.speech import AzureSpeechService
from tom_ai_agent.utils.date import DateParser

# Monday 10 March 2025, 10:00 in London (GMT, so identical to UTC).
FIXED_NOW = datetime(2025, 3, 10, 10, 0, tzinfo=pytz.utc)


@pytest.fixture
def date_parser():
    """Date parser pinned to a fixed clock."""
    return DateParser(timezone="Europe/London", now=lambda: FIXED_NOW)


@pytest.fixture
def case_records():
    """Raw case records as a backend would hold them."""
    return [
        {
            "id": "case-1",
            "patientId": "PAT001",
            "patientName": "John Doe",
            "procedure": "Appendectomy",
            "surgeon": "Smith",
            "theatre": "3",
            "scheduledDate": "2025-03-10T09:00:00",
            "scheduledTime": "09:00",
            "status": "scheduled",
        },
        {
            "id": "case-2",
            "patientId": "PAT002",
            "procedureName": "Hip Replacement",
            "surgeonName": "Mr Jones",
            "theatreNumber": "A",
            "scheduledDate": "2025-03-11T08:30:00",
            "scheduledTime": "08:30",
            "status": "Confirmed",
            "specialRequirements": ["Latex allergy", "Bariatric table"],
        },
        {
            "id": "case-3",
            "patientId": "PAT003",
            "procedure": "Cataract Surgery",
            "surgeonName": "Ms Patel",
            "room": "5",
            "scheduledDate": 1741615200000,  # 2025-03-10T14:00:00Z
            "status": "in progress",
        },
    ]


@pytest.fixture
def manual_store(case_records, date_parser):
    """Manual entry store seeded with the sample cases."""
    return ManualEntryStore(cases=case_records, date_parser=date_parser)


@pytest.fixture
def mock_generation():
    """Mock generation client that is ready and answers."""
    generation = Mock(spec=AzureOpenAIService)
    generation.is_ready = Mock(return_value=True)
    generation.generate = AsyncMock(return_value="There are two cases today.")
    generation.get_deployment_info = Mock(return_value=GenerationInfo(
        deployment_name="gpt-4o", endpoint="https://tom.openai.azure.com", ready=True
    ))
    return generation


@pytest.fixture
def mock_speech():
    """Mock speech client that is not configured."""
    speech = Mock(spec=AzureSpeechService)
    speech.is_ready = Mock(return_value=False)
    speech.synthesize = AsyncMock(return_value=None)
    speech.get_service_info = Mock(return_value=SpeechInfo(
        voice_name="en-GB-RyanNeural", region="uksouth", ready=False
    ))
    return speech


@pytest.fixture
def mock_audit():
    """Mock audit sink."""
    audit = Mock(spec=AuditLogService)
    audit.record = AsyncMock(return_value=None)
    return audit


@pytest.fixture
def mock_record_store():
    """Mock record store with empty accessors."""
    store = Mock(spec=ManualEntryStore)
    store.get_system_name = Mock(return_value=EPRSystem.MANUAL)
    store.is_configured = Mock(return_value=True)
    store.get_cases_for_today = AsyncMock(return_value=[])
    store.get_cases_for_tomorrow = AsyncMock(return_value=[])
    store.get_cases_by_surgeon = AsyncMock(return_value=[])
    store.get_cases_by_theatre = AsyncMock(return_value=[])
    store.health_check = AsyncMock(return_value=HealthCheck(healthy=True, message="ok"))
    return store


@pytest.fixture
def orchestrator(manual_store, mock_generation, mock_speech, mock_audit, date_parser):
    """Orchestrator over the seeded manual store and mocked clients."""
    return ServiceOrchestrator(
        record_store=manual_store,
        generation=mock_generation,
        speech=mock_speech,
        audit=mock_audit,
        date_parser=date_parser,
    )
