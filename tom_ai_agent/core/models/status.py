"""
Health and status snapshot models.
"""

from typing import Optional
from pydantic import BaseModel


class HealthCheck(BaseModel):
    """Result of a collaborator health probe."""

    healthy: bool
    message: Optional[str] = None


class StoreStatus(BaseModel):
    """Record store readiness."""

    system: str
    configured: bool = False
    connected: bool = False
    healthy: bool = False
    cases_count: int = 0
    supports_subscriptions: bool = False


class GenerationInfo(BaseModel):
    """Generation client readiness."""

    deployment_name: Optional[str] = None
    endpoint: Optional[str] = None
    ready: bool = False


class SpeechInfo(BaseModel):
    """Speech client readiness."""

    voice_name: Optional[str] = None
    region: Optional[str] = None
    ready: bool = False


class SystemStatus(BaseModel):
    """Aggregate readiness of every collaborator."""

    store: StoreStatus
    generation: GenerationInfo
    speech: SpeechInfo
    initialized: bool
