"""
Audit trail models.
"""

import time
import uuid
from datetime import datetime
from typing import Any, Dict, Optional
import pytz
from pydantic import BaseModel, Field, ConfigDict


def _new_audit_id() -> str:
    return f"{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


class AuditRecord(BaseModel):
    """Single audit trail entry (NHS DTAC)."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(default_factory=_new_audit_id)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(pytz.utc))
    user_id: str
    user_name: Optional[str] = None
    action: str
    resource: str
    resource_id: Optional[str] = None
    details: Dict[str, Any] = Field(default_factory=dict)

    # Compliance flags
    gdpr_compliant: bool = True
    data_encrypted: bool = True
