"""
Theatre case and staff data models.
"""

import time
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional
import pytz
from pydantic import BaseModel, Field, ConfigDict, field_validator

from ..enums import CaseStatus, CasePriority, EPRSystem, StaffRole
from ...utils.date import coerce_datetime


def _first(data: Dict[str, Any], *keys: str) -> Any:
    """Return the first value present under any of ``keys``."""
    for key in keys:
        value = data.get(key)
        if value is not None and value != "":
            return value
    return None


class TheatreCase(BaseModel):
    """A scheduled operation, normalized across record systems."""

    model_config = ConfigDict(extra="forbid")

    id: str
    patient_id: str
    patient_name: Optional[str] = None
    patient_age: Optional[int] = None
    procedure: str
    procedure_code: Optional[str] = None  # SNOMED/OPCS
    surgeon: str
    anaesthetist: Optional[str] = None
    theatre: str
    scheduled_date: datetime
    scheduled_time: Optional[str] = None  # HH:MM
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    estimated_duration: Optional[int] = None  # minutes
    actual_duration: Optional[int] = None  # minutes
    status: CaseStatus = CaseStatus.SCHEDULED
    priority: Optional[CasePriority] = None
    urgency: Optional[str] = None
    special_requirements: List[str] = Field(default_factory=list)
    equipment: List[str] = Field(default_factory=list)
    notes: Optional[str] = None

    # Audit fields
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    created_by: Optional[str] = None
    updated_by: Optional[str] = None

    # Provenance
    source_system: Optional[EPRSystem] = None
    source_id: Optional[str] = None

    @field_validator(
        "scheduled_date", "start_time", "end_time", "created_at", "updated_at",
        mode="before",
    )
    @classmethod
    def _resolve_timestamp(cls, value: Any) -> Any:
        if value is None:
            return None
        return coerce_datetime(value)

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower().replace(" ", "_").replace("-", "_")
        return value

    @field_validator("source_system", mode="before")
    @classmethod
    def _known_system(cls, value: Any) -> Any:
        if isinstance(value, str) and value.lower() not in {s.value for s in EPRSystem}:
            return EPRSystem.OTHER
        if isinstance(value, str):
            return value.lower()
        return value

    @field_validator("special_requirements", "equipment", mode="before")
    @classmethod
    def _listify(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @classmethod
    def from_record(cls, data: Dict[str, Any], record_id: Optional[str] = None) -> "TheatreCase":
        """
        Create a TheatreCase from a raw backend record.

        Backends disagree on key spelling (``surgeonName`` vs ``surgeon_name``,
        ``theatreNumber`` vs ``room``...). The first populated spelling wins.

        Args:
            data: Raw record as returned by the backend
            record_id: Backend document id; wins over the record's own id

        Returns:
            Normalized TheatreCase
        """
        case_id = record_id or data.get("id")
        if case_id is None or case_id == "":
            case_id = f"case_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"
        case_id = str(case_id)
        scheduled = _first(data, "scheduledDate", "scheduled_date")

        return cls(
            id=case_id,
            patient_id=str(_first(data, "patientId", "patient_id") or case_id),
            patient_name=_first(data, "patientName", "patient_name"),
            patient_age=_first(data, "patientAge", "patient_age"),
            procedure=_first(data, "procedure", "procedureName", "procedure_name") or "Unknown",
            procedure_code=_first(data, "procedureCode", "procedure_code"),
            surgeon=_first(data, "surgeon", "surgeonName", "surgeon_name") or "Not assigned",
            anaesthetist=_first(data, "anaesthetist", "anaesthetistName", "anaesthetist_name"),
            theatre=str(
                _first(data, "theatre", "theatreNumber", "theatre_number", "room") or "Unknown"
            ),
            scheduled_date=scheduled if scheduled is not None else datetime.now(pytz.utc),
            scheduled_time=_first(data, "scheduledTime", "scheduled_time"),
            start_time=_first(data, "startTime", "start_time"),
            end_time=_first(data, "endTime", "end_time"),
            estimated_duration=_first(data, "estimatedDuration", "estimated_duration"),
            actual_duration=_first(data, "actualDuration", "actual_duration"),
            status=_first(data, "status") or CaseStatus.SCHEDULED,
            priority=CasePriority.from_string(_first(data, "priority", "urgency")),
            urgency=_first(data, "urgency"),
            special_requirements=_first(data, "specialRequirements", "special_requirements") or [],
            equipment=_first(data, "equipment") or [],
            notes=_first(data, "notes"),
            created_at=_first(data, "createdAt", "created_at"),
            updated_at=_first(data, "updatedAt", "updated_at"),
            created_by=_first(data, "createdBy", "created_by"),
            updated_by=_first(data, "updatedBy", "updated_by"),
            source_system=_first(data, "sourceSystem", "source_system"),
            source_id=str(_first(data, "sourceId", "source_id") or case_id),
        )


class TheatreStaff(BaseModel):
    """A member of theatre staff."""

    model_config = ConfigDict(extra="forbid")

    id: str
    name: str
    role: StaffRole
    specialties: List[str] = Field(default_factory=list)
    email: Optional[str] = None
    phone: Optional[str] = None
