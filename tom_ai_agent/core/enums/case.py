"""
Theatre case enums.
"""

from enum import Enum


class CaseStatus(str, Enum):
    """Lifecycle status of a theatre case."""

    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    DELAYED = "delayed"
    EMERGENCY = "emergency"


class CasePriority(str, Enum):
    """Clinical priority of a theatre case."""

    ROUTINE = "routine"
    URGENT = "urgent"
    EMERGENCY = "emergency"
    ELECTIVE = "elective"

    @classmethod
    def from_string(cls, value) -> "CasePriority | None":
        """Map a free-form priority/urgency value onto the enum, or None."""
        if not value:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class EPRSystem(str, Enum):
    """Electronic patient record systems a record store can front."""

    EPIC = "epic"
    CERNER = "cerner"
    TPP = "tpp"
    EMIS = "emis"
    MANUAL = "manual"
    SQLITE = "sqlite"
    OTHER = "other"


class StaffRole(str, Enum):
    """Roles of theatre staff."""

    SURGEON = "surgeon"
    ANAESTHETIST = "anaesthetist"
    SCRUB_NURSE = "scrub_nurse"
    CIRCULATING_NURSE = "circulating_nurse"
    ODA = "oda"
    RADIOGRAPHER = "radiographer"
    THEATRE_COORDINATOR = "theatre_coordinator"
