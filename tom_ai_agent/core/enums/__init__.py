"""
Enums for the TOM theatre assistant.
"""

from .case import CaseStatus, CasePriority, EPRSystem, StaffRole
from .query import QueryType

__all__ = [
    "CaseStatus",
    "CasePriority",
    "EPRSystem",
    "StaffRole",
    "QueryType",
]
