"""
Audit trail sink.
"""

from .service import AuditLogService

__all__ = [
    "AuditLogService",
]
