"""
Audit sink writing compliance records as JSON lines.
"""

import asyncio
from pathlib import Path
from typing import Optional, Union

from ...config import get_settings
from ...core.models import AuditRecord
from ...utils.logging import get_logger


class AuditLogService:
    """Appends one JSON object per audit record to a log file."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path or get_settings().audit_log_path)
        self.logger = get_logger("tom.audit")

    async def record(self, entry: AuditRecord) -> None:
        """Append ``entry`` to the audit log."""
        line = entry.model_dump_json()

        def _append() -> None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(line)
                f.write("\n")

        await asyncio.to_thread(_append)
        self.logger.info(f"audit: {entry.action} on {entry.resource} by {entry.user_id}")
