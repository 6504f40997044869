"""
Record store configuration.
"""

from typing import Optional
from pydantic import BaseModel

from .settings import Settings


class RecordStoreConfig(BaseModel):
    """Record store configuration settings."""

    epr_system: str = "manual"
    sqlite_path: str = "tom_cases.db"
    seed_path: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "RecordStoreConfig":
        """Build the record store config from application settings."""
        return cls(
            epr_system=settings.epr_system,
            sqlite_path=settings.records_db_path,
            seed_path=settings.records_seed_path,
        )
