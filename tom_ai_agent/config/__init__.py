"""
Configuration management for the TOM theatre assistant.
"""

from .settings import Settings, get_settings
from .database import RecordStoreConfig
from .external_apis import ExternalAPIConfig

__all__ = [
    "Settings",
    "get_settings",
    "RecordStoreConfig",
    "ExternalAPIConfig",
]
