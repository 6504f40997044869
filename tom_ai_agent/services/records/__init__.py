"""
Record store adapters for theatre scheduling backends.
"""

from .base import BaseRecordStore
from .manual import ManualEntryStore
from .sqlite import SQLiteRecordStore
from .factory import create_record_store, register_record_store, load_seed_cases

__all__ = [
    "BaseRecordStore",
    "ManualEntryStore",
    "SQLiteRecordStore",
    "create_record_store",
    "register_record_store",
    "load_seed_cases",
]
