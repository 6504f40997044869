"""
Record store registry.

Maps the configured EPR tag to a store constructor. Vendor integrations that
do not exist yet resolve to the manual store explicitly, with a warning.
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from ...config import RecordStoreConfig
from ...core.enums import EPRSystem
from ...core.exceptions import ConfigurationError
from ...utils.logging import get_logger
from .base import BaseRecordStore
from .manual import ManualEntryStore
from .sqlite import SQLiteRecordStore

logger = get_logger("tom.records")

StoreConstructor = Callable[[RecordStoreConfig, List[Dict[str, Any]]], BaseRecordStore]

RECORD_STORE_REGISTRY: Dict[EPRSystem, StoreConstructor] = {
    EPRSystem.MANUAL: lambda config, cases: ManualEntryStore(cases=cases),
    EPRSystem.SQLITE: lambda config, cases: SQLiteRecordStore(config.sqlite_path, cases=cases),
}

# Vendor systems without an adapter yet.
UNIMPLEMENTED_SYSTEMS = (EPRSystem.EPIC, EPRSystem.CERNER, EPRSystem.TPP, EPRSystem.EMIS)


def register_record_store(system: EPRSystem, constructor: StoreConstructor) -> None:
    """Register (or replace) the constructor used for ``system``."""
    RECORD_STORE_REGISTRY[system] = constructor


def load_seed_cases(path: Optional[str]) -> List[Dict[str, Any]]:
    """
    Read seed case records from a JSON file.

    The file holds either a list of case records or an object with a
    ``cases`` list.

    Raises:
        ConfigurationError: if the file is missing or malformed.
    """
    if not path:
        return []

    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Cannot read seed cases from {path}: {e}")

    records = payload.get("cases", []) if isinstance(payload, dict) else payload
    if not isinstance(records, list):
        raise ConfigurationError(f"Seed file {path} must contain a list of cases")
    return records


def _resolve_system(tag: str) -> EPRSystem:
    try:
        system = EPRSystem((tag or EPRSystem.MANUAL.value).strip().lower())
    except ValueError:
        logger.warning("records: unknown EPR system %r, using manual entry", tag)
        return EPRSystem.MANUAL

    if system in UNIMPLEMENTED_SYSTEMS:
        logger.warning("records: %s adapter not yet implemented, using manual entry", system.value)
        return EPRSystem.MANUAL
    if system not in RECORD_STORE_REGISTRY:
        logger.warning("records: no store registered for %s, using manual entry", system.value)
        return EPRSystem.MANUAL
    return system


def create_record_store(config: RecordStoreConfig) -> BaseRecordStore:
    """Create the record store selected by ``config.epr_system``."""
    system = _resolve_system(config.epr_system)
    try:
        cases = load_seed_cases(config.seed_path)
    except ConfigurationError as e:
        logger.error("records: %s, starting with no seed cases", e)
        cases = []

    logger.info("records: using %s store (%d seed cases)", system.value, len(cases))
    return RECORD_STORE_REGISTRY[system](config, cases)
