"""
Record store interface shared by every EPR backend.
"""

import time
import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional
import pytz

from ...core.enums import CaseStatus, EPRSystem
from ...core.models import DateRange, HealthCheck, TheatreCase, TheatreStaff
from ...utils.date import DateParser
from ...utils.logging import get_logger


class BaseRecordStore(ABC):
    """
    Uniform capability surface over a theatre scheduling backend.

    Concrete stores implement the CRUD primitives; date, surgeon and theatre
    accessors and the health probe are derived from them here. A store that
    can push live updates additionally exposes
    ``subscribe_to_cases(callback) -> unsubscribe``; callers detect it with
    ``hasattr`` rather than assuming it.
    """

    def __init__(self, system_name: EPRSystem, date_parser: Optional[DateParser] = None):
        self.system_name = system_name
        self.date_parser = date_parser or DateParser()
        self.logger = get_logger("tom.records")

    def get_system_name(self) -> EPRSystem:
        """Backend identifier."""
        return self.system_name

    @abstractmethod
    def is_configured(self) -> bool:
        """Whether the backend has what it needs to serve requests."""

    @abstractmethod
    async def get_cases(self, date_range: Optional[DateRange] = None) -> List[TheatreCase]:
        """All cases, or those scheduled inside ``date_range`` (inclusive)."""

    @abstractmethod
    async def get_case_by_id(self, case_id: str) -> Optional[TheatreCase]:
        """Case with ``case_id``, or None."""

    @abstractmethod
    async def create_case(self, case_data: Dict[str, Any]) -> TheatreCase:
        """Create a case from partial field values."""

    @abstractmethod
    async def update_case(self, case_id: str, updates: Dict[str, Any]) -> TheatreCase:
        """Apply ``updates`` to a case. Raises NotFoundError for unknown ids."""

    @abstractmethod
    async def delete_case(self, case_id: str) -> bool:
        """Delete a case. Raises NotFoundError for unknown ids."""

    @abstractmethod
    async def get_staff(self, role: Optional[str] = None) -> List[TheatreStaff]:
        """All staff, optionally filtered by role."""

    @abstractmethod
    async def get_staff_by_id(self, staff_id: str) -> Optional[TheatreStaff]:
        """Staff member with ``staff_id``, or None."""

    @abstractmethod
    async def add_staff(self, staff_data: Dict[str, Any]) -> TheatreStaff:
        """Register a staff member."""

    async def get_cases_for_today(self) -> List[TheatreCase]:
        """Cases scheduled on the current local calendar day."""
        start, end = self.date_parser.day_bounds(0)
        return await self.get_cases_by_date_range(start, end)

    async def get_cases_for_tomorrow(self) -> List[TheatreCase]:
        """Cases scheduled on the next local calendar day."""
        start, end = self.date_parser.day_bounds(1)
        return await self.get_cases_by_date_range(start, end)

    async def get_cases_by_date_range(self, start: datetime, end: datetime) -> List[TheatreCase]:
        """Cases scheduled between ``start`` and ``end`` inclusive."""
        return await self.get_cases(DateRange(start=start, end=end))

    async def get_cases_by_surgeon(self, surgeon_name: str) -> List[TheatreCase]:
        """Cases whose surgeon contains ``surgeon_name`` (case-insensitive)."""
        needle = surgeon_name.lower()
        return [c for c in await self.get_cases() if needle in c.surgeon.lower()]

    async def get_cases_by_theatre(self, theatre: str) -> List[TheatreCase]:
        """Cases whose theatre contains ``theatre`` (case-insensitive)."""
        needle = theatre.lower()
        return [c for c in await self.get_cases() if needle in c.theatre.lower()]

    async def health_check(self) -> HealthCheck:
        """Probe the backend by listing its cases."""
        name = self.system_name.value
        try:
            cases = await self.get_cases()
        except Exception as e:
            return HealthCheck(healthy=False, message=f"{name} health check failed: {e}")
        return HealthCheck(
            healthy=True,
            message=f"{name} connected successfully. {len(cases)} cases found.",
        )

    def _new_case_id(self) -> str:
        return f"{self.system_name.value}_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"

    def _normalize_seed(self, records: Optional[Iterable[Any]]) -> List[TheatreCase]:
        """
        Normalize seed records one at a time.

        Records without an id get one minted by this store. Records that fail
        validation, or repeat an id already seen, are logged and skipped.
        """
        cases: List[TheatreCase] = []
        seen = set()
        for position, record in enumerate(records or []):
            if not isinstance(record, dict):
                self.logger.warning(f"records: skipping seed record {position}: not an object")
                continue

            record_id = None if record.get("id") not in (None, "") else self._new_case_id()
            try:
                case = TheatreCase.from_record(record, record_id=record_id)
            except ValueError as e:
                self.logger.warning(f"records: skipping invalid seed record {position}: {e}")
                continue

            if case.id in seen:
                self.logger.warning(f"records: skipping seed record {position}: duplicate id {case.id}")
                continue
            seen.add(case.id)
            cases.append(case)
        return cases

    def _build_new_case(self, case_data: Dict[str, Any]) -> TheatreCase:
        """Fill defaults for a case created through this store."""
        now_ms = int(time.time() * 1000)
        record: Dict[str, Any] = {
            "id": self._new_case_id(),
            "patient_id": f"PAT_{now_ms}",
            "procedure": "Unknown procedure",
            "surgeon": "Not assigned",
            "theatre": "Not assigned",
            "scheduled_date": datetime.now(pytz.utc),
            "status": CaseStatus.SCHEDULED,
            "source_system": self.system_name,
        }
        record.update(case_data)
        return TheatreCase.model_validate(record)

    def _apply_updates(self, case: TheatreCase, updates: Dict[str, Any]) -> TheatreCase:
        """Merge ``updates`` into ``case``; the id never changes."""
        merged = {**case.model_dump(), **updates, "id": case.id}
        return TheatreCase.model_validate(merged)

    def _in_range(self, case: TheatreCase, date_range: DateRange) -> bool:
        scheduled = self.date_parser.to_local(case.scheduled_date)
        start = self.date_parser.to_local(date_range.start)
        end = self.date_parser.to_local(date_range.end)
        return start <= scheduled <= end
