"""
In-memory record store for trusts without a digital EPR integration.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional

from ...core.enums import EPRSystem
from ...core.exceptions import NotFoundError
from ...core.models import DateRange, TheatreCase, TheatreStaff
from ...utils.date import DateParser
from .base import BaseRecordStore

CasesCallback = Callable[[List[TheatreCase]], None]


class ManualEntryStore(BaseRecordStore):
    """
    Record store backed by process memory.

    Mutations touch a plain list with no locking; concurrent writers must be
    serialized by the caller.
    """

    def __init__(
        self,
        cases: Optional[Iterable[Dict[str, Any]]] = None,
        staff: Optional[Iterable[Dict[str, Any]]] = None,
        date_parser: Optional[DateParser] = None,
    ):
        super().__init__(EPRSystem.MANUAL, date_parser)
        self._cases: List[TheatreCase] = self._normalize_seed(cases)
        self._staff: List[TheatreStaff] = [TheatreStaff.model_validate(s) for s in staff or []]
        self._subscribers: List[CasesCallback] = []

    def is_configured(self) -> bool:
        return True

    async def get_cases(self, date_range: Optional[DateRange] = None) -> List[TheatreCase]:
        if date_range is None:
            return list(self._cases)
        return [c for c in self._cases if self._in_range(c, date_range)]

    async def get_case_by_id(self, case_id: str) -> Optional[TheatreCase]:
        return next((c for c in self._cases if c.id == case_id), None)

    async def create_case(self, case_data: Dict[str, Any]) -> TheatreCase:
        case = self._build_new_case(case_data)
        if any(c.id == case.id for c in self._cases):
            raise ValueError(f"Case {case.id} already exists")

        self._cases.append(case)
        self._notify()
        return case

    async def update_case(self, case_id: str, updates: Dict[str, Any]) -> TheatreCase:
        index = self._index_of(case_id)
        self._cases[index] = self._apply_updates(self._cases[index], updates)
        self._notify()
        return self._cases[index]

    async def delete_case(self, case_id: str) -> bool:
        index = self._index_of(case_id)
        del self._cases[index]
        self._notify()
        return True

    async def get_staff(self, role: Optional[str] = None) -> List[TheatreStaff]:
        if not role:
            return list(self._staff)
        return [s for s in self._staff if s.role.value == role]

    async def get_staff_by_id(self, staff_id: str) -> Optional[TheatreStaff]:
        return next((s for s in self._staff if s.id == staff_id), None)

    async def add_staff(self, staff_data: Dict[str, Any]) -> TheatreStaff:
        member = TheatreStaff.model_validate(staff_data)
        self._staff.append(member)
        return member

    def subscribe_to_cases(self, callback: CasesCallback) -> Callable[[], None]:
        """
        Register ``callback`` for case list changes.

        The callback fires immediately with the current cases and again after
        every create, update or delete.

        Returns:
            Function that removes the subscription
        """
        self._subscribers.append(callback)
        callback(list(self._cases))

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _index_of(self, case_id: str) -> int:
        for index, case in enumerate(self._cases):
            if case.id == case_id:
                return index
        raise NotFoundError(f"Case {case_id} not found")

    def _notify(self) -> None:
        snapshot = list(self._cases)
        for callback in list(self._subscribers):
            try:
                callback(snapshot)
            except Exception:
                self.logger.exception("records: case subscriber failed")
