"""
SQLite-backed record store.
"""

import asyncio
import sqlite3
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional
import pytz

from ...core.enums import EPRSystem
from ...core.exceptions import NotFoundError
from ...core.models import DateRange, TheatreCase, TheatreStaff
from ...utils.date import DateParser
from .base import BaseRecordStore

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS cases (
        id TEXT PRIMARY KEY,
        scheduled_utc TEXT NOT NULL,
        data TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS staff (
        id TEXT PRIMARY KEY,
        role TEXT NOT NULL,
        data TEXT NOT NULL
    )
    """,
)


class SQLiteRecordStore(BaseRecordStore):
    """
    Persists cases and staff in a local SQLite file.

    Blocking sqlite3 calls run in worker threads; writes are serialized with
    an asyncio lock so read-modify-write updates do not interleave.
    """

    def __init__(
        self,
        db_path: str,
        cases: Optional[Iterable[Dict[str, Any]]] = None,
        date_parser: Optional[DateParser] = None,
    ):
        super().__init__(EPRSystem.SQLITE, date_parser)
        self.db_path = db_path
        self._lock = asyncio.Lock()
        if cases:
            self._seed(self._normalize_seed(cases))

    def is_configured(self) -> bool:
        return bool(self.db_path)

    def _create_tables(self, conn: sqlite3.Connection) -> None:
        for statement in _SCHEMA:
            conn.execute(statement)

    def _seed(self, cases: List[TheatreCase]) -> None:
        """Insert seed cases, keeping any rows that already exist."""
        conn = sqlite3.connect(self.db_path)
        try:
            self._create_tables(conn)
            conn.executemany(
                "INSERT OR IGNORE INTO cases (id, scheduled_utc, data) VALUES (?, ?, ?)",
                [self._case_row(c) for c in cases],
            )
            conn.commit()
        finally:
            conn.close()

    async def _run(self, work):
        """Run ``work(conn)`` against a fresh connection in a worker thread."""
        def _call():
            conn = sqlite3.connect(self.db_path)
            try:
                self._create_tables(conn)
                result = work(conn)
                conn.commit()
                return result
            finally:
                conn.close()

        return await asyncio.to_thread(_call)

    def _utc_key(self, value: datetime) -> str:
        utc = self.date_parser.to_local(value).astimezone(pytz.utc)
        return utc.strftime("%Y-%m-%dT%H:%M:%S.%f")

    def _case_row(self, case: TheatreCase) -> tuple:
        return case.id, self._utc_key(case.scheduled_date), case.model_dump_json()

    async def get_cases(self, date_range: Optional[DateRange] = None) -> List[TheatreCase]:
        if date_range is None:
            query, params = "SELECT data FROM cases ORDER BY scheduled_utc, id", ()
        else:
            query = (
                "SELECT data FROM cases WHERE scheduled_utc BETWEEN ? AND ? "
                "ORDER BY scheduled_utc, id"
            )
            params = (self._utc_key(date_range.start), self._utc_key(date_range.end))

        rows = await self._run(lambda conn: conn.execute(query, params).fetchall())
        return [TheatreCase.model_validate_json(row[0]) for row in rows]

    async def get_case_by_id(self, case_id: str) -> Optional[TheatreCase]:
        row = await self._run(
            lambda conn: conn.execute("SELECT data FROM cases WHERE id = ?", (case_id,)).fetchone()
        )
        return TheatreCase.model_validate_json(row[0]) if row else None

    async def create_case(self, case_data: Dict[str, Any]) -> TheatreCase:
        case = self._build_new_case(case_data)

        def _insert(conn: sqlite3.Connection) -> None:
            try:
                conn.execute(
                    "INSERT INTO cases (id, scheduled_utc, data) VALUES (?, ?, ?)",
                    self._case_row(case),
                )
            except sqlite3.IntegrityError:
                raise ValueError(f"Case {case.id} already exists")

        async with self._lock:
            await self._run(_insert)
        return case

    async def update_case(self, case_id: str, updates: Dict[str, Any]) -> TheatreCase:
        async with self._lock:
            existing = await self.get_case_by_id(case_id)
            if existing is None:
                raise NotFoundError(f"Case {case_id} not found")

            updated = self._apply_updates(existing, updates)
            await self._run(
                lambda conn: conn.execute(
                    "UPDATE cases SET scheduled_utc = ?, data = ? WHERE id = ?",
                    (self._utc_key(updated.scheduled_date), updated.model_dump_json(), case_id),
                )
            )
        return updated

    async def delete_case(self, case_id: str) -> bool:
        async with self._lock:
            deleted = await self._run(
                lambda conn: conn.execute("DELETE FROM cases WHERE id = ?", (case_id,)).rowcount
            )
        if not deleted:
            raise NotFoundError(f"Case {case_id} not found")
        return True

    async def get_staff(self, role: Optional[str] = None) -> List[TheatreStaff]:
        if role:
            query, params = "SELECT data FROM staff WHERE role = ? ORDER BY id", (role,)
        else:
            query, params = "SELECT data FROM staff ORDER BY id", ()

        rows = await self._run(lambda conn: conn.execute(query, params).fetchall())
        return [TheatreStaff.model_validate_json(row[0]) for row in rows]

    async def get_staff_by_id(self, staff_id: str) -> Optional[TheatreStaff]:
        row = await self._run(
            lambda conn: conn.execute("SELECT data FROM staff WHERE id = ?", (staff_id,)).fetchone()
        )
        return TheatreStaff.model_validate_json(row[0]) if row else None

    async def add_staff(self, staff_data: Dict[str, Any]) -> TheatreStaff:
        member = TheatreStaff.model_validate(staff_data)
        async with self._lock:
            await self._run(
                lambda conn: conn.execute(
                    "INSERT OR REPLACE INTO staff (id, role, data) VALUES (?, ?, ?)",
                    (member.id, member.role.value, member.model_dump_json()),
                )
            )
        return member
