"""
Date and time utilities for theatre schedules.
"""

from datetime import date, datetime, time, timedelta
from typing import Any, Callable, Optional, Tuple
import pytz
from dateparser import parse as parse_date

from ..config import get_settings

# Epoch values above this are taken to be milliseconds rather than seconds.
_EPOCH_MILLIS_THRESHOLD = 100_000_000_000


def coerce_datetime(value: Any) -> datetime:
    """
    Resolve a backend timestamp to a concrete ``datetime``.

    Accepts ``datetime`` and ``date`` objects, epoch seconds or milliseconds,
    ISO-8601 strings (a trailing ``Z`` is allowed) and free-form date strings
    understood by ``dateparser``.

    Raises:
        ValueError: if the value cannot be resolved.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        seconds = float(value)
        if abs(seconds) >= _EPOCH_MILLIS_THRESHOLD:
            seconds = seconds / 1000.0
        return datetime.fromtimestamp(seconds, tz=pytz.utc)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("Empty date string")
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            pass
        parsed = parse_date(text, settings={"PREFER_DAY_OF_MONTH": "first"})
        if parsed is None:
            raise ValueError(f"Unrecognised date: {value!r}")
        return parsed
    raise ValueError(f"Unsupported date value: {value!r}")


class DateParser:
    """Calendar helpers bound to the configured timezone."""

    def __init__(
        self,
        timezone: Optional[str] = None,
        now: Optional[Callable[[], datetime]] = None,
    ):
        self.settings = get_settings()
        self.tz = pytz.timezone(timezone or self.settings.timezone)
        self._now = now

    def now(self) -> datetime:
        """Current time in the configured timezone."""
        if self._now is not None:
            return self.to_local(self._now())
        return datetime.now(self.tz)

    def to_local(self, value: datetime) -> datetime:
        """Attach or convert ``value`` to the configured timezone."""
        if value.tzinfo is None:
            return self.tz.localize(value)
        return value.astimezone(self.tz)

    def parse(self, value: Any) -> datetime:
        """Resolve any supported timestamp and express it in local time."""
        return self.to_local(coerce_datetime(value))

    def day_bounds(self, offset_days: int = 0) -> Tuple[datetime, datetime]:
        """Start and end of the local calendar day ``offset_days`` from today."""
        day = self.now().date() + timedelta(days=offset_days)
        start = self.tz.localize(datetime.combine(day, time.min))
        end = self.tz.localize(datetime.combine(day, time.max))
        return start, end

    def describe_day(self, value: datetime) -> str:
        """Render a date as "Today", "Tomorrow" or dd/mm/YYYY."""
        day = self.to_local(value).date()
        today = self.now().date()
        if day == today:
            return "Today"
        if day == today + timedelta(days=1):
            return "Tomorrow"
        return day.strftime("%d/%m/%Y")
