"""
Tests for utility functions.
"""

import pytest
from datetime import datetime
import pytz

from tom_ai_agent.utils.date import DateParser, coerce_datetime


class TestDateParser:
    """Test DateParser utility."""

    def test_now_uses_local_timezone(self, date_parser):
        now = date_parser.now()
        assert now.tzinfo is not None
        assert now.date().isoformat() == "2025-03-10"

    def test_day_bounds(self, date_parser):
        start, end = date_parser.day_bounds(1)
        assert start.isoformat().startswith("2025-03-11T00:00:00")
        assert end.date() == start.date()
        assert end.hour == 23 and end.minute == 59

    def test_day_bounds_follow_british_summer_time(self):
        parser = DateParser(
            timezone="Europe/London",
            now=lambda: datetime(2025, 7, 1, 23, 30, tzinfo=pytz.utc),
        )
        start, _ = parser.day_bounds(0)
        # 23:30 UTC is already 2 July in London.
        assert start.date().isoformat() == "2025-07-02"
        assert start.utcoffset().total_seconds() == 3600

    def test_describe_day(self, date_parser):
        assert date_parser.describe_day(datetime(2025, 3, 10, 18, 0)) == "Today"
        assert date_parser.describe_day(datetime(2025, 3, 11, 7, 0)) == "Tomorrow"
        assert date_parser.describe_day(datetime(2025, 3, 9, 7, 0)) == "09/03/2025"

    def test_to_local_converts_aware(self, date_parser):
        value = datetime(2025, 7, 1, 12, 0, tzinfo=pytz.utc)
        assert date_parser.to_local(value).hour == 13

    def test_parse(self, date_parser):
        assert date_parser.parse("2025-03-10T09:00:00Z").hour == 9


class TestCoerceDatetime:
    """Test timestamp coercion."""

    def test_epoch_seconds_and_millis_agree(self):
        assert coerce_datetime(1741597200) == coerce_datetime(1741597200000)

    def test_rejects_unsupported(self):
        with pytest.raises(ValueError):
            coerce_datetime(["2025-03-10"])
        with pytest.raises(ValueError):
            coerce_datetime("   ")
        with pytest.raises(ValueError):
            coerce_datetime(True)
