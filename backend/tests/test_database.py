"""
Twitter API — Column Type Tests
=================================

What we test:
    ✅ UTCDateTime marks naive values read back from SQLite as UTC
    ✅ Aware values are converted to UTC before they are stored
"""

from datetime import datetime, timedelta, timezone

from twitter_api.database import UTCDateTime


class TestUTCDateTime:
    def setup_method(self):
        self.column_type = UTCDateTime()

    def test_naive_result_becomes_utc(self):
        stored = datetime(2026, 10, 19, 2, 40, 14, 264540)

        loaded = self.column_type.process_result_value(stored, dialect=None)

        assert loaded == stored.replace(tzinfo=timezone.utc)
        assert loaded.utcoffset() == timedelta(0)

    def test_offset_value_stored_as_utc(self):
        local = datetime(2026, 10, 19, 4, 40, tzinfo=timezone(timedelta(hours=2)))

        bound = self.column_type.process_bind_param(local, dialect=None)

        assert bound.tzinfo == timezone.utc
        assert bound.hour == 2

    def test_none_passes_through(self):
        assert self.column_type.process_bind_param(None, dialect=None) is None
        assert self.column_type.process_result_value(None, dialect=None) is None
