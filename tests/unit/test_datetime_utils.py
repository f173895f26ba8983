"""
Unit tests for nextra.utils.datetime_utils
"""
from datetime import datetime, timedelta, timezone

from nextra.utils.datetime_utils import epoch_millis, utc_now


class TestUtcNow:
    """Tests for utc_now"""

    def test_is_timezone_aware_utc(self):
        result = utc_now()
        assert result.tzinfo == timezone.utc


class TestEpochMillis:
    """Tests for epoch_millis"""

    def test_epoch_start_is_zero(self):
        assert epoch_millis(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 0

    def test_naive_assumed_utc(self):
        naive = datetime(2025, 1, 15, 12, 0, 0)
        aware = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
        assert epoch_millis(naive) == epoch_millis(aware)

    def test_offset_respected(self):
        # 12:00 at UTC+5:30 is 06:30 UTC
        ist = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))
        utc = datetime(2025, 1, 15, 6, 30, 0, tzinfo=timezone.utc)
        assert epoch_millis(ist) == epoch_millis(utc)

    def test_millisecond_resolution(self):
        dt = datetime(2025, 1, 15, 12, 0, 0, 250000, tzinfo=timezone.utc)
        assert epoch_millis(dt) % 1000 == 250

    def test_defaults_to_now(self):
        before = epoch_millis(utc_now())
        result = epoch_millis()
        after = epoch_millis(utc_now())
        assert before <= result <= after
