"""
Formatting utility tests — byte sizes, durations, timestamps.
"""

from datetime import timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest

from core.utils import format_bytes, format_duration, format_timestamp

KB = 1024
MB = 1024 * KB
GB = 1024 * MB
TB = 1024 * GB

# 2025/10/18 14:03:07 UTC
SUBMITTED = 1_760_796_187_000


class TestFormatBytes:

    @pytest.mark.parametrize("size, expected", [
        (0, "0.0 B"),
        (1000, "1000.0 B"),
        (2047, "2047.0 B"),
        (2048, "2.0 KB"),
        (3 * MB, "3.0 MB"),
        (5 * GB, "5.0 GB"),
        (2 * TB, "2.0 TB"),
    ])
    def test_unit_selection(self, size, expected):
        assert format_bytes(size) == expected

    def test_unit_only_at_twice_its_size(self):
        assert format_bytes(KB) == "1024.0 B"
        assert format_bytes(2 * MB - 1).endswith(" KB")

    def test_one_decimal_place(self):
        assert format_bytes(2560) == "2.5 KB"


class TestFormatDuration:

    @pytest.mark.parametrize("millis, expected", [
        (0, "0 ms"),
        (250, "250 ms"),
        (1000, "1.0 s"),
        (2300, "2.3 s"),
        (90_000, "1.5 min"),
        (42 * 60_000, "42 min"),
        (72 * 60_000, "1.2 h"),
    ])
    def test_adaptive_units(self, millis, expected):
        assert format_duration(millis) == expected

    @pytest.mark.parametrize("millis, expected", [
        (59_949, "59.9 s"),
        (59_999, "1.0 min"),
        (599_999, "10 min"),
        (3_569_999, "59 min"),
        (3_599_999, "1.0 h"),
    ])
    def test_unit_follows_rounded_value(self, millis, expected):
        assert format_duration(millis) == expected

    def test_negative_span_is_zero(self):
        assert format_duration(-5000) == "0 ms"


class TestFormatTimestamp:

    def test_default_format_is_utc(self):
        assert format_timestamp(SUBMITTED) == "2025/10/18 14:03:07"

    def test_explicit_utc_matches_default(self):
        assert format_timestamp(SUBMITTED, tz=timezone.utc) == format_timestamp(SUBMITTED)

    def test_custom_format(self):
        assert format_timestamp(SUBMITTED, "%H:%M") == "14:03"

    def test_named_zone(self):
        try:
            zone = ZoneInfo("Europe/Paris")
        except ZoneInfoNotFoundError:
            pytest.skip("time zone database not installed")
        # CEST is UTC+2 in October
        assert format_timestamp(SUBMITTED, tz=zone) == "2025/10/18 16:03:07"
