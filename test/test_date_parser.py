"""
Tests for date_parser module.

Tests cover:
- Lazy, cached time zone resolution
- UTC fallback for unknown zones
- Date and date-time parsing
- Sentinel handling for invalid input
"""

from datetime import datetime, timezone
from unittest.mock import patch

import pytest
from zoneinfo import ZoneInfo

import date_parser
from date_parser import (
    EPOCH,
    TimeZoneCache,
    get_location,
    is_sentinel,
    parse_date,
    parse_date_time,
)

STOCKHOLM = ZoneInfo('Europe/Stockholm')


class TestTimeZoneCache:
    """Tests for TimeZoneCache and get_location."""

    def test_resolves_named_zone(self):
        """Test the configured zone is loaded."""
        cache = TimeZoneCache('Europe/Stockholm')
        assert cache.get() == STOCKHOLM

    def test_not_resolved_until_first_use(self):
        """Test the zone is looked up lazily."""
        with patch('date_parser.ZoneInfo', wraps=ZoneInfo) as mock_zoneinfo:
            cache = TimeZoneCache('Europe/Stockholm')
            assert mock_zoneinfo.call_count == 0
            cache.get()
        assert mock_zoneinfo.call_count == 1

    def test_unknown_zone_falls_back_to_utc(self):
        """Test an unknown zone name is not fatal."""
        cache = TimeZoneCache('Not/AZone')
        assert cache.get() is timezone.utc

    @pytest.mark.parametrize('name', ['Europe', '', 'Europe/', '../Europe/Stockholm'])
    def test_unusable_zone_names_fall_back_to_utc(self, name):
        """Test directory names and malformed names fall back to UTC too."""
        assert TimeZoneCache(name).get() is timezone.utc

    def test_parsing_survives_unusable_zone(self):
        """Test dates still parse when the configured zone is a directory."""
        with patch('config.config.time_zone', 'Europe'):
            assert parse_date('2022-03-29') == datetime(2022, 3, 29, tzinfo=timezone.utc)

    def test_resolved_only_once(self):
        """Test repeated access reuses the cached zone."""
        with patch('date_parser.ZoneInfo', wraps=ZoneInfo) as mock_zoneinfo:
            cache = TimeZoneCache('Europe/Stockholm')
            first = cache.get()
            second = cache.get()

        assert first is second
        assert mock_zoneinfo.call_count == 1

    def test_get_location_uses_config(self):
        """Test the process-wide zone comes from configuration."""
        assert get_location() == STOCKHOLM

    def test_get_location_is_cached(self):
        """Test the process-wide zone is the same object on every call."""
        assert get_location() is get_location()

    def test_get_location_falls_back_to_utc(self):
        """Test the process-wide zone falls back to UTC too."""
        with patch('config.config.time_zone', 'Not/AZone'):
            assert get_location() is timezone.utc

    def test_reset_location(self):
        """Test the cache can be dropped."""
        get_location()
        date_parser.reset_location()
        assert date_parser._cache is None


class TestParseDate:
    """Tests for parse_date."""

    def test_valid_date(self):
        """Test a date is midnight in Stockholm."""
        assert parse_date('2022-03-29') == datetime(2022, 3, 29, tzinfo=STOCKHOLM)

    def test_date_carries_time_zone(self):
        """Test parsed dates are timezone-aware."""
        parsed = parse_date('2022-03-29')
        assert parsed.utcoffset().total_seconds() == 2 * 3600

    def test_invalid_calendar_date(self):
        """Test an impossible date yields the sentinel."""
        assert parse_date('2022-02-30') == EPOCH

    def test_unpadded_date(self):
        """Test the fixed format is enforced."""
        assert parse_date('2022-3-29') == EPOCH

    def test_empty_and_none(self):
        """Test missing input yields the sentinel."""
        assert parse_date('') == EPOCH
        assert parse_date(None) == EPOCH

    def test_date_time_is_not_a_date(self):
        """Test a date-time string is rejected by parse_date."""
        assert parse_date('2022-03-29 10:00') == EPOCH


class TestParseDateTime:
    """Tests for parse_date_time."""

    def test_valid_date_time(self):
        """Test a timestamp is parsed in Stockholm time."""
        assert parse_date_time('2022-03-30 08:00') == datetime(2022, 3, 30, 8, 0, tzinfo=STOCKHOLM)

    def test_winter_offset(self):
        """Test standard time is used outside daylight saving."""
        parsed = parse_date_time('2022-01-15 12:30')
        assert parsed.utcoffset().total_seconds() == 3600

    def test_invalid_time(self):
        """Test an impossible time yields the sentinel."""
        assert parse_date_time('2022-03-30 25:00') == EPOCH

    def test_date_only(self):
        """Test a plain date is rejected by parse_date_time."""
        assert parse_date_time('2022-03-30') == EPOCH

    def test_garbage(self):
        """Test arbitrary text yields the sentinel."""
        assert parse_date_time('tomorrow morning') == EPOCH


class TestIsSentinel:
    """Tests for is_sentinel."""

    def test_epoch_and_none(self):
        assert is_sentinel(EPOCH)
        assert is_sentinel(None)

    def test_real_date(self):
        assert not is_sentinel(parse_date('2022-03-29'))

    def test_epoch_instant_is_a_real_date(self):
        """Test a parsed value at the epoch instant is not the sentinel."""
        parsed = parse_date_time('1970-01-01 01:00')
        assert parsed == EPOCH
        assert not is_sentinel(parsed)
