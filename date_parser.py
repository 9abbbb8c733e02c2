"""
Locale-aware date parsing for the driftinfo feed.

All dates published by the feed are civil Swedish dates. They are parsed in a
single named time zone which is resolved once per process and cached; when
the zone cannot be resolved the parser falls back to UTC and carries on.

Parsing never raises. A date that cannot be parsed comes back as the
``EPOCH`` sentinel, which callers treat as "absent".
"""

import logging
import re
import threading
from datetime import datetime, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

DATE_FORMAT = '%Y-%m-%d'
DATE_TIME_FORMAT = '%Y-%m-%d %H:%M'
TIME_FORMAT = '%H:%M'

DEFAULT_TIME_ZONE = 'Europe/Stockholm'

# Returned for every date or date-time that fails to parse
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_DATE_PATTERN = re.compile(r'\d{4}-\d{2}-\d{2}')
_DATE_TIME_PATTERN = re.compile(r'\d{4}-\d{2}-\d{2} \d{2}:\d{2}')


class TimeZoneCache:
    """
    Resolves a named time zone on first use and hands out the same handle afterwards.

    The zone is looked up at most once per cache. Lookup failures are not fatal:
    the cache settles on UTC and logs a warning.
    """

    def __init__(self, name: Optional[str] = None):
        """
        Initialize the cache.

        Args:
            name: IANA zone name. When omitted the configured ``time_zone`` is used.
        """
        self._name = name
        self._zone: Optional[tzinfo] = None
        self._lock = threading.Lock()

    def get(self) -> tzinfo:
        """Return the cached zone, resolving it on first access."""
        if self._zone is None:
            with self._lock:
                if self._zone is None:
                    self._zone = self._resolve()
        return self._zone

    def _resolve(self) -> tzinfo:
        name = self._name
        if name is None:
            from config import get_config
            name = get_config().time_zone

        try:
            zone = ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            logger.warning(f"⚠️  Unable to load time zone {name!r}, falling back to UTC: {e}")
            return timezone.utc

        logger.debug(f"Resolved time zone {name}")
        return zone


# Process-wide cache
_cache: Optional[TimeZoneCache] = None
_cache_lock = threading.Lock()


def get_location() -> tzinfo:
    """
    Get the process-wide time zone used for all feed dates.

    Returns:
        The configured zone, or UTC if it could not be loaded
    """
    global _cache
    if _cache is None:
        with _cache_lock:
            if _cache is None:
                _cache = TimeZoneCache()
    return _cache.get()


def reset_location() -> None:
    """
    Drop the process-wide time zone cache. Useful for testing.

    The zone is resolved again on next access.
    """
    global _cache
    with _cache_lock:
        _cache = None


def parse_date(value: Optional[str]) -> datetime:
    """
    Parse a ``YYYY-MM-DD`` date as midnight in the feed's time zone.

    Args:
        value: Date string, e.g. "2022-03-29"

    Returns:
        Timezone-aware datetime, or ``EPOCH`` if the value does not parse
    """
    return _parse(value, _DATE_PATTERN, DATE_FORMAT)


def parse_date_time(value: Optional[str]) -> datetime:
    """
    Parse a ``YYYY-MM-DD HH:MM`` timestamp in the feed's time zone.

    Args:
        value: Date-time string, e.g. "2022-03-30 08:00"

    Returns:
        Timezone-aware datetime, or ``EPOCH`` if the value does not parse
    """
    return _parse(value, _DATE_TIME_PATTERN, DATE_TIME_FORMAT)


def _parse(value: Optional[str], pattern: re.Pattern, fmt: str) -> datetime:
    if not isinstance(value, str) or not pattern.fullmatch(value):
        logger.debug(f"Not a {fmt} value: {value!r}")
        return EPOCH

    try:
        parsed = datetime.strptime(value, fmt)
    except ValueError as e:
        logger.debug(f"Unable to parse {value!r}: {e}")
        return EPOCH

    return parsed.replace(tzinfo=get_location())


def is_sentinel(value: Optional[datetime]) -> bool:
    """Whether a parsed value stands for "no date"."""
    return value is None or value is EPOCH
