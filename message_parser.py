"""Extraction of the start/stop window from incident status messages."""

import logging
import re
from datetime import datetime
from typing import Iterable, Optional, Tuple

from date_parser import is_sentinel, parse_date_time

logger = logging.getLogger(__name__)

START_PATTERN = re.compile(r'Start:\s+(?P<time>\d{4}-\d{2}-\d{2} \d{2}:\d{2})')
STOP_PATTERN = re.compile(r'Stop:\s+(?P<time>\d{4}-\d{2}-\d{2} \d{2}:\d{2})')


def parse_start_stop(messages: Iterable[str]) -> Tuple[Optional[datetime], Optional[datetime]]:
    """
    Find the first message that announces both a start and a stop time.

    Messages are scanned in order. A message only counts when it contains
    both "Start: YYYY-MM-DD HH:MM" and "Stop: YYYY-MM-DD HH:MM" and both
    timestamps parse. Later messages are not looked at once one matches.

    Args:
        messages: Message texts in feed order

    Returns:
        Tuple of (start, stop); (None, None) when no message qualifies
    """
    for text in messages:
        if not text:
            continue

        start_match = START_PATTERN.search(text)
        stop_match = STOP_PATTERN.search(text)
        if start_match is None or stop_match is None:
            continue

        start = parse_date_time(start_match.group('time'))
        stop = parse_date_time(stop_match.group('time'))
        if is_sentinel(start) or is_sentinel(stop):
            logger.debug(f"Skipping message with unparseable window: {text!r}")
            continue

        return start, stop

    return None, None
