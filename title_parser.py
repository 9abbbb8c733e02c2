"""
Title parsing for driftinfo incidents.

Incident titles follow a loose template::

    Driftstörning - 2022-03-30 - Planerat Servicearbete - Bodekullsvägen, Karlshamn (Open Universe)

This module extracts the date, the planned-maintenance marker and the
location/operator pair from such titles. Two parsers are provided:

- ``parse_title``: pattern based, the one used by default
- ``parse_title_legacy``: splits on hyphens and switches on the segment count;
  breaks as soon as a location or operator contains a hyphen

Neither parser raises. Titles that do not fit the template produce a degraded
result with the ``EPOCH`` date, no location, no operator and ``planned=False``.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

from date_parser import EPOCH, is_sentinel, parse_date

logger = logging.getLogger(__name__)

PLANNED_MARKER = 'planerat servicearbete'

# <kind> - <date> - [planerat servicearbete - ]<rest>
TITLE_PATTERN = re.compile(
    r'[^\W\d_]+ - (?P<date>\d{4}-\d{2}-\d{2}) - (?P<planned>planerat servicearbete - )?(?P<rest>.*)',
    re.IGNORECASE,
)


@dataclass(frozen=True)
class ParsedTitle:
    """Fields extracted from an incident title."""
    date: datetime
    location: str
    operator: str
    planned: bool

    @classmethod
    def degraded(cls) -> 'ParsedTitle':
        """Result used when a title does not fit the template at all."""
        return cls(date=EPOCH, location='', operator='', planned=False)


def extract_location_and_operator(fragment: str) -> Tuple[str, str]:
    """
    Split a title fragment into a location and an operator.

    Rules:
    - "(IP-Only)" -> no location, operator "IP-Only"
    - "Kurbit Stadsnät" -> no location, operator "Kurbit Stadsnät"
    - "Gärds Köpinge (iTUX)" -> location "Gärds Köpinge", operator "iTUX"
    - more than one "(" outside the leading position is ambiguous and yields
      two empty strings

    Args:
        fragment: Remainder of a title after the date and planned marker

    Returns:
        Tuple of (location, operator)
    """
    fragment = fragment.strip()

    if fragment.startswith('('):
        operator = fragment[1:]
        if operator.endswith(')'):
            operator = operator[:-1]
        return '', operator.strip()

    parts = fragment.split('(')
    if len(parts) == 1:
        return '', parts[0].strip()
    if len(parts) == 2:
        operator = parts[1]
        if operator.endswith(')'):
            operator = operator[:-1]
        return parts[0].strip(), operator.strip()

    logger.debug(f"Ambiguous location/operator fragment: {fragment!r}")
    return '', ''


def parse_title(title: str) -> ParsedTitle:
    """
    Parse an incident title using the title pattern.

    Args:
        title: Full incident title, e.g.
               "Driftstörning - 2022-03-29 - Ludvika (IP-Only)"

    Returns:
        ParsedTitle; degraded if the title does not match
    """
    match = TITLE_PATTERN.fullmatch(title or '')
    if match is None:
        logger.debug(f"Title does not match the expected template: {title!r}")
        return ParsedTitle.degraded()

    location, operator = extract_location_and_operator(match.group('rest'))
    date = parse_date(match.group('date'))
    if is_sentinel(date):
        logger.debug(f"Title carries an invalid date: {title!r}")

    return ParsedTitle(
        date=date,
        location=location,
        operator=operator,
        planned=bool(match.group('planned')),
    )


def parse_title_legacy(title: str) -> ParsedTitle:
    """
    Parse an incident title by splitting it on hyphens.

    Five segments are an unplanned incident (kind, year, month, day, rest).
    Six segments are a planned one, with the planned marker in the fifth
    segment. Any other count is treated as malformed.

    Hyphens inside the location or operator shift the segment count, so
    "Ludvika (IP-Only)" is not parsed the way ``parse_title`` parses it.

    Args:
        title: Full incident title

    Returns:
        ParsedTitle; degraded if the segment count is unexpected
    """
    segments = (title or '').split('-')

    if len(segments) == 5:
        planned = False
        rest = segments[4]
    elif len(segments) == 6:
        planned = segments[4].strip().lower() == PLANNED_MARKER
        rest = segments[5]
    else:
        logger.debug(f"Unexpected segment count {len(segments)} in title: {title!r}")
        return ParsedTitle.degraded()

    date = parse_date('-'.join(segment.strip() for segment in segments[1:4]))
    location, operator = extract_location_and_operator(rest)

    return ParsedTitle(date=date, location=location, operator=operator, planned=planned)


def get_title_parser(mode: str = 'regex'):
    """
    Look up a title parser by name.

    Args:
        mode: 'regex' or 'legacy'

    Returns:
        The matching parse function
    """
    if mode == 'legacy':
        return parse_title_legacy
    return parse_title
