"""
Display helpers for parsed incidents.

Text output is one bullet line per incident: planned maintenance and
unplanned disruptions each have their own renderer. JSON output is the
whole sorted collection with 4-space indentation.
"""

import json
from datetime import datetime
from typing import Iterable, List

from pydantic import TypeAdapter

from date_parser import DATE_FORMAT, DATE_TIME_FORMAT, TIME_FORMAT
from models import IncidentRecord

_RECORD_LIST = TypeAdapter(List[IncidentRecord])


def same_day(d1: datetime, d2: datetime) -> bool:
    """Whether two datetimes fall on the same calendar day."""
    return (d1.year, d1.month, d1.day) == (d2.year, d2.month, d2.day)


def _format_window_end(date: datetime, value: datetime) -> str:
    fmt = TIME_FORMAT if same_day(date, value) else DATE_TIME_FORMAT
    return value.strftime(fmt)


def format_maintenance(incident: IncidentRecord) -> str:
    """
    Render a planned maintenance incident.

    Example:
        • 👷 2022-03-30: Scheduled maintenance on Open Universe starting at: 08:00 lasting until: 10:00 in Karlshamn
    """
    line = f"• 👷 {incident.date.strftime(DATE_FORMAT)}: Scheduled maintenance on {incident.operator}"
    if incident.has_window:
        line += f" starting at: {_format_window_end(incident.date, incident.start)}"
        line += f" lasting until: {_format_window_end(incident.date, incident.stop)}"
    if incident.location:
        line += f" in {incident.location}"
    return line


def format_disruption(incident: IncidentRecord) -> str:
    """
    Render an unplanned disruption.

    Example:
        • 🔥 2022-03-29: Ongoing service disruption on IP-Only in Ludvika
    """
    line = f"• 🔥 {incident.date.strftime(DATE_FORMAT)}: Ongoing service disruption on {incident.operator}"
    if incident.location:
        line += f" in {incident.location}"
    return line


def format_incident(incident: IncidentRecord) -> str:
    """Render an incident with the renderer matching its kind."""
    if incident.planned:
        return format_maintenance(incident)
    return format_disruption(incident)


def sort_incidents(incidents: Iterable[IncidentRecord]) -> List[IncidentRecord]:
    """Sort incidents by date, oldest first. Equal dates keep their order."""
    return sorted(incidents, key=lambda incident: incident.date)


def incidents_to_json(incidents: Iterable[IncidentRecord]) -> str:
    """
    Serialize incidents as a JSON array.

    Absent start/stop windows are left out of each object.
    """
    payload = [incident.model_dump(mode='json', exclude_none=True) for incident in incidents]
    return json.dumps(payload, indent=4, ensure_ascii=False)


def incidents_from_json(text: str) -> List[IncidentRecord]:
    """Load incidents previously written by ``incidents_to_json``."""
    return _RECORD_LIST.validate_json(text)
