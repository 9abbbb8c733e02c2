"""
Data models for the driftinfo status reader.

This package contains Pydantic models for the upstream feed, the parsed
incidents and the client results.
"""

from .feed_entry import FeedEntry, FeedMessage
from .feed_response import FeedData, FeedResponse
from .incident_record import IncidentRecord
from .session_tokens import SessionTokens
from .incidents_response import IncidentsResponse
from .incidents_error import IncidentsError

__all__ = [
    'FeedMessage',
    'FeedEntry',
    'FeedData',
    'FeedResponse',
    'IncidentRecord',
    'SessionTokens',
    'IncidentsResponse',
    'IncidentsError',
]
