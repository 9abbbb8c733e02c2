"""Model for a parsed driftinfo incident."""

from datetime import datetime
from typing import Callable, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from date_parser import EPOCH
from message_parser import parse_start_stop
from title_parser import ParsedTitle, parse_title
from .feed_entry import FeedEntry


class IncidentRecord(BaseModel):
    """Model for a parsed incident. Read-only once built."""
    model_config = ConfigDict(frozen=True)

    location: str = Field(default='', description="Affected area, empty when the title names none")
    operator: str = Field(default='', description="ISP or partner network responsible")
    planned: bool = Field(default=False, description="Whether this is scheduled maintenance")
    date: datetime = Field(default=EPOCH, description="Incident date, EPOCH when unknown")
    start: Optional[datetime] = Field(default=None, description="Start of the announced window")
    stop: Optional[datetime] = Field(default=None, description="End of the announced window")

    @model_validator(mode='after')
    def check_window(self) -> 'IncidentRecord':
        """A window always has both ends or neither."""
        if (self.start is None) != (self.stop is None):
            raise ValueError("start and stop must be set together")
        return self

    @classmethod
    def from_feed_entry(
        cls,
        entry: FeedEntry,
        title_parser: Callable[[str], ParsedTitle] = parse_title,
    ) -> 'IncidentRecord':
        """
        Build a record from a raw feed entry.

        The title yields date, planned flag, location and operator; the
        messages yield the optional start/stop window.

        Args:
            entry: Raw entry as decoded from the feed
            title_parser: Title parser to use (``parse_title`` or ``parse_title_legacy``)

        Returns:
            IncidentRecord, possibly degraded if the title is malformed
        """
        parsed = title_parser(entry.title)
        start, stop = parse_start_stop(entry.message_texts())
        return cls(
            location=parsed.location,
            operator=parsed.operator,
            planned=parsed.planned,
            date=parsed.date,
            start=start,
            stop=stop,
        )

    @property
    def has_window(self) -> bool:
        """Whether a start/stop window was found."""
        return self.start is not None and self.stop is not None
