"""Model for the driftinfo API response envelope."""

from typing import List
from pydantic import BaseModel, Field, field_validator
from .feed_entry import FeedEntry


class FeedData(BaseModel):
    """Model for the data section of the API response."""
    open: List[FeedEntry] = Field(default_factory=list, description="Currently open incidents")

    @field_validator('open', mode='before')
    @classmethod
    def parse_open(cls, v):
        """A missing or null list means there are no open incidents."""
        return [] if v is None else v


class FeedResponse(BaseModel):
    """Model for the driftinfo API response."""
    status: str = Field(..., description="'ok' when the request succeeded")
    data: FeedData = Field(default_factory=FeedData, description="Response payload")

    @field_validator('data', mode='before')
    @classmethod
    def parse_data(cls, v):
        """Treat a null payload as empty."""
        return {} if v is None else v

    @property
    def is_ok(self) -> bool:
        """Whether the API reported success."""
        return self.status == 'ok'
