"""Models for one entry of the driftinfo feed as published upstream."""

from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


class FeedMessage(BaseModel):
    """Model for a free-text status update attached to an entry."""
    message: str = Field(default='', description="Status update text")

    @field_validator('message', mode='before')
    @classmethod
    def parse_message(cls, v):
        """Treat a null message as empty text."""
        return '' if v is None else v


class FeedEntry(BaseModel):
    """Model for a raw incident entry: a title plus its status updates."""
    title: str = Field(..., description="Incident title, e.g. 'Driftstörning - 2022-03-29 - Ludvika (IP-Only)'")
    messages: List[FeedMessage] = Field(default_factory=list, description="Status updates in feed order")

    @field_validator('messages', mode='before')
    @classmethod
    def parse_messages(cls, v: Optional[list]):
        """Treat a null message list as empty."""
        return [] if v is None else v

    def message_texts(self) -> List[str]:
        """Message texts in feed order."""
        return [item.message for item in self.messages]
