"""Model for a successful incidents fetch."""

from typing import List
from pydantic import BaseModel, Field
from .incident_record import IncidentRecord


class IncidentsResponse(BaseModel):
    """Model for a successful incidents fetch."""
    incidents: List[IncidentRecord] = Field(default_factory=list, description="Parsed incidents in feed order")
    message: str = Field(..., description="Summary message")
