"""Model for a failed incidents fetch."""

from pydantic import BaseModel, Field


class IncidentsError(BaseModel):
    """Model for a failed incidents fetch."""
    error: str = Field(..., description="Error message")
    message: str = Field(..., description="Detailed error description")
