"""Model for the session credentials scraped from the status page."""

from pydantic import BaseModel, Field


class SessionTokens(BaseModel):
    """Model for the cookie/CSRF token pair needed by the driftinfo API."""
    cookie: str = Field(..., description="Value of the PHPSESSID session cookie")
    csrf_token: str = Field(..., description="Content of the csrf-token meta tag")
