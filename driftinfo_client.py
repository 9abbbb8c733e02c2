"""
Driftinfo Client - Bahnhof network status feed

This module provides a Python interface to Bahnhof's "driftinfo" status page:
- Status page (HTML) - issues the PHPSESSID session cookie and a CSRF token
- Driftinfo API (JSON) - open incidents, usable only with the cookie and token

Main class: DriftinfoClient
Fetches the open incidents and turns each raw entry into an IncidentRecord.

Usage:
    from driftinfo_client import DriftinfoClient

    client = DriftinfoClient()
    result = client.get_incidents()
    if isinstance(result, IncidentsResponse):
        for incident in result.incidents:
            print(incident.operator)
"""

import logging
from typing import Optional, Union

import requests
from bs4 import BeautifulSoup
from pydantic import ValidationError

from config import AppConfig, get_config
from models import (
    FeedResponse,
    IncidentRecord,
    IncidentsError,
    IncidentsResponse,
    SessionTokens,
)
from title_parser import get_title_parser

logger = logging.getLogger(__name__)

# ============================================================================
# Configuration Constants
# ============================================================================

SESSION_COOKIE = 'PHPSESSID'
CSRF_META_NAME = 'csrf-token'

# ============================================================================
# DriftinfoClient Class
# ============================================================================

class DriftinfoClient:
    """
    Bahnhof driftinfo client

    Fetching incidents takes two requests:
    1. GET the status page to obtain a session cookie and CSRF token
    2. GET the API with both to receive the open incidents as JSON

    Errors are never raised; every public method returns either its success
    model or an IncidentsError.

    Example:
        >>> client = DriftinfoClient()
        >>> result = client.get_incidents()
        >>> print(result.message)
    """

    def __init__(self, config: Optional[AppConfig] = None):
        """
        Initialize the client.

        Args:
            config: Application configuration. Uses the global config if not provided.
        """
        self.config = config or get_config()
        self.title_parser = get_title_parser(self.config.title_parser_mode)

    # ------------------------------------------------------------------------
    # Private Helper Methods
    # ------------------------------------------------------------------------

    def _headers(self) -> dict:
        """Headers sent with every request."""
        return {'User-Agent': self.config.user_agent}

    def _extract_csrf_token(self, html: str) -> Optional[str]:
        """
        Read the CSRF token from the status page.

        Args:
            html: Status page body

        Returns:
            Content of <meta name="csrf-token">, or None if absent
        """
        soup = BeautifulSoup(html, 'html.parser')
        meta = soup.find('meta', attrs={'name': CSRF_META_NAME})
        if meta is None:
            return None
        return meta.get('content') or None

    # ------------------------------------------------------------------------
    # Public API Methods
    # ------------------------------------------------------------------------

    def fetch_tokens(self) -> Union[SessionTokens, IncidentsError]:
        """
        Load the status page and collect the session cookie and CSRF token.

        Returns:
            Union[SessionTokens, IncidentsError]

            On Success - SessionTokens with attributes:
                - cookie (str): PHPSESSID cookie value
                - csrf_token (str): CSRF token from the page's meta tags

            On Error - IncidentsError with attributes:
                - error (str): Brief error type (e.g., "HTTP 503")
                - message (str): Detailed error description
        """
        try:
            response = requests.get(
                self.config.base_url,
                headers=self._headers(),
                timeout=self.config.request_timeout,
            )
        except requests.RequestException as e:
            return IncidentsError(
                error=str(e),
                message=f"Unable to load status page: {str(e)}"
            )

        if response.status_code != 200:
            return IncidentsError(
                error=f"HTTP {response.status_code}",
                message=f"Request to Bahnhof failed with status {response.status_code}"
            )

        cookie = response.cookies.get(SESSION_COOKIE)
        if not cookie:
            return IncidentsError(
                error='Missing cookie',
                message='Failed to retrieve cookie'
            )

        csrf_token = self._extract_csrf_token(response.text)
        if not csrf_token:
            return IncidentsError(
                error='Missing CSRF token',
                message='Failed to extract CSRF token'
            )

        logger.debug("Obtained session cookie and CSRF token")
        return SessionTokens(cookie=cookie, csrf_token=csrf_token)

    def fetch_incidents(self, tokens: SessionTokens) -> Union[IncidentsResponse, IncidentsError]:
        """
        Call the driftinfo API and parse the open incidents.

        Args:
            tokens: Session cookie and CSRF token from fetch_tokens()

        Returns:
            Union[IncidentsResponse, IncidentsError]

            On Success - IncidentsResponse with attributes:
                - incidents (List[IncidentRecord]): Parsed incidents in feed order
                - message (str): Summary message

            On Error - IncidentsError with attributes:
                - error (str): Brief error type
                - message (str): Detailed error description
        """
        headers = self._headers()
        headers['X-CSRF-TOKEN'] = tokens.csrf_token
        headers['X-Requested-With'] = 'XMLHttpRequest'

        try:
            response = requests.get(
                self.config.api_url,
                headers=headers,
                cookies={SESSION_COOKIE: tokens.cookie},
                timeout=self.config.request_timeout,
            )
        except requests.RequestException as e:
            return IncidentsError(
                error=str(e),
                message=f"Unable to fetch incidents: {str(e)}"
            )

        if response.status_code != 200:
            return IncidentsError(
                error=f"HTTP {response.status_code}",
                message=f"Request to Bahnhof failed with status {response.status_code}"
            )

        try:
            feed = FeedResponse.model_validate_json(response.content)
        except ValidationError as e:
            return IncidentsError(
                error='Decode error',
                message=f"Failed to decode body: {str(e)}"
            )

        if not feed.is_ok:
            return IncidentsError(
                error=f"API status {feed.status}",
                message='API returned an error'
            )

        incidents = [
            IncidentRecord.from_feed_entry(entry, title_parser=self.title_parser)
            for entry in feed.data.open
        ]
        logger.info(f"📥 Received {len(incidents)} open incident(s)")

        return IncidentsResponse(
            incidents=incidents,
            message=f"Found {len(incidents)} open incident(s)"
        )

    def get_incidents(self) -> Union[IncidentsResponse, IncidentsError]:
        """
        Fetch tokens and then the open incidents.

        Returns:
            Union[IncidentsResponse, IncidentsError]
        """
        tokens = self.fetch_tokens()
        if isinstance(tokens, IncidentsError):
            return tokens
        return self.fetch_incidents(tokens)
