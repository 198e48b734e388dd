"""
Google Calendar REST Client

This module provides a small, framework-agnostic client that issues the raw
Calendar API v3 requests behind the calendar tools. Each call makes exactly one
HTTP request and either returns the decoded JSON body or raises a
CalendarToolError subclass.
"""

import json
import logging
from typing import Any, Callable, Dict, Optional
from urllib.parse import quote

import httpx

from .errors import TransportError, UpstreamError, ValidationError
from .models import EventPayload, EventQuery

logger = logging.getLogger(__name__)

EVENTS_INSERT_BASE_URL = "https://www.googleapis.com/calendar/v3/calendars"
EVENTS_LIST_BASE_URL = "https://content.googleapis.com/calendar/v3/calendars"

# The list endpoint is called the way the OAuth playground callback calls it.
OAUTH_CALLBACK_REFERER = "https://oauth.pstmn.io/v1/callback"

TokenProvider = Callable[[], str]


# ==============================================================================
# Helper Functions (Pure utility functions, no network access)
# ==============================================================================

def _events_url(base_url: str, calendar_id: str) -> str:
    """Build the events collection URL for a calendar."""
    return f"{base_url}/{quote(calendar_id, safe='@')}/events"


def validate_time_range(event: EventPayload) -> None:
    """
    Check that an event ends after it starts.

    Args:
        event: Event payload to check

    Raises:
        ValidationError: If a dateTime cannot be parsed or end is not after start
    """
    try:
        start = event.start.parsed()
        end = event.end.parsed()
    except ValueError as e:
        raise ValidationError(
            f"Invalid event time. Use ISO 8601 format (e.g., '2024-03-15T10:00:00Z'). Error: {e}"
        )

    if start >= end:
        raise ValidationError("End time must be after start time")


def _decode_response(response: httpx.Response) -> Any:
    """
    Decode a Calendar API response.

    Returns:
        Decoded JSON body of a 2xx response

    Raises:
        UpstreamError: If the status is not 2xx and the body is JSON
        TransportError: If the body is not JSON
    """
    try:
        body = response.json()
    except ValueError as e:
        raise TransportError(
            f"Could not decode response (HTTP {response.status_code}): {e}"
        )

    if not response.is_success:
        raise UpstreamError(response.status_code, body)

    return body


# ==============================================================================
# Calendar Client Class
# ==============================================================================

class CalendarClient:
    """
    Google Calendar REST client for event operations.

    The client is stateless between calls: the bearer token is requested from
    the token provider on every call and a fresh HTTP client is opened and
    closed per request.

    Args:
        token_provider: Callable returning the bearer token to send
        transport: Optional httpx transport (e.g. httpx.MockTransport in tests)

    Example:
        >>> from calbridge.integrations.gsuite.auth import StaticTokenProvider
        >>> calendar = CalendarClient(StaticTokenProvider("ya29..."))
        >>> await calendar.get_events(EventQuery(calendar_id="primary"))
    """

    def __init__(
        self,
        token_provider: TokenProvider,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.token_provider = token_provider
        self.transport = transport
        logger.debug("CalendarClient initialized")

    async def _send(self, operation: str, method: str, url: str, **kwargs) -> Any:
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.request(method, url, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
            raise TransportError(f"{type(e).__name__}: {e}")

        logger.debug(f"[{operation}] HTTP {response.status_code}")
        return _decode_response(response)

    async def create_event(self, calendar_id: str, event: EventPayload) -> Dict[str, Any]:
        """
        Create a new calendar event without notifying attendees.

        Args:
            calendar_id: Calendar ID (e.g. "primary")
            event: Event payload, sent as the request body

        Returns:
            The created event resource as returned by the API

        Raises:
            ValidationError: If the event does not end after it starts
            CredentialError: If no token is available
            UpstreamError: If the API rejects the request
            TransportError: If the request or decoding fails
        """
        validate_time_range(event)

        url = _events_url(EVENTS_INSERT_BASE_URL, calendar_id)
        headers = {
            "Authorization": f"Bearer {self.token_provider()}",
            "Content-Type": "application/json",
        }

        logger.info(f"[create_event] Calendar: {calendar_id}, Summary: {event.summary}")

        created_event = await self._send(
            "create_event",
            "POST",
            url,
            params={"sendUpdates": "none"},
            headers=headers,
            content=json.dumps(event.to_body()),
        )

        if isinstance(created_event, dict):
            logger.info(f"[create_event] Created event: {created_event.get('id')}")
        return created_event

    async def get_events(self, query: EventQuery) -> Dict[str, Any]:
        """
        List events from a calendar.

        Only the first page is fetched; a nextPageToken in the result is
        returned to the caller untouched.

        Args:
            query: Calendar ID and filter flags

        Returns:
            The events list resource as returned by the API

        Raises:
            CredentialError: If no token is available
            UpstreamError: If the API rejects the request
            TransportError: If the request or decoding fails
        """
        url = _events_url(EVENTS_LIST_BASE_URL, query.calendar_id)
        headers = {
            "Authorization": f"Bearer {self.token_provider()}",
            "Referer": OAUTH_CALLBACK_REFERER,
        }

        logger.info(f"[get_events] Calendar: {query.calendar_id}, Order: {query.order_by}")

        events_result = await self._send(
            "get_events",
            "GET",
            url,
            params=query.to_params(),
            headers=headers,
        )

        if isinstance(events_result, dict):
            logger.info(f"[get_events] Retrieved {len(events_result.get('items', []))} events")
        return events_result
