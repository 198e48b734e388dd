"""
Calendar Tools for Google ADK

This module provides the two Calendar adapters (create an event, list events)
and the ADK tools that expose them. Credentials come from an injected token
provider; nothing is read from ambient state inside the adapters.
"""

from typing import Any, Dict, List, Optional

import httpx

from ...gsuite.auth import EnvironmentTokenProvider
from ...gsuite.gcalendar.client import CalendarClient, TokenProvider
from ...gsuite.gcalendar.models import CreateEventRequest, EventQuery
from .base_google_tool import CalendarAdapter, CalendarBridgeTool
from .descriptor import ToolDescriptor


# ==============================================================================
# Tool Descriptors (What the registry advertises and the agent sees)
# ==============================================================================

CREATE_EVENT_DESCRIPTOR = ToolDescriptor.from_model(
    name="create_calendar_event",
    description="Create a calendar event in Google Calendar.",
    model=CreateEventRequest,
)

GET_EVENTS_DESCRIPTOR = ToolDescriptor.from_model(
    name="get_events",
    description="Retrieve events from a specified Google Calendar.",
    model=EventQuery,
)


# ==============================================================================
# Calendar Adapters
# ==============================================================================


class EventCreator(CalendarAdapter):
    """
    Create an event after checking that it ends after it starts.

    Attendees are not notified (sendUpdates=none).

    Example:
        >>> creator = EventCreator(CalendarClient(EnvironmentTokenProvider()))
        >>> result = await creator.execute({
        ...     "calendarId": "primary",
        ...     "eventData": {
        ...         "summary": "Team Standup",
        ...         "start": {"dateTime": "2024-03-15T09:00:00Z", "timeZone": "UTC"},
        ...         "end": {"dateTime": "2024-03-15T09:30:00Z", "timeZone": "UTC"},
        ...     },
        ... })
    """

    descriptor = CREATE_EVENT_DESCRIPTOR
    request_model = CreateEventRequest
    error_prefix = "An error occurred while creating the calendar event: "

    async def _call(self, request: CreateEventRequest) -> Dict[str, Any]:
        return await self.client.create_event(request.calendar_id, request.event_data)


class EventLister(CalendarAdapter):
    """
    List the events of a calendar.

    Omitted flags default to showHiddenInvitations=false, singleEvents=true,
    alwaysIncludeEmail=false and orderBy=startTime. Only the first page of
    results is returned.
    """

    descriptor = GET_EVENTS_DESCRIPTOR
    request_model = EventQuery
    error_prefix = "An error occurred while retrieving events: "

    async def _call(self, request: EventQuery) -> Dict[str, Any]:
        return await self.client.get_events(request)


# ==============================================================================
# Tool Registration Helper
# ==============================================================================


def create_calendar_tools(
    token_provider: Optional[TokenProvider] = None,
    include: Optional[List[str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> list:
    """
    Create Calendar tools for ADK.

    Args:
        token_provider: Callable returning the bearer token. Defaults to
                        EnvironmentTokenProvider(), which reads ISTRUZI_API_KEY
                        (or the variable named by CALBRIDGE_TOKEN_ENV_VAR)
                        on every call.
        include: Optional list of tool names to include. If None, includes all tools.
                 Available tools: 'create', 'get_events'
        transport: Optional httpx transport for the underlying client

    Returns:
        List of configured Calendar tools ready to add to an ADK agent

    Examples:
        >>> # Get all Calendar tools
        >>> calendar_tools = create_calendar_tools()

        >>> # Read-only
        >>> calendar_tools = create_calendar_tools(include=['get_events'])

        >>> # Explicit credentials
        >>> calendar_tools = create_calendar_tools(
        ...     token_provider=GoogleCredentialsTokenProvider(credentials)
        ... )
    """
    client = CalendarClient(
        token_provider or EnvironmentTokenProvider(),
        transport=transport,
    )

    # Define all available tools
    all_tools = {
        'create': CalendarBridgeTool(EventCreator(client)),
        'get_events': CalendarBridgeTool(EventLister(client)),
    }

    # Filter tools based on include list
    if include is None:
        return list(all_tools.values())
    else:
        return [all_tools[name] for name in include if name in all_tools]
