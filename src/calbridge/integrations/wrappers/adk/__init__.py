"""
ADK Wrappers for Google Calendar

This module provides the Calendar tool adapters and their Google
ADK-compatible tool wrappers.
"""

from .base_google_tool import (
    CalendarAdapter,
    CalendarBridgeTool,
)

from .calendar_tools import (
    CREATE_EVENT_DESCRIPTOR,
    GET_EVENTS_DESCRIPTOR,
    EventCreator,
    EventLister,
    create_calendar_tools,
)

from .descriptor import (
    ToolDescriptor,
    schema_from_model,
)

from .results import (
    ToolFailure,
    ToolResult,
    ToolSuccess,
)

__all__ = [
    # Base classes
    'CalendarAdapter',
    'CalendarBridgeTool',

    # Calendar tools
    'CREATE_EVENT_DESCRIPTOR',
    'GET_EVENTS_DESCRIPTOR',
    'EventCreator',
    'EventLister',
    'create_calendar_tools',

    # Descriptors
    'ToolDescriptor',
    'schema_from_model',

    # Results
    'ToolFailure',
    'ToolResult',
    'ToolSuccess',
]
