"""Google Calendar tool adapters for agent frameworks."""

from .integrations.gsuite.auth import (
    EnvironmentTokenProvider,
    GoogleCredentialsTokenProvider,
    StaticTokenProvider,
)
from .integrations.gsuite.gcalendar import CalendarClient
from .integrations.wrappers.adk import (
    EventCreator,
    EventLister,
    ToolFailure,
    ToolSuccess,
    create_calendar_tools,
)

__version__ = "0.1.0"

__all__ = [
    'CalendarClient',
    'EnvironmentTokenProvider',
    'EventCreator',
    'EventLister',
    'GoogleCredentialsTokenProvider',
    'StaticTokenProvider',
    'ToolFailure',
    'ToolSuccess',
    'create_calendar_tools',
]
