"""
Google Calendar REST client, request models and errors.
"""

from .client import (
    EVENTS_INSERT_BASE_URL,
    EVENTS_LIST_BASE_URL,
    OAUTH_CALLBACK_REFERER,
    CalendarClient,
    validate_time_range,
)
from .errors import (
    CalendarToolError,
    CredentialError,
    TransportError,
    UpstreamError,
    ValidationError,
)
from .models import (
    CreateEventRequest,
    EventDateTime,
    EventPayload,
    EventQuery,
)

__all__ = [
    # Client
    'CalendarClient',
    'validate_time_range',
    'EVENTS_INSERT_BASE_URL',
    'EVENTS_LIST_BASE_URL',
    'OAUTH_CALLBACK_REFERER',

    # Errors
    'CalendarToolError',
    'CredentialError',
    'TransportError',
    'UpstreamError',
    'ValidationError',

    # Models
    'CreateEventRequest',
    'EventDateTime',
    'EventPayload',
    'EventQuery',
]
