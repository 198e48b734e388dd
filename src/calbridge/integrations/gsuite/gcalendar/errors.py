"""
Error types raised by the Google Calendar client.

Every failure the client can produce derives from CalendarToolError so the
tool adapters can catch a single type at their boundary.
"""

import json
from typing import Any, Optional


class CalendarToolError(Exception):
    """Base class for Calendar tool failures."""


class ValidationError(CalendarToolError):
    """Input rejected locally, before any request was sent."""


class CredentialError(CalendarToolError):
    """No bearer token could be obtained for the request."""


class TransportError(CalendarToolError):
    """Network failure, or a response body that could not be decoded."""


class UpstreamError(CalendarToolError):
    """
    Non-success HTTP status returned by the Calendar API.

    Args:
        status_code: HTTP status of the response
        body: Decoded JSON error body
    """

    def __init__(self, status_code: int, body: Any):
        self.status_code = status_code
        self.body = body
        super().__init__(json.dumps(body, separators=(",", ":")))

    @property
    def reason(self) -> Optional[str]:
        """Upstream error message, when the body follows Google's error format."""
        if isinstance(self.body, dict) and isinstance(self.body.get("error"), dict):
            return self.body["error"].get("message")
        return None
