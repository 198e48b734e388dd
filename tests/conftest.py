"""
Pytest configuration and shared fixtures for the Calendar tool tests.
"""

from typing import Any, Optional

import httpx
import pytest

from calbridge.integrations.gsuite.auth import StaticTokenProvider
from calbridge.integrations.gsuite.gcalendar import CalendarClient

TEST_TOKEN = "test-access-token"


class RecordingTransport:
    """Mock transport that records every request and replays a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.json_body: Any = {}
        self.raw_body: Optional[bytes] = None
        self.error: Optional[Exception] = None

    def respond_with(self, status_code: int, json_body: Any = None, raw_body: Optional[bytes] = None):
        self.status_code = status_code
        self.json_body = json_body
        self.raw_body = raw_body

    def fail_with(self, error: Exception):
        self.error = error

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw_body is not None:
            return httpx.Response(self.status_code, content=self.raw_body)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)


@pytest.fixture
def recorder():
    """Transport recorder returning 200 {} unless told otherwise."""
    return RecordingTransport()


@pytest.fixture
def client(recorder):
    """CalendarClient wired to the recording transport with a fixed token."""
    return CalendarClient(StaticTokenProvider(TEST_TOKEN), transport=recorder.transport)


@pytest.fixture
def event_data():
    """A valid event payload, one hour long."""
    return {
        "summary": "Sync",
        "start": {"dateTime": "2024-01-01T09:00:00Z", "timeZone": "UTC"},
        "end": {"dateTime": "2024-01-01T10:00:00Z", "timeZone": "UTC"},
    }
