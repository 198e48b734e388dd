"""
Request models for the Google Calendar tools.

These models are the source of truth for the tool parameter schemas: the
descriptors advertised to agent frameworks are generated from them. Field
aliases match the JSON names the Calendar API and the tool callers use.

Based on the Google Calendar API v3 Event resource:
https://developers.google.com/calendar/api/v3/reference/events#resource
"""

import datetime
from typing import Any, Dict, Literal, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

_DATETIME = TypeAdapter(datetime.datetime)


class EventDateTime(BaseModel):
    """Start or end time of an event."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    date_time: str = Field(
        ...,
        alias="dateTime",
        description="Date and time in ISO 8601 format (e.g., \"2024-03-15T10:00:00Z\").",
    )
    time_zone: str = Field(
        ...,
        alias="timeZone",
        description="IANA time zone of dateTime (e.g., \"America/New_York\").",
    )

    def parsed(self) -> datetime.datetime:
        """
        Parse dateTime into a datetime for ordering checks.

        Any RFC 3339 value is accepted (fractions of any length, "Z" or
        numeric offsets). Values without an offset are read
        in their own timeZone when it is a known IANA zone, UTC otherwise.

        Raises:
            ValueError: If dateTime is not ISO 8601 (pydantic.ValidationError)
        """
        value = _DATETIME.validate_python(self.date_time)
        if value.tzinfo is None:
            value = value.replace(tzinfo=_zone_or_utc(self.time_zone))
        return value


def _zone_or_utc(name: str) -> datetime.tzinfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return datetime.timezone.utc


class EventPayload(BaseModel):
    """
    Event to be created.

    Keys not declared here (description, attendees, reminders, ...) are kept
    and forwarded to the API unchanged.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    summary: str = Field(..., description="The summary of the event.")
    start: EventDateTime = Field(..., description="The start time of the event.")
    end: EventDateTime = Field(..., description="The end time of the event.")
    location: Optional[str] = Field(None, description="The location of the event.")
    status: Optional[str] = Field(
        None,
        description='The status of the event (e.g., "tentative", "confirmed").',
    )
    transparency: Optional[str] = Field(
        None,
        description='The transparency of the event (e.g., "transparent", "opaque").',
    )

    def to_body(self) -> Dict[str, Any]:
        """Serialize exactly the keys the caller supplied, under their API names."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class CreateEventRequest(BaseModel):
    """Arguments of the create_calendar_event tool."""

    model_config = ConfigDict(populate_by_name=True)

    calendar_id: str = Field(
        ...,
        alias="calendarId",
        description="The ID of the calendar where the event will be created.",
    )
    event_data: EventPayload = Field(
        ...,
        alias="eventData",
        description="The data for the event to be created.",
    )


class EventQuery(BaseModel):
    """Arguments of the get_events tool."""

    model_config = ConfigDict(populate_by_name=True)

    calendar_id: str = Field(
        ..., description="The ID of the calendar to retrieve events from."
    )
    show_hidden_invitations: bool = Field(
        False,
        alias="showHiddenInvitations",
        description="Whether to show hidden invitations.",
    )
    single_events: bool = Field(
        True,
        alias="singleEvents",
        description="Whether to return single events instead of recurring events.",
    )
    always_include_email: bool = Field(
        False,
        alias="alwaysIncludeEmail",
        description="Whether to always include email addresses.",
    )
    order_by: Literal["startTime", "updated"] = Field(
        "startTime",
        alias="orderBy",
        description="The order in which to sort the events.",
    )

    def to_params(self) -> Dict[str, str]:
        """Query string values, in the order the API documents them."""
        return {
            "showHiddenInvitations": _bool_param(self.show_hidden_invitations),
            "singleEvents": _bool_param(self.single_events),
            "alwaysIncludeEmail": _bool_param(self.always_include_email),
            "orderBy": self.order_by,
        }


def _bool_param(value: bool) -> str:
    return "true" if value else "false"
