"""Tests for the OpenAI tool definition export."""

from google.genai import types

from calbridge.integrations.gsuite.auth import StaticTokenProvider
from calbridge.integrations.wrappers.adk import (
    CREATE_EVENT_DESCRIPTOR,
    GET_EVENTS_DESCRIPTOR,
    create_calendar_tools,
)
from calbridge.models.openai import (
    adk_schema_to_openai_json_schema,
    function_declaration_to_openai_tool,
    function_tools_to_openai_tools,
)


def test_get_events_definition():
    definition = function_declaration_to_openai_tool(
        GET_EVENTS_DESCRIPTOR.to_function_declaration()
    )

    assert definition == {
        'type': 'function',
        'function': {
            'name': 'get_events',
            'description': 'Retrieve events from a specified Google Calendar.',
            'parameters': {
                'type': 'object',
                'properties': {
                    'calendar_id': {
                        'type': 'string',
                        'description': 'The ID of the calendar to retrieve events from.',
                    },
                    'showHiddenInvitations': {
                        'type': 'boolean',
                        'description': 'Whether to show hidden invitations.',
                    },
                    'singleEvents': {
                        'type': 'boolean',
                        'description': 'Whether to return single events instead of recurring events.',
                    },
                    'alwaysIncludeEmail': {
                        'type': 'boolean',
                        'description': 'Whether to always include email addresses.',
                    },
                    'orderBy': {
                        'type': 'string',
                        'description': 'The order in which to sort the events.',
                        'enum': ['startTime', 'updated'],
                    },
                },
                'required': ['calendar_id'],
            },
        },
    }


def test_create_event_definition_nesting():
    definition = function_declaration_to_openai_tool(
        CREATE_EVENT_DESCRIPTOR.to_function_declaration()
    )
    params = definition['function']['parameters']

    assert params['required'] == ['calendarId', 'eventData']
    event = params['properties']['eventData']
    assert event['type'] == 'object'
    assert event['required'] == ['summary', 'start', 'end']
    assert event['properties']['start'] == {
        'type': 'object',
        'description': 'The start time of the event.',
        'properties': {
            'dateTime': {
                'type': 'string',
                'description': 'Date and time in ISO 8601 format (e.g., "2024-03-15T10:00:00Z").',
            },
            'timeZone': {
                'type': 'string',
                'description': 'IANA time zone of dateTime (e.g., "America/New_York").',
            },
        },
        'required': ['dateTime', 'timeZone'],
    }
    assert 'required' not in event['properties']['location']


def test_array_items():
    schema = types.Schema(
        type=types.Type.ARRAY,
        items=types.Schema(type=types.Type.STRING),
    )
    assert adk_schema_to_openai_json_schema(schema) == {
        'type': 'array',
        'items': {'type': 'string'},
    }


def test_passthrough_values():
    assert adk_schema_to_openai_json_schema(None) == {}
    assert adk_schema_to_openai_json_schema({'type': 'string'}) == {'type': 'string'}


def test_declaration_without_parameters():
    definition = function_declaration_to_openai_tool(
        types.FunctionDeclaration(name='ping', description='Ping.')
    )
    assert definition['function']['parameters'] == {'type': 'object'}


def test_function_tools_to_openai_tools():
    tools = create_calendar_tools(token_provider=StaticTokenProvider('abc'))

    definitions = function_tools_to_openai_tools(tools)

    assert [d['function']['name'] for d in definitions] == [
        'create_calendar_event',
        'get_events',
    ]
    assert function_tools_to_openai_tools(None) == []
