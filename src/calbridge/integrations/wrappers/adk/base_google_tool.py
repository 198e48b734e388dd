"""
Base Calendar Adapter and Tool for ADK

This module provides the adapter base class shared by the Calendar tools and
the ADK tool that exposes an adapter to an agent.

Key features:
- Arguments validated against the adapter's request model
- One upstream call per invocation, through an injected CalendarClient
- Every failure normalized to {"error": message}, never raised to the caller
- Uses FunctionTool (stable ADK API) with a declaration generated from the
  request model
"""

import logging
from typing import Any, ClassVar, Type

import pydantic
from google.adk.tools import FunctionTool
from google.adk.tools.tool_context import ToolContext
from google.genai import types
from typing_extensions import override

from ...gsuite.gcalendar.client import CalendarClient
from ...gsuite.gcalendar.errors import CalendarToolError, UpstreamError, ValidationError
from .descriptor import ToolDescriptor
from .results import ToolFailure, ToolResult, ToolSuccess

logger = logging.getLogger(__name__)


def _format_validation_errors(exc: pydantic.ValidationError) -> str:
    """Render pydantic errors as "field.path: message" pairs."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


class CalendarAdapter:
    """
    Stateless adapter turning a tool call into one Calendar API request.

    Subclasses declare the descriptor, the request model that validates the
    arguments, and the prefix used for error messages, and implement _call().

    Args:
        client: CalendarClient used for the upstream request
    """

    descriptor: ClassVar[ToolDescriptor]
    request_model: ClassVar[Type[pydantic.BaseModel]]
    error_prefix: ClassVar[str]

    def __init__(self, client: CalendarClient):
        self.client = client

    @property
    def name(self) -> str:
        return self.descriptor.name

    async def _call(self, request: Any) -> Any:
        raise NotImplementedError

    async def execute(self, args: dict[str, Any]) -> ToolResult:
        """
        Run the tool with raw arguments from the agent.

        Args:
            args: Tool arguments, keyed by the names in the descriptor

        Returns:
            ToolSuccess with the decoded upstream body, or ToolFailure
        """
        try:
            try:
                request = self.request_model.model_validate(args)
            except pydantic.ValidationError as e:
                raise ValidationError(_format_validation_errors(e))

            return ToolSuccess(data=await self._call(request))

        except CalendarToolError as e:
            if isinstance(e, UpstreamError):
                logger.error(
                    f"[{self.name}] Calendar API returned HTTP {e.status_code}: {e.reason or e}"
                )
            else:
                logger.error(f"[{self.name}] {type(e).__name__}: {e}")
            return ToolFailure(error=f"{self.error_prefix}{e}")

        except Exception as ex:
            logger.error(f"[{self.name}] Tool execution failed: {ex}", exc_info=True)
            return ToolFailure(error=f"{self.error_prefix}{type(ex).__name__}: {ex}")


class CalendarBridgeTool(FunctionTool):
    """
    ADK tool exposing a CalendarAdapter to an agent.

    The declaration the model sees is the adapter's descriptor, and the
    result handed back to the model is the adapter's normalized response.

    **Important:** Credentials are resolved by the adapter's CalendarClient;
    this tool does not look at tool_context for them.
    """

    def __init__(self, adapter: CalendarAdapter):
        """
        Initialize the tool.

        Args:
            adapter: The Calendar adapter to expose
        """
        super().__init__(adapter.execute)

        self.adapter = adapter
        self.name = adapter.descriptor.name
        self.description = adapter.descriptor.description

    @override
    def _get_declaration(self) -> types.FunctionDeclaration:
        return self.adapter.descriptor.to_function_declaration()

    @override
    async def run_async(self, *, args: dict[str, Any], tool_context: ToolContext) -> Any:
        """
        Execute the adapter with the arguments chosen by the model.

        Args:
            args: Tool arguments from the agent
            tool_context: ADK tool execution context (unused)

        Returns:
            Decoded upstream response or {"error": message}
        """
        result = await self.adapter.execute(args)
        return result.to_response()
