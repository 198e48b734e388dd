"""
Result types returned by the calendar tool adapters.

An adapter call never raises: it returns either a ToolSuccess carrying the
decoded upstream body or a ToolFailure carrying the error message.
"""

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict


class ToolSuccess(BaseModel):
    """Decoded upstream response body."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True
    data: Any

    def to_response(self) -> Any:
        return self.data


class ToolFailure(BaseModel):
    """Normalized failure, rendered as {"error": message}."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    error: str

    def to_response(self) -> dict[str, str]:
        return {"error": self.error}


ToolResult = Union[ToolSuccess, ToolFailure]
