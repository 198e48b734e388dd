"""
Tool descriptors generated from request models.

The request models in gcalendar.models are the source of truth; this module
translates them into google.genai Schema objects so the descriptor a registry
sees always matches what the adapter validates.
"""

import types as pytypes
import typing
from typing import Any, Literal, Optional, Type, Union

from google.genai import types
from pydantic import BaseModel, ConfigDict

_PRIMITIVE_TYPES: dict[Any, types.Type] = {
    str: types.Type.STRING,
    bool: types.Type.BOOLEAN,
    int: types.Type.INTEGER,
    float: types.Type.NUMBER,
}


def schema_from_model(
    model: Type[BaseModel], description: Optional[str] = None
) -> types.Schema:
    """
    Build an OBJECT schema from a pydantic model.

    Properties are keyed by field alias when one is set, and every field
    without a default is listed as required.

    Args:
        model: Pydantic model class
        description: Description for the object itself (optional)

    Returns:
        Equivalent google.genai Schema

    Raises:
        TypeError: If a field uses a type with no schema equivalent
    """
    properties: dict[str, types.Schema] = {}
    required: list[str] = []

    for field_name, field in model.model_fields.items():
        key = field.alias or field_name
        properties[key] = _schema_from_annotation(field.annotation, field.description)
        if field.is_required():
            required.append(key)

    return types.Schema(
        type=types.Type.OBJECT,
        description=description,
        properties=properties,
        required=required or None,
    )


def _schema_from_annotation(annotation: Any, description: Optional[str]) -> types.Schema:
    origin = typing.get_origin(annotation)

    if origin is Union or origin is pytypes.UnionType:
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(members) != 1:
            raise TypeError(f"Unsupported union parameter type: {annotation!r}")
        return _schema_from_annotation(members[0], description)

    if origin is Literal:
        return types.Schema(
            type=types.Type.STRING,
            description=description,
            enum=[str(value) for value in typing.get_args(annotation)],
        )

    if origin is list:
        (item,) = typing.get_args(annotation)
        return types.Schema(
            type=types.Type.ARRAY,
            description=description,
            items=_schema_from_annotation(item, None),
        )

    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return schema_from_model(annotation, description)

    if annotation in _PRIMITIVE_TYPES:
        return types.Schema(type=_PRIMITIVE_TYPES[annotation], description=description)

    raise TypeError(f"Unsupported parameter type: {annotation!r}")


class ToolDescriptor(BaseModel):
    """Name, description and parameter schema advertised for one tool."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    parameters: types.Schema

    @classmethod
    def from_model(
        cls, name: str, description: str, model: Type[BaseModel]
    ) -> "ToolDescriptor":
        return cls(
            name=name,
            description=description,
            parameters=schema_from_model(model),
        )

    def to_function_declaration(self) -> types.FunctionDeclaration:
        return types.FunctionDeclaration(
            name=self.name,
            description=self.description,
            parameters=self.parameters.model_copy(deep=True),
        )
