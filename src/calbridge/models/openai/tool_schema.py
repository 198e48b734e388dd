from __future__ import annotations

from typing import Any, Dict, List

from google.adk.tools.base_tool import BaseTool
from google.genai import types


_TYPE_MAP: dict[str, str] = {
    'OBJECT': 'object',
    'STRING': 'string',
    'INTEGER': 'integer',
    'NUMBER': 'number',
    'BOOLEAN': 'boolean',
    'ARRAY': 'array',
}


def adk_schema_to_openai_json_schema(
    schema: types.Schema | dict | None,
) -> Dict[str, Any]:
  """Convert ADK/GenAI Schema to OpenAI JSON Schema for function tools."""
  if schema is None:
    return {}
  if isinstance(schema, dict):
    return schema

  json_schema: dict[str, Any] = {}

  stype = schema.type
  if stype is not None:
    key = stype.value if hasattr(stype, 'value') else str(stype)
    mapped = _TYPE_MAP.get(key.upper())
    if mapped:
      json_schema['type'] = mapped

  if schema.description:
    json_schema['description'] = schema.description

  if schema.enum:
    json_schema['enum'] = list(schema.enum)

  if schema.properties:
    json_schema['properties'] = {
        name: adk_schema_to_openai_json_schema(subschema)
        for name, subschema in schema.properties.items()
    }
    json_schema.setdefault('type', 'object')

  if schema.required:
    json_schema['required'] = list(schema.required)

  if schema.items:
    json_schema['items'] = adk_schema_to_openai_json_schema(schema.items)

  return json_schema


def function_declaration_to_openai_tool(
    decl: types.FunctionDeclaration,
) -> Dict[str, Any]:
  """Convert one function declaration to an OpenAI `tools` entry."""
  params_schema = (
      adk_schema_to_openai_json_schema(decl.parameters)
      if decl.parameters
      else {'type': 'object'}
  )
  return {
      'type': 'function',
      'function': {
          'name': decl.name,
          'description': decl.description,
          'parameters': params_schema,
      },
  }


def function_tools_to_openai_tools(
    tools: list[BaseTool] | None,
) -> List[Dict[str, Any]]:
  """Convert ADK tools to OpenAI chat-completions `tools` entries.

  Tools without a declaration are skipped.
  """
  if not tools:
    return []
  converted: list[dict[str, Any]] = []
  for tool in tools:
    decl = tool._get_declaration()
    if decl is None:
      continue
    converted.append(function_declaration_to_openai_tool(decl))
  return converted
