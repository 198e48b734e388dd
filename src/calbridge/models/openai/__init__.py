from .tool_schema import (
    adk_schema_to_openai_json_schema,
    function_declaration_to_openai_tool,
    function_tools_to_openai_tools,
)

__all__ = [
    'adk_schema_to_openai_json_schema',
    'function_declaration_to_openai_tool',
    'function_tools_to_openai_tools',
]
