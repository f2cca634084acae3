# The module is to define the API models for the HTTP surface.
# Date: 2026-10-18
# Version: 1.0.0

from pydantic import BaseModel, Field
from typing import Any, Dict, List


class ToolDefinition(BaseModel):
    """
    One entry of the GET /v1/tools response.
    Attributes:
        name (str): The stable tool name.
        description (str): What the tool does.
        inputSchema (dict): JSON-Schema object describing the arguments.
    """
    name: str
    description: str
    inputSchema: Dict[str, Any]


class ListToolsResponse(BaseModel):
    tools: List[ToolDefinition]


class CallToolRequest(BaseModel):
    """
    Defines the request body for the /v1/tools/call endpoint.
    Attributes:
        name (str): The tool to invoke.
        arguments (dict): The tool arguments; unknown keys are ignored.
    """
    name: str = Field(..., description="The name of the tool to invoke.")
    arguments: Dict[str, Any] = Field(default_factory=dict, description="The tool arguments.")


class CallToolResponse(BaseModel):
    """
    Defines the response body for the /v1/tools/call endpoint.
    Attributes:
        content (str): Pretty-printed JSON on success, 'Error: ...' on failure.
        is_error (bool): True when the invocation failed.
    """
    content: str
    is_error: bool = False
