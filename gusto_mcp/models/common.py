# The module is to define the common models for the application.
# Date: 2026-10-18
# Version: 1.0.0

import json
from typing import Any, Dict, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

ParameterType = Literal["string", "number", "boolean"]


class ParameterSpec(BaseModel):
    """
    Describes one input parameter of a tool.
    Attributes:
        name (str): The argument key the agent must use.
        type (ParameterType): JSON type of the value: string, number or boolean.
        description (str): Human-readable description shown to the agent.
        required (bool): Whether the parameter belongs to the schema's 'required' list.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="The argument key the agent must use.")
    type: ParameterType = Field(..., description="JSON type of the value.")
    description: str = Field(..., description="Human-readable description of the parameter.")
    required: bool = Field(default=False, description="Whether the parameter is required.")


class ToolDescriptor(BaseModel):
    """
    Describes one invocable tool: its stable name, a description for the agent
    and the ordered list of its parameters.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    parameters: Tuple[ParameterSpec, ...] = ()

    @model_validator(mode="after")
    def _check_unique_parameters(self) -> "ToolDescriptor":
        names = [p.name for p in self.parameters]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate parameter names in tool '{self.name}': {names}")
        return self

    def input_schema(self) -> Dict[str, Any]:
        """Returns the parameters as a JSON-Schema object, the shape agents expect."""
        return {
            "type": "object",
            "properties": {
                p.name: {"type": p.type, "description": p.description}
                for p in self.parameters
            },
            "required": [p.name for p in self.parameters if p.required],
        }

    def get_definition(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }


class InvocationRequest(BaseModel):
    """One tool call as received from the agent-facing layer."""
    tool_name: str
    arguments: Dict[str, Any] = Field(default_factory=dict)


class Success(BaseModel):
    """The upstream call returned a JSON payload."""
    kind: Literal["success"] = "success"
    payload: Any = None

    @property
    def is_error(self) -> bool:
        return False

    def to_text(self) -> str:
        return json.dumps(self.payload, indent=2, ensure_ascii=False)


class Failure(BaseModel):
    """The invocation failed; message is the human-readable reason."""
    kind: Literal["failure"] = "failure"
    message: str

    @property
    def is_error(self) -> bool:
        return True

    def to_text(self) -> str:
        return f"Error: {self.message}"


InvocationResult = Union[Success, Failure]


def render_result(result: InvocationResult) -> Tuple[str, bool]:
    """Converts an InvocationResult into the (content_text, is_error) pair sent to the agent."""
    return result.to_text(), result.is_error
