"""Shared schema models for operations and invocation results."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ParameterKind(str, Enum):
    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"
    ENUM = "enum"


class ParameterSpec(BaseModel):
    """A single named argument accepted by an operation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    kind: ParameterKind
    description: str = ""
    allowed_values: tuple[str, ...] | None = None
    default: Any = None
    required: bool = False

    @model_validator(mode="after")
    def _validate_enum(self) -> "ParameterSpec":
        if self.kind == ParameterKind.ENUM and not self.allowed_values:
            raise ValueError(f"enum parameter {self.name} requires allowed_values")
        if self.kind != ParameterKind.ENUM and self.allowed_values:
            raise ValueError(f"allowed_values only apply to enum parameters ({self.name})")
        return self

    def json_schema(self) -> dict[str, Any]:
        """Render the parameter as a JSON-schema property."""
        if self.kind == ParameterKind.ENUM:
            schema: dict[str, Any] = {"type": "string", "enum": list(self.allowed_values or ())}
        else:
            schema = {"type": self.kind.value}
        if self.description:
            schema["description"] = self.description
        if self.default is not None:
            schema["default"] = self.default
        return schema


class OperationDescriptor(BaseModel):
    """Structured metadata describing an operation exposed to callers."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    description: str
    parameters: tuple[ParameterSpec, ...] = ()

    def input_schema(self) -> dict[str, Any]:
        properties = {param.name: param.json_schema() for param in self.parameters}
        schema: dict[str, Any] = {"type": "object", "properties": properties}
        required = [param.name for param in self.parameters if param.required]
        if required:
            schema["required"] = required
        return schema

    def missing_required(self, arguments: dict[str, Any]) -> list[str]:
        return [
            param.name
            for param in self.parameters
            if param.required and arguments.get(param.name) in (None, "")
        ]


class InvocationRequest(BaseModel):
    """Request envelope naming an operation and its arguments."""

    model_config = ConfigDict(extra="forbid")

    operation_name: str
    arguments: dict[str, Any] = Field(default_factory=dict)


class Success(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    status: Literal["success"] = "success"
    text: str = ""


class Failure(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    status: Literal["failure"] = "failure"
    kind: str
    message: str


InvocationResult = Annotated[Union[Success, Failure], Field(discriminator="status")]


__all__ = [
    "Failure",
    "InvocationRequest",
    "InvocationResult",
    "OperationDescriptor",
    "ParameterKind",
    "ParameterSpec",
    "Success",
]
