"""Abstractions shared by every remote-callable tool."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Mapping

from pydantic import BaseModel

from ..collection import Record
from ..schemas import NoArguments, ToolArguments


def _validate_text(value: str, *, field_name: str) -> str:
    """Ensure the provided value is a non-empty piece of text."""

    if not isinstance(value, str):
        raise TypeError(f"{field_name} must be a string, got {type(value)!r}")

    stripped = value.strip()
    if not stripped:
        raise ValueError(f"{field_name} must be a non-empty string")

    return stripped


@dataclass(frozen=True)
class ToolResult:
    """Outcome of a tool invocation with an explicit failure flag."""

    text: str
    is_error: bool = False

    def to_payload(self) -> Dict[str, Any]:
        return {"text": self.text, "is_error": self.is_error}

    @classmethod
    def failure(cls, message: str) -> "ToolResult":
        return cls(text=f"Error: {message}", is_error=True)


class Tool(ABC):
    """Base class for operations exposed to the remote agent."""

    arguments_model: type[ToolArguments] = NoArguments

    def __init__(self, name: str, description: str) -> None:
        self._name = _validate_text(name, field_name="tool name")
        self._description = _validate_text(description, field_name="tool description")

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    def input_schema(self) -> Dict[str, Any]:
        """Return the JSON schema describing the tool's arguments."""

        return self.arguments_model.model_json_schema(by_alias=True)

    def parse_arguments(self, raw: Mapping[str, Any] | None) -> BaseModel:
        """Validate ``raw`` against the argument model.

        Raises:
            pydantic.ValidationError: If the arguments do not match.
        """

        return self.arguments_model.model_validate(dict(raw or {}))

    @abstractmethod
    def invoke(self, arguments: BaseModel) -> ToolResult:
        """Execute the tool with already validated arguments."""


ToolHandler = Callable[[Any], ToolResult]


class FunctionTool(Tool):
    """Tool whose behaviour is provided by a plain function."""

    def __init__(
        self,
        name: str,
        description: str,
        handler: ToolHandler,
        *,
        arguments: type[ToolArguments] = NoArguments,
    ) -> None:
        super().__init__(name=name, description=description)
        if not callable(handler):
            raise TypeError("handler must be callable")
        self._handler = handler
        self.arguments_model = arguments

    def invoke(self, arguments: BaseModel) -> ToolResult:
        return self._handler(arguments)


def json_result(payload: Any) -> ToolResult:
    """Render ``payload`` as indented JSON text."""

    return ToolResult(text=json.dumps(payload, ensure_ascii=False, indent=2))


def named(records: Iterable[Record]) -> Iterable[Record]:
    """Skip records the editor shows as blank rows."""

    return (record for record in records if record.get("name", "") != "")


def param_value(record: Record, index: int) -> Any:
    params = record.get("params") or []
    return params[index] if len(params) > index else None


def set_param(record: Record, index: int, value: Any) -> None:
    """Store ``value`` in the ``params`` array, padding a missing or short one with zeros."""

    params = record.get("params")
    if not isinstance(params, list):
        params = record["params"] = []
    if len(params) <= index:
        params.extend([0] * (index + 1 - len(params)))
    params[index] = value


def apply_updates(record: Record, arguments: BaseModel, fields: Mapping[str, str]) -> None:
    """Copy every provided argument onto ``record``.

    ``fields`` maps argument attribute names to record keys; arguments left as
    ``None`` are not touched.
    """

    for attribute, key in fields.items():
        value = getattr(arguments, attribute)
        if value is not None:
            record[key] = value


__all__ = [
    "FunctionTool",
    "Tool",
    "ToolHandler",
    "ToolResult",
    "apply_updates",
    "json_result",
    "named",
    "param_value",
    "set_param",
]
