"""Class tools: get_classes, create_class, update_class."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import Param, default_class, flat_curve
from ..safe_writer import SafeWriter
from ..schemas import CreateClassArguments, UpdateClassArguments
from .base import ToolResult, json_result, named

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from ..toolkit import Toolkit

CLASSES_FILE = "Classes.json"


def register(toolkit: "Toolkit", writer: SafeWriter) -> None:
    @toolkit.tool("get_classes", "Get all character classes from the database")
    def get_classes(arguments: object) -> ToolResult:
        classes = writer.read_collection(CLASSES_FILE)
        return json_result(
            [
                {
                    "id": entry.get("id"),
                    "name": entry.get("name", ""),
                    "expParams": entry.get("expParams", []),
                    "learnings": len(entry.get("learnings") or []),
                }
                for entry in named(classes.populated())
            ]
        )

    @toolkit.tool(
        "create_class",
        "Create a new character class with an EXP curve and base parameters",
        CreateClassArguments,
    )
    def create_class(arguments: CreateClassArguments) -> ToolResult:
        classes = writer.read_collection(CLASSES_FILE)

        entry = default_class()
        entry["name"] = arguments.name
        entry["expParams"][0] = arguments.exp_base
        entry["expParams"][1] = arguments.exp_accel
        # Same value at every level; the editor's curve tool can shape it later.
        params = entry["params"]
        params[Param.MHP] = flat_curve(arguments.max_hp)
        params[Param.MMP] = flat_curve(arguments.max_mp)
        params[Param.ATK] = flat_curve(arguments.atk)
        params[Param.DEF] = flat_curve(arguments.defense)

        new_id = classes.append(entry)
        writer.write_collection(CLASSES_FILE, classes)
        return ToolResult(f'Created class "{arguments.name}" with ID {new_id}')

    @toolkit.tool("update_class", "Rename an existing class", UpdateClassArguments)
    def update_class(arguments: UpdateClassArguments) -> ToolResult:
        classes = writer.read_collection(CLASSES_FILE)
        entry = classes.require(arguments.id, kind="Class")
        if arguments.name is not None:
            entry["name"] = arguments.name
        writer.write_collection(CLASSES_FILE, classes)
        return ToolResult(f'Updated class "{entry.get("name", "")}" (ID {arguments.id})')
