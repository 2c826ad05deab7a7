"""Summary tool: get_database_info."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..safe_writer import SafeWriter
from .base import ToolResult, json_result, named

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from ..toolkit import Toolkit

SUMMARY_FILES = {
    "actors": "Actors.json",
    "classes": "Classes.json",
    "skills": "Skills.json",
    "items": "Items.json",
    "weapons": "Weapons.json",
    "armors": "Armors.json",
    "enemies": "Enemies.json",
    "states": "States.json",
}


def register(toolkit: "Toolkit", writer: SafeWriter) -> None:
    @toolkit.tool(
        "get_database_info",
        "Get a summary of all database contents (actors, classes, items, skills, weapons, armors counts)",
    )
    def get_database_info(arguments: object) -> ToolResult:
        summary = {}
        for name, filename in SUMMARY_FILES.items():
            collection = writer.read_collection(filename)
            summary[name] = {"count": sum(1 for _ in named(collection.populated()))}
        return json_result(summary)
