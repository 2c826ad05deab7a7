"""Database size tools: get_database_limits, set_database_limit."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..collection import EntityCollection
from ..errors import ReadFailure, ValidationRejection
from ..models import DATABASE_FILES
from ..safe_writer import SafeWriter
from ..schemas import SetDatabaseLimitArguments
from .base import ToolResult, json_result

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from ..toolkit import Toolkit


def register(toolkit: "Toolkit", writer: SafeWriter) -> None:
    @toolkit.tool("get_database_limits", "Get current maximum limits for all databases")
    def get_database_limits(arguments: object) -> ToolResult:
        limits = {}
        for name, filename in DATABASE_FILES.items():
            try:
                limits[name] = writer.read_collection(filename).limit
            except ReadFailure:
                limits[name] = 0
        return json_result(limits)

    @toolkit.tool(
        "set_database_limit",
        "Set the maximum limit for a database (expands or shrinks the array)",
        SetDatabaseLimitArguments,
    )
    def set_database_limit(arguments: SetDatabaseLimitArguments) -> ToolResult:
        filename = DATABASE_FILES[arguments.database]
        collection: EntityCollection = writer.read_collection(filename)
        current = collection.limit
        try:
            collection.resize(arguments.limit)
        except ValidationRejection as exc:
            raise ValidationRejection(
                f"Cannot shrink {arguments.database} to {arguments.limit}. {exc}"
            ) from exc

        writer.write_collection(filename, collection)
        return ToolResult(
            f"{arguments.database} limit changed from {current} to {arguments.limit}"
        )
