"""Remote-callable tools grouped by the database file they operate on."""

from __future__ import annotations

from typing import TYPE_CHECKING

from . import (
    actors,
    armors,
    classes,
    database,
    enemies,
    items,
    limits,
    maps,
    plugins,
    resources,
    skills,
    states,
    weapons,
)
from .base import FunctionTool, Tool, ToolResult
from ..safe_writer import SafeWriter

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from ..toolkit import Toolkit

TOOL_MODULES = (
    database,
    items,
    weapons,
    armors,
    actors,
    classes,
    skills,
    states,
    enemies,
    maps,
    plugins,
    limits,
    resources,
)


def register_all(toolkit: "Toolkit", writer: SafeWriter) -> None:
    """Register every tool module against ``toolkit``."""

    for module in TOOL_MODULES:
        module.register(toolkit, writer)


__all__ = ["FunctionTool", "TOOL_MODULES", "Tool", "ToolResult", "register_all"]
