"""Plugin tools: get_installed_plugins, install_plugin."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from ..errors import ReadFailure, WriteFailure
from ..plugin_registry import PluginConfig
from ..safe_writer import PLUGINS_DIR, SafeWriter, validate_plugin_name
from ..schemas import InstallPluginArguments
from .base import ToolResult, json_result

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from ..toolkit import Toolkit

logger = logging.getLogger(__name__)

MZ_HEADER = re.compile(r"/\*:\s*\n?\s*\*\s*@target\s+MZ", re.IGNORECASE)


def plugin_header(description: str, author: str) -> str:
    return (
        "/*:\n"
        " * @target MZ\n"
        f" * @plugindesc {description}\n"
        f" * @author {author}\n"
        " * @help\n"
        " * This plugin was installed via MCP server.\n"
        " */\n"
    )


def with_header(code: str, description: str, author: str) -> str:
    """Prepend an annotation block unless ``code`` already declares MZ."""

    if MZ_HEADER.search(code):
        return code
    return plugin_header(description, author) + "\n" + code


def register(toolkit: "Toolkit", writer: SafeWriter) -> None:
    @toolkit.tool(
        "get_installed_plugins",
        "Get all installed plugins with their registration status",
    )
    def get_installed_plugins(arguments: object) -> ToolResult:
        try:
            registered = writer.read_plugin_registry().entries
        except ReadFailure as exc:
            logger.warning("Ignoring unreadable plugin registry: %s", exc)
            registered = []

        names = {entry.name for entry in registered}
        available = [
            filename[: -len(".js")]
            for filename in writer.files.list_files(PLUGINS_DIR, ".js")
        ]
        return json_result(
            {
                "registered": [
                    {
                        "name": entry.name,
                        "status": "ON" if entry.status else "OFF",
                        "description": entry.description,
                    }
                    for entry in registered
                ],
                "available": [name for name in available if name not in names],
            }
        )

    @toolkit.tool(
        "install_plugin",
        "Install a new plugin and register it in plugins.js",
        InstallPluginArguments,
    )
    def install_plugin(arguments: InstallPluginArguments) -> ToolResult:
        name = validate_plugin_name(arguments.filename)
        writer.write_plugin(name, with_header(arguments.code, arguments.description, arguments.author))

        try:
            document = writer.read_plugin_registry()
        except ReadFailure as exc:
            # The script stays on disk; it is inert until registered.
            raise WriteFailure(
                f"Plugin script {name}.js was written but the registry could not be read: {exc}",
                path=exc.path,
            ) from exc
        document.upsert(PluginConfig(name=name, status=True, description=arguments.description))
        writer.update_plugin_registry(document.entries)
        return ToolResult(f'Plugin "{name}" installed and registered successfully')
