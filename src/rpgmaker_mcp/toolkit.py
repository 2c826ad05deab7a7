"""Registry dispatching named tool calls onto the persistence layer."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Iterable, Mapping

from pydantic import ValidationError

from .errors import DatabaseError
from .paths import PathResolver
from .safe_writer import SafeWriter
from .schemas import NoArguments, ToolArguments
from .settings import ServerSettings
from .storage import FileHandler
from .tools import register_all
from .tools.base import FunctionTool, Tool, ToolHandler, ToolResult
from .version import VersionCoordinator

logger = logging.getLogger(__name__)


def _describe_validation_error(error: ValidationError) -> str:
    problems = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail.get("loc", ())) or "arguments"
        problems.append(f"{location}: {detail.get('msg', 'invalid value')}")
    return "Invalid arguments - " + "; ".join(problems)


class Toolkit:
    """Named collection of tools sharing one :class:`SafeWriter`.

    Every invocation holds a lock for its whole read-modify-write cycle, so two
    concurrent requests can never interleave their reads and writes of the same
    database file.
    """

    def __init__(self, writer: SafeWriter, *, register_defaults: bool = True) -> None:
        self._writer = writer
        self._tools: Dict[str, Tool] = {}
        self._lock = threading.Lock()
        if register_defaults:
            register_all(self, writer)

    @classmethod
    def from_settings(cls, settings: ServerSettings) -> "Toolkit":
        """Build the full stack of collaborators for ``settings``."""

        resolver = PathResolver(settings.require_project_root(), settings.engine_root)
        files = FileHandler(resolver)
        version = VersionCoordinator(files, step=settings.version_step)
        return cls(SafeWriter(files, version))

    @property
    def writer(self) -> SafeWriter:
        return self._writer

    def register(self, tool: Tool) -> None:
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool

    def tool(
        self,
        name: str,
        description: str,
        arguments: type[ToolArguments] = NoArguments,
    ) -> Callable[[ToolHandler], ToolHandler]:
        """Decorator registering a plain function as a tool."""

        def decorator(handler: ToolHandler) -> ToolHandler:
            self.register(FunctionTool(name, description, handler, arguments=arguments))
            return handler

        return decorator

    def get(self, name: str) -> Tool:
        try:
            return self._tools[name]
        except KeyError:
            raise KeyError(f"Unknown tool '{name}'") from None

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    @property
    def available_tools(self) -> Iterable[Tool]:
        return tuple(self._tools.values())

    def invoke(self, name: str, arguments: Mapping[str, Any] | None = None) -> ToolResult:
        """Run tool ``name`` and turn every failure into an error result.

        Raises:
            KeyError: If no tool is registered under ``name``.
        """

        tool = self.get(name)
        with self._lock:
            try:
                parsed = tool.parse_arguments(arguments)
                result = tool.invoke(parsed)
            except ValidationError as exc:
                logger.info("Rejected arguments for %s: %s", name, exc)
                return ToolResult.failure(_describe_validation_error(exc))
            except DatabaseError as exc:
                logger.warning("Tool %s failed: %s", name, exc)
                return ToolResult.failure(str(exc))
            except Exception as exc:  # pragma: no cover - unexpected tool bug
                logger.exception("Tool %s raised an unexpected error", name)
                return ToolResult.failure(str(exc))

        logger.debug("Tool %s succeeded", name)
        return result


__all__ = ["Toolkit"]
