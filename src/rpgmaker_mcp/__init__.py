"""Persistence layer and tool server for RPG Maker MZ project databases."""

from .collection import ABSENT, EntityCollection, Present
from .errors import DatabaseError, ReadFailure, ValidationRejection, WriteFailure
from .paths import PathResolver
from .plugin_registry import PluginConfig, PluginRegistryDocument
from .safe_writer import SafeWriter
from .settings import ServerSettings
from .storage import FileHandler
from .toolkit import Toolkit
from .tools.base import ToolResult
from .version import VersionCoordinator

__all__ = [
    "ABSENT",
    "DatabaseError",
    "EntityCollection",
    "FileHandler",
    "PathResolver",
    "PluginConfig",
    "PluginRegistryDocument",
    "Present",
    "ReadFailure",
    "SafeWriter",
    "ServerSettings",
    "Toolkit",
    "ToolResult",
    "ValidationRejection",
    "VersionCoordinator",
    "WriteFailure",
]
