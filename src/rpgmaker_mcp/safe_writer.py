"""Entry points the tools use to read and persist project data.

The writer sequences multi-file mutations so that every intermediate state on
disk is valid for the editor:

* database writes bump the version counter only after the file was replaced;
* a new map writes its body file before the index entry that makes it
  visible, and an index failure leaves the (inert) body file in place;
* a plugin script is written before the registry entry that enables it, and
  the registry script is edited in place rather than regenerated.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path, PurePosixPath
from typing import Any, Iterable, Mapping

from .collection import EntityCollection, Record
from .errors import ReadFailure, ValidationRejection, WriteFailure
from .plugin_registry import PluginConfig, PluginRegistryDocument
from .storage import FileHandler
from .version import VersionCoordinator

logger = logging.getLogger(__name__)

DATA_DIR = "data"
MAP_INDEX_FILE = "MapInfos.json"
PLUGINS_DIR = "js/plugins"
PLUGIN_REGISTRY_FILE = "js/plugins.js"

_PLUGIN_NAME = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_.\-]*$")


def data_path(filename: str) -> str:
    return str(PurePosixPath(DATA_DIR) / filename)


def map_filename(map_id: int) -> str:
    """Return the body file name of a map, e.g. ``Map007.json``."""

    return f"Map{map_id:03d}.json"


def plugin_path(name: str) -> str:
    return str(PurePosixPath(PLUGINS_DIR) / f"{name}.js")


def validate_plugin_name(name: str) -> str:
    stripped = name.strip()
    if stripped.endswith(".js"):
        stripped = stripped[: -len(".js")]
    if not stripped or not _PLUGIN_NAME.match(stripped) or ".." in stripped:
        raise ValidationRejection(f"Invalid plugin name '{name}'")
    return stripped


class SafeWriter:
    """Collaborator-facing persistence contract for the tool modules."""

    def __init__(self, files: FileHandler, version: VersionCoordinator) -> None:
        self._files = files
        self._version = version

    @property
    def files(self) -> FileHandler:
        return self._files

    @property
    def version(self) -> VersionCoordinator:
        return self._version

    # Database files -----------------------------------------------------------

    def read_database(self, filename: str) -> Any:
        """Return the parsed content of ``data/<filename>``."""

        return self._files.read_json(data_path(filename))

    def read_collection(self, filename: str) -> EntityCollection:
        """Return the entity collection stored in ``data/<filename>``."""

        payload = self.read_database(filename)
        try:
            return EntityCollection.from_payload(payload, name=filename)
        except ReadFailure as exc:
            raise ReadFailure(str(exc), path=self._files.resolve(data_path(filename))) from exc

    def write_to_database(self, filename: str, data: Any) -> int | None:
        """Replace ``data/<filename>`` and signal the editor.

        Returns the new version identifier, or ``None`` when the bump was
        skipped. No bump happens when the write itself fails.
        """

        self._files.write_json(data_path(filename), data)
        logger.info("Updated %s", filename)
        return self._version.bump()

    def write_collection(self, filename: str, collection: EntityCollection) -> int | None:
        return self.write_to_database(filename, collection.to_payload())

    # Maps ---------------------------------------------------------------------

    def read_map_index(self) -> EntityCollection:
        """Return the map index, or an empty one for a project without maps."""

        if not self._files.exists(data_path(MAP_INDEX_FILE)):
            return EntityCollection()
        return self.read_collection(MAP_INDEX_FILE)

    def write_map(self, map_id: int, body: Mapping[str, Any], info: Record) -> int | None:
        """Create map ``map_id`` from its body and its index descriptor.

        The index is only read before the body is written; it is replaced after
        the body file is in place so the editor never sees an entry without a
        body. A failed index write leaves the unregistered body on disk.
        """

        index = self.read_map_index()
        if map_id < 1:
            raise ValidationRejection(f"Map ID {map_id} is reserved")
        if index.get(map_id) is not None:
            raise ValidationRejection(f"Map ID {map_id} is already registered")

        body_file = map_filename(map_id)
        self._files.write_json(data_path(body_file), dict(body))

        index.place(map_id, info)
        try:
            self._files.write_json(data_path(MAP_INDEX_FILE), index.to_payload())
        except WriteFailure as exc:
            logger.warning("Map body %s left unregistered: %s", body_file, exc)
            raise

        logger.info("Created map %d (%s)", map_id, body_file)
        return self._version.bump()

    # Plugins ------------------------------------------------------------------

    def write_plugin(self, name: str, code: str) -> Path:
        """Write the script of plugin ``name`` without registering it."""

        validated = validate_plugin_name(name)
        path = self._files.write_text(plugin_path(validated), code)
        logger.info("Wrote plugin script %s", path)
        return path

    def read_plugin_registry(self) -> PluginRegistryDocument:
        """Return the parsed registry, or an empty one when none exists."""

        if not self._files.exists(PLUGIN_REGISTRY_FILE):
            return PluginRegistryDocument()
        return PluginRegistryDocument.parse(self._files.read_text(PLUGIN_REGISTRY_FILE))

    def update_plugin_registry(self, entries: Iterable[PluginConfig]) -> Path:
        """Replace the registered plugins while keeping the rest of the script."""

        try:
            document = self.read_plugin_registry()
        except ReadFailure as exc:
            raise WriteFailure(
                f"Refusing to rewrite {PLUGIN_REGISTRY_FILE}: {exc}", path=exc.path
            ) from exc

        document.replace_entries(entries)
        path = self._files.write_text(PLUGIN_REGISTRY_FILE, document.render())
        logger.info("Updated plugin registry %s", path)
        return path


__all__ = [
    "DATA_DIR",
    "MAP_INDEX_FILE",
    "PLUGINS_DIR",
    "PLUGIN_REGISTRY_FILE",
    "SafeWriter",
    "data_path",
    "map_filename",
    "plugin_path",
    "validate_plugin_name",
]
