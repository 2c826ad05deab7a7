"""Reader/writer primitives for the project's JSON database and scripts.

Every write goes through the same protocol:

1. serialise the payload in memory (nothing on disk is touched if this fails);
2. copy the current target ``T`` to ``T.bak`` when ``T`` already exists, and
   abort with :class:`~rpgmaker_mcp.errors.WriteFailure` if the copy fails;
3. write the new content to a sibling ``T.tmp`` file, flush and fsync it;
4. swap the temporary file over ``T`` with :func:`os.replace`.

Readers of ``T`` (including the game editor) therefore only ever observe the
old or the new content, and ``T.bak`` always holds the content ``T`` had before
the most recent write.
"""

from __future__ import annotations

import json
import logging
import os
import shutil
from pathlib import Path
from typing import Any

from .errors import ReadFailure, WriteFailure
from .paths import PathResolver

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".bak"
TEMPORARY_SUFFIX = ".tmp"


def dumps_json(data: Any) -> str:
    """Return the diff-friendly JSON text used for every database file."""

    try:
        return json.dumps(data, ensure_ascii=False, indent=2)
    except (TypeError, ValueError) as exc:
        raise WriteFailure("Data could not be serialised to JSON.") from exc


def backup_path_for(path: Path) -> Path:
    return path.with_name(path.name + BACKUP_SUFFIX)


def _temporary_path_for(path: Path) -> Path:
    return path.with_name(path.name + TEMPORARY_SUFFIX)


class FileHandler:
    """Filesystem access for a single RPG Maker project."""

    def __init__(self, resolver: PathResolver) -> None:
        self._resolver = resolver

    @property
    def resolver(self) -> PathResolver:
        return self._resolver

    def resolve(self, logical_path: Path | str) -> Path:
        return self._resolver.resolve(logical_path)

    # Reading -----------------------------------------------------------------

    def read_text(self, logical_path: Path | str) -> str:
        """Return the full text content of ``logical_path``."""

        path = self.resolve(logical_path)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise ReadFailure(f"File '{path}' does not exist.", path=path) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadFailure(f"Failed to read '{path}'.", path=path) from exc

    def read_json(self, logical_path: Path | str) -> Any:
        """Load and parse the JSON document stored at ``logical_path``."""

        content = self.read_text(logical_path)
        path = self.resolve(logical_path)
        try:
            return json.loads(content)
        except ValueError as exc:
            raise ReadFailure(f"File '{path}' is not valid JSON.", path=path) from exc

    def exists(self, logical_path: Path | str) -> bool:
        """Return ``True`` when ``logical_path`` resolves to an accessible entry."""

        try:
            return self.resolve(logical_path).exists()
        except OSError:
            return False

    def list_files(
        self, logical_dir: Path | str, suffix: str | None = None
    ) -> list[str]:
        """Return the sorted file names inside ``logical_dir``.

        Missing or unreadable directories yield an empty list.
        """

        return _list_entries(self.resolve(logical_dir), files=True, suffix=suffix)

    def list_dirs(self, logical_dir: Path | str) -> list[str]:
        """Return the sorted sub-directory names inside ``logical_dir``."""

        return _list_entries(self.resolve(logical_dir), files=False)

    # Writing -----------------------------------------------------------------

    def write_json(self, logical_path: Path | str, data: Any) -> Path:
        """Serialise ``data`` and atomically replace ``logical_path`` with it."""

        return self.write_text(logical_path, dumps_json(data))

    def write_text(self, logical_path: Path | str, content: str) -> Path:
        """Atomically replace ``logical_path`` with ``content``.

        Raises:
            WriteFailure: If the directory, the backup, or the replacement
                could not be completed. The target keeps its previous content.
        """

        target = self.resolve(logical_path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise WriteFailure(
                f"Failed to prepare directory '{target.parent}'.", path=target
            ) from exc

        if target.exists():
            self.backup(target)

        temporary = _temporary_path_for(target)
        try:
            self._write_temporary(temporary, content)
            self._commit(temporary, target)
        except OSError as exc:
            temporary.unlink(missing_ok=True)
            raise WriteFailure(f"Failed to write '{target}'.", path=target) from exc

        logger.debug("Wrote %s (%d characters)", target, len(content))
        return target

    def backup(self, logical_path: Path | str) -> Path:
        """Copy the current content of ``logical_path`` to its ``.bak`` sibling."""

        source = self.resolve(logical_path)
        destination = backup_path_for(source)
        try:
            shutil.copyfile(source, destination)
        except OSError as exc:
            raise WriteFailure(
                f"Failed to back up '{source}' to '{destination}'.", path=source
            ) from exc

        logger.debug("Backed up %s to %s", source, destination)
        return destination

    def _write_temporary(self, temporary: Path, content: str) -> None:
        with temporary.open("w", encoding="utf-8") as handle:
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())

    def _commit(self, temporary: Path, target: Path) -> None:
        os.replace(temporary, target)


def _list_entries(directory: Path, *, files: bool, suffix: str | None = None) -> list[str]:
    try:
        entries = list(directory.iterdir())
    except OSError:
        return []

    names: list[str] = []
    for entry in entries:
        if files and not entry.is_file():
            continue
        if not files and not entry.is_dir():
            continue
        if suffix and not entry.name.endswith(suffix):
            continue
        names.append(entry.name)
    return sorted(names)


__all__ = ["BACKUP_SUFFIX", "FileHandler", "backup_path_for", "dumps_json"]
