"""Version counter signalling the running editor to reload the database."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import DatabaseError, ReadFailure
from .storage import FileHandler

logger = logging.getLogger(__name__)

SYSTEM_FILE = "data/System.json"
VERSION_FIELD = "versionId"


class VersionCoordinator:
    """Increment ``versionId`` in ``System.json`` after database mutations.

    The counter is advisory: it tells the editor that files changed on disk.
    A bump that cannot be completed is logged and skipped because the data
    write it follows has already succeeded; the next successful bump catches
    the editor up.
    """

    def __init__(
        self,
        files: FileHandler,
        *,
        step: int = 1,
        system_file: Path | str = SYSTEM_FILE,
    ) -> None:
        if step < 1:
            raise ValueError("step must be greater than zero")
        self._files = files
        self._step = step
        self._system_file = system_file

    @property
    def step(self) -> int:
        return self._step

    def current(self) -> int:
        """Return the stored version identifier."""

        system = self._files.read_json(self._system_file)
        if not isinstance(system, dict):
            raise ReadFailure("System.json must be a JSON object.")
        return _coerce_version(system.get(VERSION_FIELD))

    def bump(self) -> int | None:
        """Increase the version identifier and return the new value.

        Returns ``None`` when the system file could not be updated.
        """

        try:
            system = self._files.read_json(self._system_file)
        except ReadFailure as exc:
            logger.warning("Skipping version bump: %s", exc)
            return None

        if not isinstance(system, dict):
            logger.warning("Skipping version bump: System.json is not a JSON object")
            return None

        new_version = _coerce_version(system.get(VERSION_FIELD)) + self._step
        system[VERSION_FIELD] = new_version
        try:
            self._files.write_json(self._system_file, system)
        except DatabaseError as exc:
            logger.warning("Skipping version bump: %s", exc)
            return None

        logger.info("Bumped %s to %d", VERSION_FIELD, new_version)
        return new_version


def _coerce_version(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


__all__ = ["SYSTEM_FILE", "VERSION_FIELD", "VersionCoordinator"]
