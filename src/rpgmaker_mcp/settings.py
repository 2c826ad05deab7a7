"""Configuration helpers for running the database tool server."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping


def _normalise_path(value: str | None) -> Path | None:
    if value is None:
        return None

    trimmed = value.strip()
    if not trimmed:
        return None

    return Path(trimmed).expanduser()


def _normalise_string(value: str | None, *, default: str) -> str:
    if value is None:
        return default

    trimmed = value.strip()
    return trimmed or default


@dataclass(frozen=True)
class ServerSettings:
    """Deployment settings for the tool server.

    Values are read from environment variables so the server can be pointed at
    a project without code changes. Paths are expanded to support ``~``
    prefixes while empty strings are treated as if the variable was unset.
    """

    project_root: Path | None = None
    engine_root: Path | None = None
    version_step: int = 1
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ServerSettings":
        """Return settings populated from ``environ``.

        Args:
            environ: Optional mapping of environment variables. When omitted,
                :data:`os.environ` is used.
        """

        source = environ if environ is not None else os.environ

        project_root = _normalise_path(source.get("RPGMAKER_PROJECT_PATH"))
        engine_root = _normalise_path(source.get("RPGMAKER_ENGINE_PATH"))
        log_level = _normalise_string(source.get("RPGMAKER_LOG_LEVEL"), default="INFO").upper()

        version_step = 1
        step_raw = source.get("RPGMAKER_VERSION_STEP")
        if step_raw is not None:
            trimmed_step = step_raw.strip()
            if trimmed_step:
                try:
                    parsed_step = int(trimmed_step)
                except ValueError as exc:
                    raise ValueError(
                        "RPGMAKER_VERSION_STEP must be a positive integer."
                    ) from exc
                if parsed_step < 1:
                    raise ValueError("RPGMAKER_VERSION_STEP must be greater than zero.")
                version_step = parsed_step

        return cls(
            project_root=project_root,
            engine_root=engine_root,
            version_step=version_step,
            log_level=log_level,
        )

    def require_project_root(self) -> Path:
        if self.project_root is None:
            raise ValueError("RPGMAKER_PROJECT_PATH environment variable is required.")
        return self.project_root


__all__ = ["ServerSettings"]
