"""Resolution of logical project paths to filesystem locations."""

from __future__ import annotations

from pathlib import Path


class PathResolver:
    """Map logical paths onto the project root and the optional engine root.

    Relative paths are joined to the project root while absolute paths are
    returned unchanged. The engine root only serves read-only scans of the
    bundled sample resources; when it is not configured the engine-scoped
    helpers return ``None`` so callers can report the feature as unavailable.
    """

    def __init__(self, project_root: Path | str, engine_root: Path | str | None = None) -> None:
        self._project_root = Path(project_root).expanduser()
        self._engine_root = (
            Path(engine_root).expanduser() if engine_root is not None else None
        )

    @property
    def project_root(self) -> Path:
        return self._project_root

    @property
    def engine_root(self) -> Path | None:
        return self._engine_root

    def resolve(self, logical_path: Path | str) -> Path:
        """Return the absolute location of ``logical_path`` inside the project."""

        candidate = Path(logical_path)
        if candidate.is_absolute():
            return candidate
        return self._project_root / candidate

    def resolve_engine(self, logical_path: Path | str) -> Path | None:
        """Return ``logical_path`` joined to the engine root, if one is configured."""

        if self._engine_root is None:
            return None
        return self._engine_root / Path(logical_path)


__all__ = ["PathResolver"]
