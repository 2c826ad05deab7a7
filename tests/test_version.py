from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from rpgmaker_mcp import FileHandler, SafeWriter, VersionCoordinator, WriteFailure


def test_bump_increments_by_step(files: FileHandler, current_version) -> None:
    coordinator = VersionCoordinator(files, step=5)

    assert coordinator.bump() == 105
    assert current_version() == 105
    assert coordinator.current() == 105


def test_step_must_be_positive(files: FileHandler) -> None:
    with pytest.raises(ValueError):
        VersionCoordinator(files, step=0)


def test_bump_preserves_other_system_fields(files: FileHandler, load_json) -> None:
    VersionCoordinator(files).bump()

    system = load_json("data/System.json")
    assert system["gameTitle"] == "Fixture"
    assert list(system) == ["gameTitle", "versionId"]


def test_missing_version_starts_from_zero(files: FileHandler, project: Path) -> None:
    (project / "data" / "System.json").write_text(json.dumps({"gameTitle": "x"}), encoding="utf-8")

    assert VersionCoordinator(files).bump() == 1


def test_bump_without_system_file_is_skipped(
    files: FileHandler, project: Path, caplog: pytest.LogCaptureFixture
) -> None:
    (project / "data" / "System.json").unlink()

    with caplog.at_level(logging.WARNING, logger="rpgmaker_mcp.version"):
        assert VersionCoordinator(files).bump() is None

    assert "Skipping version bump" in caplog.text
    assert not (project / "data" / "System.json").exists()


def test_three_writes_bump_three_times(writer: SafeWriter, current_version) -> None:
    for _ in range(3):
        collection = writer.read_collection("Items.json")
        collection.append({"name": "Tonic"})
        writer.write_collection("Items.json", collection)

    assert current_version() == 103


def test_failed_write_does_not_bump(
    writer: SafeWriter, current_version, monkeypatch: pytest.MonkeyPatch
) -> None:
    def failing_commit(self: FileHandler, temporary: Path, destination: Path) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(FileHandler, "_commit", failing_commit)

    with pytest.raises(WriteFailure):
        writer.write_to_database("Items.json", [None])

    monkeypatch.undo()
    assert current_version() == 100
