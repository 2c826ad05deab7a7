"""Test configuration for the RPG Maker MZ database tools."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import json
import logging
from typing import Any

import pytest

from rpgmaker_mcp import (
    FileHandler,
    PathResolver,
    SafeWriter,
    Toolkit,
    VersionCoordinator,
)

PLUGINS_JS = (
    "// Generated by RPG Maker.\n"
    "// Do not edit this file directly.\n"
    "var $plugins =\n"
    "[\n"
    '{"name":"TextPicture","status":true,"description":"Text as picture","parameters":{}}\n'
    "];\n"
)


def write_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def _record(entity_id: int, name: str, **fields: Any) -> dict[str, Any]:
    return {"id": entity_id, "name": name, **fields}


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Create a small MZ project with a populated database."""

    root = tmp_path / "project"
    data = root / "data"
    write_json(data / "System.json", {"gameTitle": "Fixture", "versionId": 100})
    write_json(
        data / "Items.json",
        [
            None,
            _record(1, "Potion", description="Restores HP", price=50, iconIndex=176, itypeId=1),
            _record(2, "Key", description="Opens a door", price=0, iconIndex=195, itypeId=2),
        ],
    )
    write_json(data / "Weapons.json", [None, _record(1, "Sword", params=[0, 0, 10, 0, 0, 0, 0, 0])])
    write_json(data / "Armors.json", [None, _record(1, "Shield", params=[0, 0, 0, 8, 0, 2, 0, 0])])
    write_json(data / "Actors.json", [None, _record(1, "Reid", classId=1, initialLevel=1, maxLevel=99)])
    write_json(data / "Classes.json", [None, _record(1, "Swordsman", expParams=[30, 20, 30, 30])])
    write_json(data / "Skills.json", [None, _record(1, "Attack", mpCost=0, tpCost=0, scope=1)])
    write_json(data / "States.json", [None, _record(1, "Knockout", restriction=4), None])
    write_json(data / "Enemies.json", [None, _record(1, "Bat", params=[200, 0, 30, 20, 10, 10, 30, 10])])
    write_json(
        data / "MapInfos.json",
        [
            None,
            _record(1, "World", parentId=0, order=1),
            _record(2, "Town", parentId=1, order=2),
            _record(3, "Castle", parentId=1, order=3),
        ],
    )
    for map_id in (1, 2, 3):
        write_json(
            data / f"Map{map_id:03d}.json",
            {"displayName": "", "tilesetId": 1, "width": 2, "height": 2, "encounterStep": 30},
        )

    plugins = root / "js" / "plugins"
    plugins.mkdir(parents=True)
    (plugins / "TextPicture.js").write_text("// text picture\n", encoding="utf-8")
    (plugins / "Unused.js").write_text("// not registered\n", encoding="utf-8")
    (root / "js" / "plugins.js").write_text(PLUGINS_JS, encoding="utf-8")
    return root


@pytest.fixture
def files(project: Path) -> FileHandler:
    return FileHandler(PathResolver(project))


@pytest.fixture
def writer(files: FileHandler) -> SafeWriter:
    return SafeWriter(files, VersionCoordinator(files))


@pytest.fixture
def toolkit(writer: SafeWriter) -> Toolkit:
    return Toolkit(writer)


@pytest.fixture
def load_json(project: Path):
    """Return a reader for project-relative JSON files."""

    def _load(relative: str) -> Any:
        return read_json(project / relative)

    return _load


@pytest.fixture
def current_version(load_json):
    return lambda: load_json("data/System.json")["versionId"]


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers bound to captured streams between tests."""

    yield
    logger = logging.getLogger("rpgmaker_mcp")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
