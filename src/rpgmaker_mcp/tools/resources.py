"""Resource discovery tools.

``scan_resources`` looks at the project and, when configured, at the engine's
``newdata`` folder. The remaining tools only read the engine install and report
the feature as unavailable, without failing, when ``RPGMAKER_ENGINE_PATH`` is
not set.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Tuple

from ..safe_writer import PLUGINS_DIR, SafeWriter
from ..schemas import ScanResourcesArguments
from .base import ToolResult, json_result

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from ..toolkit import Toolkit

AUDIO_CATEGORIES = frozenset({"bgm", "bgs", "me", "se"})
ENGINE_DATA_DIR = "newdata"

_SAMPLE_MAP = re.compile(r"^Map(\d+)\.json$")


def category_path(category: str) -> str:
    """Return the project-relative folder holding ``category`` resources."""

    if category in AUDIO_CATEGORIES:
        return f"audio/{category}"
    if category == "plugins":
        return PLUGINS_DIR
    return f"img/{category}"


ENGINE_UNAVAILABLE = "Feature unavailable: RPGMAKER_ENGINE_PATH not set"


def _unavailable() -> ToolResult:
    return ToolResult(ENGINE_UNAVAILABLE)


def _version_key(name: str) -> Tuple[int, ...]:
    parts = []
    for piece in name[1:].split("."):
        parts.append(int(piece) if piece.isdigit() else 0)
    return tuple(parts)


def register(toolkit: "Toolkit", writer: SafeWriter) -> None:
    files = writer.files
    engine = files.resolver.resolve_engine

    @toolkit.tool(
        "scan_resources",
        "Scan available resources from project and/or engine",
        ScanResourcesArguments,
    )
    def scan_resources(arguments: ScanResourcesArguments) -> ToolResult:
        folder = category_path(arguments.category)
        suffix = ".js" if arguments.category == "plugins" else None

        result = {"project": [], "engine": []}
        if arguments.source in ("project", "all"):
            result["project"] = files.list_files(folder, suffix)
        if arguments.source in ("engine", "all"):
            engine_folder = engine(f"{ENGINE_DATA_DIR}/{folder}")
            if engine_folder is not None:
                result["engine"] = files.list_files(engine_folder, suffix)
        return json_result(result)

    @toolkit.tool("scan_dlc_packages", "List all DLC packages in the engine folder")
    def scan_dlc_packages(arguments: object) -> ToolResult:
        dlc = engine("dlc")
        if dlc is None:
            return _unavailable()
        packages = files.list_dirs(dlc)
        return json_result([name for name in packages if not name.startswith(".")])

    @toolkit.tool("get_generator_parts", "List available character generator parts")
    def get_generator_parts(arguments: object) -> ToolResult:
        generator = engine("generator")
        if generator is None:
            return _unavailable()
        parts = {}
        for category in files.list_dirs(generator):
            try:
                parts[category] = sum(
                    1 for path in (generator / category).rglob("*.png") if path.is_file()
                )
            except OSError:
                parts[category] = 0
        return json_result(parts)

    @toolkit.tool("get_sample_maps", "List available sample maps from the engine")
    def get_sample_maps(arguments: object) -> ToolResult:
        samplemaps = engine("samplemaps")
        if samplemaps is None:
            return _unavailable()

        maps = []
        for filename in files.list_files(samplemaps, ".json"):
            match = _SAMPLE_MAP.match(filename)
            if match is None:
                continue
            maps.append(
                {
                    "id": int(match.group(1)),
                    "jsonFile": filename,
                    "previewFile": filename[: -len(".json")] + ".png",
                }
            )
        maps.sort(key=lambda entry: entry["id"])
        return json_result(maps)

    @toolkit.tool("get_core_script_versions", "List available core script versions")
    def get_core_script_versions(arguments: object) -> ToolResult:
        corescript = engine("corescript")
        if corescript is None:
            return _unavailable()

        versions = [name for name in files.list_dirs(corescript) if name.startswith("v")]
        return json_result(sorted(versions, key=_version_key))
