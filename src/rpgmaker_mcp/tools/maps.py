"""Map tools: get_maps, create_map, update_map.

A map lives in two files: its descriptor in ``MapInfos.json`` and its body in
``MapNNN.json``. Creation goes through :meth:`SafeWriter.write_map`, which
orders the two writes; updates only touch the body file.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import ValidationRejection
from ..models import default_map, default_map_info
from ..safe_writer import SafeWriter, data_path, map_filename
from ..schemas import CreateMapArguments, UpdateMapArguments
from .base import ToolResult, json_result

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from ..toolkit import Toolkit


def _next_order(infos) -> int:
    orders = [info.get("order") or 0 for info in infos]
    return max(orders, default=0) + 1


def register(toolkit: "Toolkit", writer: SafeWriter) -> None:
    @toolkit.tool("get_maps", "Get all maps from the project")
    def get_maps(arguments: object) -> ToolResult:
        index = writer.read_map_index()
        return json_result(
            [
                {
                    "id": info.get("id"),
                    "name": info.get("name", ""),
                    "parentId": info.get("parentId", 0),
                    "order": info.get("order", 0),
                }
                for info in index.populated()
            ]
        )

    @toolkit.tool("create_map", "Create a new map in the project", CreateMapArguments)
    def create_map(arguments: CreateMapArguments) -> ToolResult:
        index = writer.read_map_index()
        new_id = index.last_populated_id() + 1

        body = default_map(arguments.width, arguments.height)
        body["displayName"] = arguments.display_name
        body["tilesetId"] = arguments.tileset_id
        body["scrollType"] = arguments.scroll_type
        body["encounterStep"] = arguments.encounter_steps

        info = default_map_info(
            arguments.name,
            parent_id=arguments.parent_id,
            order=_next_order(index.populated()),
        )
        writer.write_map(new_id, body, info)
        return ToolResult(
            f'Created map "{arguments.name}" with ID {new_id} '
            f"({arguments.width}x{arguments.height} tiles)"
        )

    @toolkit.tool("update_map", "Update an existing map's properties", UpdateMapArguments)
    def update_map(arguments: UpdateMapArguments) -> ToolResult:
        filename = map_filename(arguments.id)
        if not writer.files.exists(data_path(filename)):
            raise ValidationRejection(f"Map ID {arguments.id} not found")

        body = writer.read_database(filename)
        if not isinstance(body, dict):
            raise ValidationRejection(f"{filename} does not contain a map")
        if arguments.display_name is not None:
            body["displayName"] = arguments.display_name
        if arguments.tileset_id is not None:
            body["tilesetId"] = arguments.tileset_id
        if arguments.encounter_steps is not None:
            body["encounterStep"] = arguments.encounter_steps
        writer.write_to_database(filename, body)
        return ToolResult(f"Updated map ID {arguments.id}")
