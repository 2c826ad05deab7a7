"""Armor tools: get_armors, create_armor, update_armor."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import Param, default_armor
from ..safe_writer import SafeWriter
from ..schemas import CreateArmorArguments, UpdateArmorArguments
from .base import ToolResult, apply_updates, json_result, named, param_value, set_param

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from ..toolkit import Toolkit

ARMORS_FILE = "Armors.json"


def register(toolkit: "Toolkit", writer: SafeWriter) -> None:
    @toolkit.tool("get_armors", "Get all armors from the database")
    def get_armors(arguments: object) -> ToolResult:
        armors = writer.read_collection(ARMORS_FILE)
        return json_result(
            [
                {
                    "id": armor.get("id"),
                    "name": armor.get("name", ""),
                    "description": armor.get("description", ""),
                    "price": armor.get("price", 0),
                    "def": param_value(armor, Param.DEF),
                    "mdf": param_value(armor, Param.MDF),
                    "atypeId": armor.get("atypeId"),
                    "etypeId": armor.get("etypeId"),
                }
                for armor in named(armors.populated())
            ]
        )

    @toolkit.tool(
        "create_armor",
        "Create a new armor piece with defensive parameters",
        CreateArmorArguments,
    )
    def create_armor(arguments: CreateArmorArguments) -> ToolResult:
        armors = writer.read_collection(ARMORS_FILE)

        armor = default_armor()
        armor["name"] = arguments.name
        armor["description"] = arguments.description
        armor["price"] = arguments.price
        armor["atypeId"] = arguments.atype_id
        armor["etypeId"] = arguments.etype_id
        armor["iconIndex"] = arguments.icon_index
        params = armor["params"]
        params[Param.DEF] = arguments.defense
        params[Param.MDF] = arguments.mdf
        params[Param.AGI] = arguments.agi

        new_id = armors.append(armor)
        writer.write_collection(ARMORS_FILE, armors)
        return ToolResult(f'Created armor "{arguments.name}" with ID {new_id}')

    @toolkit.tool("update_armor", "Update an existing armor's properties", UpdateArmorArguments)
    def update_armor(arguments: UpdateArmorArguments) -> ToolResult:
        armors = writer.read_collection(ARMORS_FILE)
        armor = armors.require(arguments.id, kind="Armor")
        apply_updates(
            armor,
            arguments,
            {
                "name": "name",
                "description": "description",
                "price": "price",
                "icon_index": "iconIndex",
            },
        )
        if arguments.defense is not None:
            set_param(armor, Param.DEF, arguments.defense)
        if arguments.mdf is not None:
            set_param(armor, Param.MDF, arguments.mdf)
        writer.write_collection(ARMORS_FILE, armors)
        return ToolResult(f'Updated armor "{armor.get("name", "")}" (ID {arguments.id})')
