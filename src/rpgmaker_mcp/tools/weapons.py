"""Weapon tools: get_weapons, create_weapon, update_weapon."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import Param, TraitCode, default_weapon, trait
from ..safe_writer import SafeWriter
from ..schemas import CreateWeaponArguments, UpdateWeaponArguments
from .base import ToolResult, apply_updates, json_result, named, param_value, set_param

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from ..toolkit import Toolkit

WEAPONS_FILE = "Weapons.json"


def register(toolkit: "Toolkit", writer: SafeWriter) -> None:
    @toolkit.tool("get_weapons", "Get all weapons from the database")
    def get_weapons(arguments: object) -> ToolResult:
        weapons = writer.read_collection(WEAPONS_FILE)
        return json_result(
            [
                {
                    "id": weapon.get("id"),
                    "name": weapon.get("name", ""),
                    "description": weapon.get("description", ""),
                    "price": weapon.get("price", 0),
                    "attack": param_value(weapon, Param.ATK),
                    "wtypeId": weapon.get("wtypeId"),
                    "iconIndex": weapon.get("iconIndex", 0),
                }
                for weapon in named(weapons.populated())
            ]
        )

    @toolkit.tool(
        "create_weapon",
        "Create a new weapon with attack power and an optional attack element",
        CreateWeaponArguments,
    )
    def create_weapon(arguments: CreateWeaponArguments) -> ToolResult:
        weapons = writer.read_collection(WEAPONS_FILE)

        weapon = default_weapon()
        weapon["name"] = arguments.name
        weapon["description"] = arguments.description
        weapon["price"] = arguments.price
        weapon["wtypeId"] = arguments.wtype_id
        weapon["iconIndex"] = arguments.icon_index
        weapon["animationId"] = arguments.animation_id
        weapon["params"][Param.ATK] = arguments.attack
        if arguments.element_id > 0:
            weapon["traits"].append(
                trait(TraitCode.ATTACK_ELEMENT, data_id=arguments.element_id, value=1)
            )

        new_id = weapons.append(weapon)
        writer.write_collection(WEAPONS_FILE, weapons)
        return ToolResult(f'Created weapon "{arguments.name}" with ID {new_id}')

    @toolkit.tool("update_weapon", "Update an existing weapon's properties", UpdateWeaponArguments)
    def update_weapon(arguments: UpdateWeaponArguments) -> ToolResult:
        weapons = writer.read_collection(WEAPONS_FILE)
        weapon = weapons.require(arguments.id, kind="Weapon")
        apply_updates(
            weapon,
            arguments,
            {
                "name": "name",
                "description": "description",
                "price": "price",
                "icon_index": "iconIndex",
            },
        )
        if arguments.attack is not None:
            set_param(weapon, Param.ATK, arguments.attack)
        writer.write_collection(WEAPONS_FILE, weapons)
        return ToolResult(f'Updated weapon "{weapon.get("name", "")}" (ID {arguments.id})')
