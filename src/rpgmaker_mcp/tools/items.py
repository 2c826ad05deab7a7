"""Item tools: get_items, create_item, update_item."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import EffectCode, ItemType, Occasion, Scope, default_item, effect
from ..safe_writer import SafeWriter
from ..schemas import CreateItemArguments, UpdateItemArguments
from .base import ToolResult, apply_updates, json_result, named

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from ..toolkit import Toolkit

ITEMS_FILE = "Items.json"


def build_item(arguments: CreateItemArguments) -> dict:
    """Return a new item record described by ``arguments`` (without an ID)."""

    item = default_item()
    item["name"] = arguments.name
    item["description"] = arguments.description
    item["price"] = arguments.price
    item["iconIndex"] = arguments.icon_index
    item["itypeId"] = (
        ItemType.KEY_ITEM.value if arguments.type == "key" else ItemType.REGULAR.value
    )

    effects = item["effects"]
    if arguments.hp_recovery_percent > 0 or arguments.hp_recovery_fixed > 0:
        effects.append(
            effect(
                EffectCode.RECOVER_HP,
                value1=arguments.hp_recovery_percent / 100,
                value2=arguments.hp_recovery_fixed,
            )
        )
    if arguments.mp_recovery_percent > 0 or arguments.mp_recovery_fixed > 0:
        effects.append(
            effect(
                EffectCode.RECOVER_MP,
                value1=arguments.mp_recovery_percent / 100,
                value2=arguments.mp_recovery_fixed,
            )
        )
    if arguments.add_state_id > 0:
        # value1 is the chance to apply the state: always.
        effects.append(effect(EffectCode.ADD_STATE, data_id=arguments.add_state_id, value1=1))

    if effects:
        item["scope"] = Scope.ONE_ALLY.value
        item["occasion"] = Occasion.ALWAYS.value
    return item


def register(toolkit: "Toolkit", writer: SafeWriter) -> None:
    @toolkit.tool("get_items", "Get all items from the database")
    def get_items(arguments: object) -> ToolResult:
        items = writer.read_collection(ITEMS_FILE)
        return json_result(
            [
                {
                    "id": item.get("id"),
                    "name": item.get("name", ""),
                    "description": item.get("description", ""),
                    "price": item.get("price", 0),
                    "iconIndex": item.get("iconIndex", 0),
                    "type": "key" if item.get("itypeId") == ItemType.KEY_ITEM else "regular",
                }
                for item in named(items.populated())
            ]
        )

    @toolkit.tool(
        "create_item",
        "Create a new item with optional HP/MP recovery and state effects",
        CreateItemArguments,
    )
    def create_item(arguments: CreateItemArguments) -> ToolResult:
        items = writer.read_collection(ITEMS_FILE)
        new_id = items.append(build_item(arguments))
        writer.write_collection(ITEMS_FILE, items)
        return ToolResult(f'Created item "{arguments.name}" with ID {new_id}')

    @toolkit.tool("update_item", "Update an existing item in the database", UpdateItemArguments)
    def update_item(arguments: UpdateItemArguments) -> ToolResult:
        items = writer.read_collection(ITEMS_FILE)
        item = items.require(arguments.id, kind="Item")
        apply_updates(
            item,
            arguments,
            {
                "name": "name",
                "description": "description",
                "price": "price",
                "icon_index": "iconIndex",
            },
        )
        writer.write_collection(ITEMS_FILE, items)
        return ToolResult(f'Updated item "{item.get("name", "")}" (ID {arguments.id})')
