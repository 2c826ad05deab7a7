"""Enemy tools: get_enemies, create_enemy, update_enemy."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import Param, default_enemy
from ..safe_writer import SafeWriter
from ..schemas import CreateEnemyArguments, UpdateEnemyArguments
from .base import ToolResult, apply_updates, json_result, named, param_value, set_param

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from ..toolkit import Toolkit

ENEMIES_FILE = "Enemies.json"


def register(toolkit: "Toolkit", writer: SafeWriter) -> None:
    @toolkit.tool("get_enemies", "Get all enemies from the database")
    def get_enemies(arguments: object) -> ToolResult:
        enemies = writer.read_collection(ENEMIES_FILE)
        return json_result(
            [
                {
                    "id": enemy.get("id"),
                    "name": enemy.get("name", ""),
                    "maxHp": param_value(enemy, Param.MHP),
                    "atk": param_value(enemy, Param.ATK),
                    "exp": enemy.get("exp", 0),
                    "gold": enemy.get("gold", 0),
                    "battlerName": enemy.get("battlerName", ""),
                }
                for enemy in named(enemies.populated())
            ]
        )

    @toolkit.tool("create_enemy", "Create a new enemy with battle parameters", CreateEnemyArguments)
    def create_enemy(arguments: CreateEnemyArguments) -> ToolResult:
        enemies = writer.read_collection(ENEMIES_FILE)

        enemy = default_enemy()
        enemy["name"] = arguments.name
        enemy["battlerName"] = arguments.battler_name or arguments.name
        enemy["battlerHue"] = arguments.battler_hue
        enemy["params"] = [
            arguments.max_hp,
            arguments.max_mp,
            arguments.atk,
            arguments.defense,
            arguments.mat,
            arguments.mdf,
            arguments.agi,
            arguments.luk,
        ]
        enemy["exp"] = arguments.exp
        enemy["gold"] = arguments.gold

        new_id = enemies.append(enemy)
        writer.write_collection(ENEMIES_FILE, enemies)
        return ToolResult(f'Created enemy "{arguments.name}" with ID {new_id}')

    @toolkit.tool("update_enemy", "Update an existing enemy's properties", UpdateEnemyArguments)
    def update_enemy(arguments: UpdateEnemyArguments) -> ToolResult:
        enemies = writer.read_collection(ENEMIES_FILE)
        enemy = enemies.require(arguments.id, kind="Enemy")
        apply_updates(
            enemy,
            arguments,
            {
                "name": "name",
                "exp": "exp",
                "gold": "gold",
                "battler_name": "battlerName",
            },
        )
        if arguments.max_hp is not None:
            set_param(enemy, Param.MHP, arguments.max_hp)
        if arguments.atk is not None:
            set_param(enemy, Param.ATK, arguments.atk)
        writer.write_collection(ENEMIES_FILE, enemies)
        return ToolResult(f'Updated enemy "{enemy.get("name", "")}" (ID {arguments.id})')
